"""
API package for FastAPI routers and endpoints.
"""

from .availability import router as availability_router

__all__ = ['availability_router']
