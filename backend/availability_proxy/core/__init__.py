"""
Core package for configuration, error taxonomy, and shared utilities.
"""

from .config import settings, Settings, UpstreamConfig, load_upstream_config
from .errors import (
    AvailabilityProxyError,
    ConfigurationError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    'settings',
    'Settings',
    'UpstreamConfig',
    'load_upstream_config',
    'AvailabilityProxyError',
    'ConfigurationError',
    'UpstreamError',
    'ValidationError',
]
