"""
Services package for the Mews integration and availability resolution.
"""

from .mews_service import MewsAvailabilityClient
from .availability_resolver import AvailabilityResolver, correct_checkout_days

__all__ = ['MewsAvailabilityClient', 'AvailabilityResolver', 'correct_checkout_days']
