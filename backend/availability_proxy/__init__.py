"""
Availability proxy: unavailable dates for one room category from the Mews Connector API.
"""
