"""Processing steps.

- normalize: Raw provider records → typed point and region features
- resolve_hit: Clicked coordinate + feature store → resolved feature
"""
