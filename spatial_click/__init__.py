"""Spatial click resolution for interactive maps.

Loads named points and polygon regions from two remote providers,
freezes them into a ``FeatureStore``, and resolves a clicked map
coordinate to the feature it hits: a point, a region, or nothing.
"""

__version__ = "0.1.0"
