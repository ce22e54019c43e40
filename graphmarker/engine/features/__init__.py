"""Feature kinds. Importing this package registers every one of them."""

from graphmarker.engine.features import curves, intersects, points, slope, symmetry, through  # noqa: F401
from graphmarker.engine.features.base import Feature, FeatureContext, InputFeature, LineFeature, get_context

__all__ = [
    "Feature",
    "FeatureContext",
    "InputFeature",
    "LineFeature",
    "get_context",
]
