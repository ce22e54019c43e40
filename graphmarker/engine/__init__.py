"""graphmarker sketch-marking engine."""

from graphmarker.engine.config import DEFAULT_CONFIG, MarkerConfig
from graphmarker.engine.data import Input, Line, Point, PointOfInterest, PointType
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.marker import Marker
from graphmarker.engine.registry import Scope, feature, get_registry
from graphmarker.engine.specification import Specification, generate

__all__ = [
    "DEFAULT_CONFIG",
    "MarkerConfig",
    "Input",
    "Line",
    "Point",
    "PointOfInterest",
    "PointType",
    "SpecificationError",
    "Marker",
    "Scope",
    "feature",
    "get_registry",
    "Specification",
    "generate",
]
