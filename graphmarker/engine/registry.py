"""Feature registry — every feature kind is a class registered via decorator.

Usage:
    @feature(tag="slope", scope=Scope.LINE, order=1)
    class SlopeFeature(LineFeature):
        ...

The set of kinds is closed: ``graphmarker.engine.features`` imports each
module explicitly, and parsing an unregistered tag is an error.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphmarker.engine.features.base import Feature

logger = logging.getLogger(__name__)


class Scope(enum.IntEnum):
    INPUT = 0  # judges the whole answer
    LINE = 1  # judges one line chosen by a selector


@dataclass
class FeatureSpec:
    tag: str
    scope: Scope
    kind: type["Feature"]
    order: int = 0  # position in generated text within its scope
    generated: bool = True
    description: str = ""


class FeatureRegistry:
    """Registry of all feature kinds, keyed by lower-case tag."""

    def __init__(self) -> None:
        self._features: dict[str, FeatureSpec] = {}

    def register(self, spec: FeatureSpec) -> None:
        key = spec.tag.lower()
        if key in self._features:
            raise ValueError(f"Duplicate feature tag: {spec.tag}")
        self._features[key] = spec
        logger.debug("Registered feature %s (%s)", spec.tag, spec.scope.name)

    def get(self, tag: str) -> FeatureSpec | None:
        return self._features.get(tag.strip().lower())

    def get_scope(self, scope: Scope) -> list[FeatureSpec]:
        specs = [s for s in self._features.values() if s.scope == scope]
        return sorted(specs, key=lambda s: (s.order, s.tag))

    def generators(self, scope: Scope) -> list[FeatureSpec]:
        return [s for s in self.get_scope(scope) if s.generated]

    def all(self) -> list[FeatureSpec]:
        return sorted(self._features.values(), key=lambda s: (s.scope, s.order, s.tag))

    @property
    def count(self) -> int:
        return len(self._features)


# Module-level singleton
_registry = FeatureRegistry()


def get_registry() -> FeatureRegistry:
    return _registry


def feature(
    *,
    tag: str,
    scope: Scope,
    order: int = 0,
    generated: bool = True,
    description: str = "",
):
    """Decorator to register a feature class under its tag."""

    def decorator(cls: type["Feature"]):
        cls.tag = tag
        _registry.register(
            FeatureSpec(
                tag=tag,
                scope=scope,
                kind=cls,
                order=order,
                generated=generated,
                description=description,
            )
        )
        return cls

    return decorator
