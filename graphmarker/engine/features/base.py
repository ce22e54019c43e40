"""Feature capability interface shared by every kind.

Each kind parses its clause text into an instance (``deserialize``), tests a
candidate (``test``), writes its clause text back out (``serialize``), and may
synthesise clause text from an example (``generate``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import ClassVar

from graphmarker.engine.assignments import Assignments
from graphmarker.engine.classifier import SectorClassifier
from graphmarker.engine.config import DEFAULT_CONFIG, MarkerConfig
from graphmarker.engine.data import Input, Line


class FeatureContext:
    """The configuration and sector tables features are built against."""

    def __init__(self, config: MarkerConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.classifier = SectorClassifier(config)
        self.sectors = self.classifier.sectors


@lru_cache(maxsize=8)
def get_context(config: MarkerConfig = DEFAULT_CONFIG) -> FeatureContext:
    return FeatureContext(config)


class Feature(ABC):
    tag: ClassVar[str] = ""

    def __init__(self, context: FeatureContext) -> None:
        self.context = context

    @classmethod
    @abstractmethod
    def deserialize(cls, data: str, context: FeatureContext) -> Feature:
        """Parse the text after ``tag:``. Raises SpecificationError."""

    @abstractmethod
    def serialize(self) -> str:
        """The text after ``tag:`` that parses back to this instance."""

    def __str__(self) -> str:
        return f"{self.tag}: {self.serialize()}"


class InputFeature(Feature):
    """Judges a whole answer."""

    @abstractmethod
    def test(self, candidate: Input) -> bool: ...

    def narrow(self, candidate: Input, assignments: Assignments) -> Assignments | None:
        """The assignments under which this feature holds, or None if there are none."""
        return assignments if self.test(candidate) else None

    @classmethod
    def generate(cls, example: Input, context: FeatureContext) -> list[str]:
        return []


class LineFeature(Feature):
    """Judges one line handed over by a selector."""

    @abstractmethod
    def test(self, candidate: Line) -> bool: ...

    @classmethod
    def generate(cls, example: Line, context: FeatureContext) -> list[str]:
        return []
