"""intersects: A to B at <sectors> | A to B nowhere. Where two lines cross.

A line is referred to by position (``1 to 2``, left to right) or by name
(``a to b``). A name can stand for any line, shared with ``match:`` clauses
that use the same name.
"""

from __future__ import annotations

import re

from graphmarker.engine.assignments import Assignment, Assignments, line_key, line_references
from graphmarker.engine.data import Input, Line
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, InputFeature
from graphmarker.engine.lines import find_intersections
from graphmarker.engine.registry import Scope, feature
from graphmarker.engine.sector import Sector

_LINE = r"([a-zA-Z]+|[1-9][0-9]*)"
_SYNTAX = re.compile(rf"\s*{_LINE}\s+to\s+{_LINE}\s+(?:(?:at|in|on)\s+(.*)|nowhere)\s*$")


def intersection_sectors(line_a: Line, line_b: Line, context: FeatureContext) -> list[Sector]:
    return [context.classifier.classify(p) for p in find_intersections(line_a, line_b)]


def _serialize(line_a: str, line_b: str, sectors: list[Sector]) -> str:
    lines = f"{line_a} to {line_b}"
    if not sectors:
        return f"{lines} nowhere"
    return f"{lines} at " + ", ".join(s.name for s in sectors)


def _is_position(ref: str) -> bool:
    return ref.isdigit()


def _resolve(ref: str, mapping: Assignment) -> int:
    if _is_position(ref):
        return int(ref) - 1
    return mapping[line_key(ref)]


@feature(tag="intersects", scope=Scope.INPUT, order=1, description="Sectors where two lines cross")
class IntersectionPointsFeature(InputFeature):
    def __init__(self, line_a: str, line_b: str, sectors: list[Sector], context: FeatureContext) -> None:
        super().__init__(context)
        self.line_a = line_a
        self.line_b = line_b
        self.sectors = sectors

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext) -> IntersectionPointsFeature:
        m = _SYNTAX.match(data)
        if not m:
            raise SpecificationError(f"Not an intersection points feature: {data!r}")
        line_a, line_b = m.group(1), m.group(2)
        if line_key(line_a) == line_key(line_b):
            raise SpecificationError(f"A line cannot intersect itself: {data!r}")
        sectors = context.sectors.from_list(m.group(3)) if m.group(3) is not None else []
        return cls(line_a, line_b, sectors, context)

    def serialize(self) -> str:
        return _serialize(self.line_a, self.line_b, self.sectors)

    def narrow(self, candidate: Input, assignments: Assignments) -> Assignments | None:
        for ref in (self.line_a, self.line_b):
            if not _is_position(ref):
                assignments = assignments.with_name(ref)

        lines = candidate.lines
        results: dict[tuple[int, int], bool] = {}

        def holds(mapping: Assignment) -> bool:
            a, b = _resolve(self.line_a, mapping), _resolve(self.line_b, mapping)
            if a == b or max(a, b) >= len(lines):
                return False
            if (a, b) not in results:
                results[(a, b)] = intersection_sectors(lines[a], lines[b], self.context) == self.sectors
            return results[(a, b)]

        narrowed = assignments.filtered(holds)
        return narrowed if narrowed else None

    def test(self, candidate: Input) -> bool:
        return self.narrow(candidate, Assignments.for_input(candidate)) is not None

    @classmethod
    def generate(cls, example: Input, context: FeatureContext) -> list[str]:
        lines = example.lines
        refs = line_references(lines)
        output: list[str] = []
        for i, line_a in enumerate(lines):
            for j in range(i + 1, len(lines)):
                sectors = intersection_sectors(line_a, lines[j], context)
                output.append(_serialize(refs[i], refs[j], sectors))
        return output
