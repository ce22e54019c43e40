"""Line selectors: which line(s) of an answer a line feature judges.

A line clause with no selector holds if *any* line satisfies it. A
``line: N; clause[; clause...]`` prefix pins every clause to the Nth line
(1-based, left to right); an answer with fewer lines does not match. A
``match: A; clause[; clause...]`` prefix names a line without saying which
one it is: the clauses must hold for some line, and every clause naming A
must hold for that same line.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from graphmarker.engine.assignments import Assignments, line_key
from graphmarker.engine.data import Input, Line
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, LineFeature
from graphmarker.engine.registry import Scope, get_registry


def split_tag(item: str) -> tuple[str, str]:
    """Split ``tag: data`` at the first colon."""
    tag, sep, data = item.partition(":")
    if not sep:
        raise SpecificationError(f"Missing ':' after feature name in: {item!r}")
    return tag.strip(), data


def parse_line_feature(item: str, context: FeatureContext) -> LineFeature:
    tag, data = split_tag(item)
    spec = get_registry().get(tag)
    if spec is None:
        raise SpecificationError(f"Unknown feature {tag!r} in: {item!r}")
    if spec.scope is not Scope.LINE:
        raise SpecificationError(f"{spec.tag!r} applies to the whole answer, not one line: {item!r}")
    return spec.kind.deserialize(data, context)


def _parse_clauses(selection: str, text: str, context: FeatureContext) -> list[LineFeature]:
    clauses = [c for c in text.split(";") if c.strip()]
    if not clauses:
        raise SpecificationError(f"No clauses for line {selection}")
    return [parse_line_feature(c, context) for c in clauses]


class LineSelector(ABC):
    def __init__(self, features: list[LineFeature]) -> None:
        self.features = features

    def line_matches(self, line: Line) -> bool:
        return all(f.test(line) for f in self.features)

    @abstractmethod
    def test(self, candidate: Input) -> bool: ...

    def narrow(self, candidate: Input, assignments: Assignments) -> Assignments | None:
        return assignments if self.test(candidate) else None


class AnyLineSelector(LineSelector):
    def test(self, candidate: Input) -> bool:
        return any(self.line_matches(line) for line in candidate.lines)

    def __str__(self) -> str:
        return "; ".join(str(f) for f in self.features)


class NthLineSelector(LineSelector):
    tag = "line"

    _SYNTAX = re.compile(r"\s*([1-9][0-9]*)\s*;\s*(.*)", re.DOTALL)

    def __init__(self, n: int, features: list[LineFeature]) -> None:
        super().__init__(features)
        self.n = n

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext) -> NthLineSelector:
        m = cls._SYNTAX.match(data)
        if not m:
            raise SpecificationError(f"Not a line selector: {data!r}")
        return cls(int(m.group(1)), _parse_clauses(m.group(1), m.group(2), context))

    def test(self, candidate: Input) -> bool:
        if self.n > len(candidate.lines):
            return False
        return self.line_matches(candidate.lines[self.n - 1])

    def __str__(self) -> str:
        return f"{self.tag}: {self.n}; " + "; ".join(str(f) for f in self.features)


class MatchingLineSelector(LineSelector):
    tag = "match"

    _SYNTAX = re.compile(r"\s*([a-zA-Z]+)\s*;\s*(.*)", re.DOTALL)

    def __init__(self, name: str, features: list[LineFeature]) -> None:
        super().__init__(features)
        self.name = name

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext) -> MatchingLineSelector:
        m = cls._SYNTAX.match(data)
        if not m:
            raise SpecificationError(f"Not a line name: {data!r}")
        return cls(m.group(1), _parse_clauses(m.group(1), m.group(2), context))

    def narrow(self, candidate: Input, assignments: Assignments) -> Assignments | None:
        key = line_key(self.name)
        results: dict[int, bool] = {}

        def holds(mapping) -> bool:
            index = mapping[key]
            if index not in results:
                results[index] = self.line_matches(candidate.lines[index])
            return results[index]

        narrowed = assignments.with_name(self.name).filtered(holds)
        return narrowed if narrowed else None

    def test(self, candidate: Input) -> bool:
        return self.narrow(candidate, Assignments.for_input(candidate)) is not None

    def __str__(self) -> str:
        return f"{self.tag}: {self.name}; " + "; ".join(str(f) for f in self.features)
