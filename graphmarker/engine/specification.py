"""Specification text: parse into clauses, test an answer, generate from an example.

One clause per line, ``\\r\\n`` or ``\\n`` separated, blank lines ignored::

    curves: 2
    line: 1; through: bottomLeft
    line: 2; slope: start=down, end=flat

Clauses are judged in order. Those that name lines (``match: A; ...``,
``intersects: A to B ...``) narrow the ways names can be given to lines,
and later clauses only see the ways that survived.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from graphmarker.engine import features as _features  # noqa: F401  registers every kind
from graphmarker.engine.assignments import Assignments, line_references
from graphmarker.engine.config import DEFAULT_CONFIG, MarkerConfig
from graphmarker.engine.data import Input
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, get_context
from graphmarker.engine.features.curves import CurvesCountFeature
from graphmarker.engine.features.selectors import AnyLineSelector, MatchingLineSelector, NthLineSelector, split_tag
from graphmarker.engine.registry import Scope, get_registry

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\r\n"


class _Predicate(Protocol):
    def narrow(self, candidate: Input, assignments: Assignments) -> Assignments | None: ...


@dataclass
class Clause:
    text: str
    predicate: _Predicate
    # Input features and explicit line selectors say how many lines to expect
    pins_lines: bool

    def narrow(self, candidate: Input, assignments: Assignments) -> Assignments | None:
        return self.predicate.narrow(candidate, assignments)


def parse_clause(item: str, context: FeatureContext) -> Clause:
    tag, data = split_tag(item)
    for selector in (NthLineSelector, MatchingLineSelector):
        if tag.lower() == selector.tag:
            return Clause(item, selector.deserialize(data, context), True)

    spec = get_registry().get(tag)
    if spec is None:
        raise SpecificationError(f"Unknown feature {tag!r} in: {item!r}")
    if spec.scope is Scope.INPUT:
        return Clause(item, spec.kind.deserialize(data, context), True)
    return Clause(item, AnyLineSelector([spec.kind.deserialize(data, context)]), False)


class Specification:
    """Every clause of one accepted answer shape."""

    def __init__(self, clauses: list[Clause]) -> None:
        self.clauses = clauses

    @classmethod
    def parse(cls, text: str, config: MarkerConfig = DEFAULT_CONFIG) -> Specification:
        context = get_context(config)
        clauses = [parse_clause(item.strip(), context) for item in text.splitlines() if item.strip()]
        if not any(c.pins_lines for c in clauses):
            clauses.append(Clause("curves: 1 (implicit)", CurvesCountFeature(1, context), True))
        return cls(clauses)

    def failed_clauses(self, candidate: Input) -> list[Clause]:
        """Clauses that fail, each judged under the line names the clauses before it left standing."""
        assignments = Assignments.for_input(candidate)
        failed: list[Clause] = []
        for clause in self.clauses:
            narrowed = clause.narrow(candidate, assignments)
            if narrowed is None:
                failed.append(clause)
            else:
                assignments = narrowed
        return failed

    def test(self, candidate: Input) -> bool:
        failed = self.failed_clauses(candidate)
        if failed:
            logger.info("Failed clauses: %s", "; ".join(c.text for c in failed))
            return False
        return True

    def __len__(self) -> int:
        return len(self.clauses)


def _selector_prefix(ref: str) -> str:
    tag = NthLineSelector.tag if ref.isdigit() else MatchingLineSelector.tag
    return f"{tag}: {ref}; "


def generate(example: Input, config: MarkerConfig = DEFAULT_CONFIG) -> str:
    """Specification text that ``example`` itself satisfies."""
    context = get_context(config)
    registry = get_registry()
    items: list[str] = []

    for spec in registry.generators(Scope.INPUT):
        items.extend(f"{spec.tag}: {data}" for data in spec.kind.generate(example, context) if data)

    refs = line_references(example.lines)
    for ref, line in zip(refs, example.lines):
        prefix = _selector_prefix(ref) if len(refs) > 1 else ""
        for spec in registry.generators(Scope.LINE):
            items.extend(f"{prefix}{spec.tag}: {data}" for data in spec.kind.generate(line, context) if data)

    return LINE_SEPARATOR.join(items)
