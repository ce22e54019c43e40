"""Named lines: every way the names in a specification can pick out lines.

``match: A; ...`` and ``intersects: A to B ...`` refer to lines by name
rather than position. A name may stand for any line, but two names never
stand for the same line. Each clause narrows the surviving assignments;
the specification holds if at least one survives every clause.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType

from graphmarker.engine.data import Input, Line
from graphmarker.engine.lines import no_horizontal_overlap

Assignment = Mapping[str, int]


def line_key(name: str) -> str:
    """Line names are compared case-insensitively."""
    return name.strip().upper()


def standard_line_name(index: int) -> str:
    """A, B, ..., Z, AA, AB, ... for lines 0, 1, 2, ..."""
    name = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        name = chr(ord("A") + rem) + name
    return name


def line_references(lines: Sequence[Line]) -> list[str]:
    """How generated clauses refer to each line.

    Lines that sit side by side keep a stable left-to-right order, so they
    are numbered. Overlapping lines may swap places depending on how they
    were drawn, so they are named instead.
    """
    if no_horizontal_overlap(lines):
        return [str(n) for n in range(1, len(lines) + 1)]
    return [standard_line_name(i) for i in range(len(lines))]


class Assignments:
    """An immutable set of possible name → line-index mappings."""

    def __init__(self, line_count: int, names: frozenset[str], mappings: tuple[Assignment, ...]) -> None:
        self.line_count = line_count
        self.names = names
        self.mappings = mappings

    @classmethod
    def for_input(cls, candidate: Input) -> Assignments:
        return cls(len(candidate.lines), frozenset(), (MappingProxyType({}),))

    def __bool__(self) -> bool:
        return bool(self.mappings)

    def __len__(self) -> int:
        return len(self.mappings)

    def with_name(self, name: str) -> Assignments:
        """Spread every mapping over the lines ``name`` could still stand for."""
        key = line_key(name)
        if key in self.names:
            return self

        spread = []
        for mapping in self.mappings:
            used = set(mapping.values())
            for index in range(self.line_count):
                if index not in used:
                    spread.append(MappingProxyType({**mapping, key: index}))
        return Assignments(self.line_count, self.names | {key}, tuple(spread))

    def filtered(self, keep: Callable[[Assignment], bool]) -> Assignments:
        return Assignments(self.line_count, self.names, tuple(m for m in self.mappings if keep(m)))

    def lines_for(self, name: str) -> set[int]:
        """Every line index ``name`` is still assigned to."""
        key = line_key(name)
        return {m[key] for m in self.mappings if key in m}
