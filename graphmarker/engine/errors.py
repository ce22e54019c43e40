"""Engine exceptions."""

from __future__ import annotations


class SpecificationError(ValueError):
    """A specification line could not be parsed.

    Raised at parse time so that a malformed clause is never silently dropped.
    """
