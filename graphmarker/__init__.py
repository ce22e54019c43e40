"""Marks free-hand sketched graphs against textual shape specifications."""

__version__ = "0.1.0"
