"""
visitors/base.py - Part visitor interface.

A part visitor scans every part of a vessel once per reporting pass and
contributes zero or more status lines to the report.

Lifecycle per pass: reset() once, visit(part) once per part in order,
get_texts() once at the end.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class PartVisitor(ABC):
    """Base class for part visitors."""

    name: str = "visitor"

    @abstractmethod
    def reset(self) -> None:
        """Clear all per-pass state."""
        pass

    @abstractmethod
    def visit(self, part) -> None:
        """Inspect one part. Parts without relevant modules are a no-op."""
        pass

    @abstractmethod
    def get_texts(self) -> List[str]:
        """Report lines for the finished pass, in a fixed order."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
