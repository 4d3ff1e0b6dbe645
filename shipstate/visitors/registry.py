"""
Visitor Registry - Ordered set of part visitors run on every pass.

Registration order is report order: each visitor's lines are appended in
the order the visitors were registered.
"""
from typing import Iterable, Iterator, List, Optional
import logging

from .base import PartVisitor
from .command import CommandStatusVisitor

logger = logging.getLogger(__name__)


class VisitorRegistry:
    """
    Holds the visitor instances for one report builder.

    Instance-scoped: each builder owns its registry, so visitor state
    never leaks between builders.
    """

    def __init__(self, visitors: Optional[Iterable[PartVisitor]] = None):
        self._visitors: List[PartVisitor] = []
        for visitor in visitors or []:
            self.register(visitor)

    def register(self, visitor: PartVisitor) -> None:
        """Append a visitor; its lines follow those of earlier visitors."""
        if not isinstance(visitor, PartVisitor):
            raise TypeError(f"Not a PartVisitor: {visitor!r}")
        self._visitors.append(visitor)
        logger.debug(f"Registered visitor {visitor!r} at position {len(self._visitors) - 1}")

    def reset_all(self) -> None:
        for visitor in self._visitors:
            visitor.reset()

    def visit_all(self, part) -> None:
        for visitor in self._visitors:
            visitor.visit(part)

    def collect_texts(self) -> List[str]:
        """All visitor lines in registration order."""
        texts: List[str] = []
        for visitor in self._visitors:
            texts.extend(visitor.get_texts())
        return texts

    def __iter__(self) -> Iterator[PartVisitor]:
        return iter(self._visitors)

    def __len__(self) -> int:
        return len(self._visitors)


def default_visitors() -> VisitorRegistry:
    """Registry with the built-in visitors."""
    return VisitorRegistry([CommandStatusVisitor()])
