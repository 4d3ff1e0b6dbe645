"""
visitors/command.py - Command capability check.

Reports vessels that cannot be commanded from a pod. A command seat is
noted; a command module anywhere silences the check.
"""

from __future__ import annotations
from typing import Dict, List
import logging

from ..core.enums import CommandStatus
from ..errors import InvalidVisitorStateError
from .base import PartVisitor

logger = logging.getLogger(__name__)


COMMAND_MODULE = "ModuleCommand"
SEAT_MODULE = "KerbalSeat"

STATUS_TEXTS: Dict[CommandStatus, List[str]] = {
    CommandStatus.NONE: ["No command pod"],
    CommandStatus.SEAT: ["Has command seat"],
    CommandStatus.POD: [],
}


class CommandStatusVisitor(PartVisitor):
    """
    Tracks the best command capability seen so far.

    POD is terminal for the pass: once found, later parts are skipped.
    """

    name = "command_status"

    def __init__(self):
        self.status: CommandStatus = CommandStatus.NONE

    def reset(self) -> None:
        self.status = CommandStatus.NONE

    def visit(self, part) -> None:
        if self.status == CommandStatus.POD:
            return

        for module in part.modules:
            if module.name == COMMAND_MODULE:
                self.status = CommandStatus.POD
                logger.debug("Command module found, pod status is final")
                return
            if module.name == SEAT_MODULE:
                self.status = CommandStatus.SEAT

    def get_texts(self) -> List[str]:
        if self.status not in STATUS_TEXTS:
            raise InvalidVisitorStateError(type(self).__name__, self.status)
        return list(STATUS_TEXTS[self.status])
