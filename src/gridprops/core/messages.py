"""
Append-only diagnostic sink for registry operations.

Messages are kept in insertion order for a reporting layer to inspect or drain; every
appended message is also forwarded to the package logger at the matching level.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from gridprops.utils.logging import get_logger


class MessageType(Enum):
    DEBUG = "debug"
    INFO = "info"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"
    PROBLEM = "problem"
    BUG = "bug"


_LOG_LEVELS = {
    MessageType.DEBUG: logging.DEBUG,
    MessageType.INFO: logging.INFO,
    MessageType.NOTE: logging.INFO,
    MessageType.WARNING: logging.WARNING,
    MessageType.ERROR: logging.ERROR,
    MessageType.PROBLEM: logging.ERROR,
    MessageType.BUG: logging.CRITICAL,
}


@dataclass(frozen=True)
class Message:
    """A severity tag plus free-text body."""

    mtype: MessageType
    text: str


class MessageContainer:
    """
    Ordered collection of diagnostic messages.

    Parameters
    ----------
    verbose : bool, optional
        If True, enables detailed logging output.
    """

    def __init__(self, verbose: bool = False) -> None:
        self._messages: list[Message] = []
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def add(self, mtype: MessageType, text: str) -> Message:
        """Append a message and return it."""
        message = Message(mtype, text)
        self._messages.append(message)
        self.logger.log(_LOG_LEVELS[mtype], text)
        return message

    def warning(self, text: str) -> Message:
        return self.add(MessageType.WARNING, text)

    def info(self, text: str) -> Message:
        return self.add(MessageType.INFO, text)

    def filter(self, mtype: MessageType) -> list[Message]:
        """Messages of a single severity, in insertion order."""
        return [m for m in self._messages if m.mtype is mtype]

    def drain(self) -> list[Message]:
        """Return all messages and empty the container."""
        drained, self._messages = self._messages, []
        return drained

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]
