"""
Dance moves and the dance store.

Supports:
- Parsing 'move <joint> <direction> <seconds>' arguments into a Move
- Recording named dances as ordered lists of moves
"""
from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Dict, List

from ..moves import MoveCode, lookup, move_name

# Longest hold a single move may ask for: the longest wait the platform supports.
MAX_DURATION_S = threading.TIMEOUT_MAX


@dataclass(frozen=True)
class Move:
    """One timed actuation: apply code, hold for duration_s seconds."""
    code: MoveCode
    duration_s: float

    def __str__(self) -> str:
        return f"{move_name(self.code)} x{self.duration_s:g}s"


class DanceExistsError(ValueError):
    """A dance with this name is already known."""

    def __init__(self, name: str):
        super().__init__(f"Dance '{name}' already exists")
        self.name = name


class NoSuchDanceError(LookupError):
    """No dance with this name is known."""

    def __init__(self, name: str):
        super().__init__(f"No dance named '{name}'")
        self.name = name


def parse_duration(text: str) -> float:
    """
    Parse a duration in seconds.

    Malformed text is not an error: it becomes 0 seconds, as do negative
    and non-finite values. Longer durations are capped at MAX_DURATION_S.
    """
    try:
        seconds = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(seconds) or seconds < 0:
        return 0.0
    return min(seconds, MAX_DURATION_S)


def parse_move(joint: str, direction: str, duration_text: str) -> Move:
    """
    Build a Move from command arguments.

    Raises:
        UnknownMoveError: If joint/direction is not in the move catalog
    """
    code = lookup(joint, direction)
    return Move(code=code, duration_s=parse_duration(duration_text))


class DanceStore:
    """Named dances, each an ordered list of moves."""

    def __init__(self):
        self._dances: Dict[str, List[Move]] = {}

    def define(self, name: str) -> None:
        """Create an empty dance. Existing dances are never overwritten."""
        if not name:
            raise ValueError("Dance name must not be empty")
        if name in self._dances:
            raise DanceExistsError(name)
        self._dances[name] = []

    def append(self, name: str, move: Move) -> None:
        """Add a move to the end of a dance."""
        if name not in self._dances:
            raise NoSuchDanceError(name)
        self._dances[name].append(move)

    def get(self, name: str) -> List[Move]:
        """Moves of a dance in the order they were taught."""
        if name not in self._dances:
            raise NoSuchDanceError(name)
        return list(self._dances[name])

    def forget(self, name: str) -> None:
        """Remove a dance. Unknown names are ignored."""
        self._dances.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._dances)

    def __contains__(self, name: object) -> bool:
        return name in self._dances

    def __len__(self) -> int:
        return len(self._dances)
