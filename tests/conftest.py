"""Shared fixtures: a simulated arm that never sleeps and a reply recorder."""

from typing import List, Optional, Set

import pytest

from robopi.adapters.simulation import SimulationArm
from robopi.base import ActuatorError
from robopi.bot.commands import CommandInterpreter, tokenize
from robopi.moves import MoveCode, RESET


class FlakyArm(SimulationArm):
    """Simulated arm that fails on chosen calls to apply_raw (1-based)."""

    def __init__(self, fail_on: Set[int], fail_reset: bool = False):
        super().__init__(realtime=False, verbose=False)
        self.fail_on = fail_on
        self.fail_reset = fail_reset
        self.calls: List[MoveCode] = []

    def _send_move(self, code: MoveCode) -> None:
        self.calls.append(bytes(code))
        if code == RESET and self.fail_reset:
            raise ActuatorError("reset failed")
        if len(self.calls) in self.fail_on:
            raise ActuatorError(f"call {len(self.calls)} failed")
        super()._send_move(code)


class Chat:
    """Feeds command lines to an interpreter and keeps the replies."""

    def __init__(self, interpreter: CommandInterpreter):
        self.interpreter = interpreter
        self.replies: List[str] = []

    def say(self, line: str) -> List[str]:
        """Send one line; return only the replies it produced."""
        start = len(self.replies)
        self.interpreter.handle(tokenize(line), self.replies.append)
        return self.replies[start:]

    @property
    def last(self) -> Optional[str]:
        return self.replies[-1] if self.replies else None


@pytest.fixture
def arm():
    """Connected simulated arm with real-time pacing disabled."""
    sim = SimulationArm(realtime=False, verbose=False)
    sim.connect()
    return sim


@pytest.fixture
def interpreter(arm):
    return CommandInterpreter(arm, verbose=False)


@pytest.fixture
def chat(interpreter):
    return Chat(interpreter)
