"""
Simulation adapter.

Stands in for the arm when no USB device is available: every applied move
code is recorded together with how long it was held, so dances can be
checked without hardware.
"""
import time
from dataclasses import dataclass
from typing import List

from ..base import RobotArmBase
from ..moves import MoveCode, move_name


@dataclass
class SimulatedStep:
    """A move code the simulated arm received and how long it was held."""
    code: MoveCode
    held_s: float = 0.0

    @property
    def name(self) -> str:
        return move_name(self.code)


class SimulationArm(RobotArmBase):
    """
    Robot arm controller that only records moves.

    With realtime=True waits really sleep, so playback blocks exactly as
    long as on hardware. With realtime=False waits are only recorded.
    """

    def __init__(self, realtime: bool = True, verbose: bool = True):
        """
        Initialize the simulation adapter.

        Args:
            realtime: Sleep during waits
            verbose: Print status messages
        """
        super().__init__(verbose=verbose)
        self.realtime = realtime
        self.history: List[SimulatedStep] = []

    def _connect(self) -> None:
        self._log("Using simulated arm")

    def _disconnect(self) -> None:
        pass

    def _send_move(self, code: MoveCode) -> None:
        self.history.append(SimulatedStep(code=bytes(code)))

    def wait(self, duration: float) -> None:
        """Record the hold time of the last move, sleeping if realtime."""
        if duration <= 0:
            return
        if self.history:
            self.history[-1].held_s += duration
        if self.realtime:
            time.sleep(duration)
