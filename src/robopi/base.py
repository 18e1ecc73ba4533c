"""
Robot arm base classes.

This module contains shared code for all adapter implementations:
- ActuatorError raised when the arm fails to apply a move
- RobotArmBase abstract base class
"""
import time
from abc import ABC, abstractmethod

from .moves import RESET, MoveCode, move_name


class ActuatorError(RuntimeError):
    """The arm failed to apply a raw move code."""


class RobotArmBase(ABC):
    """
    Abstract base class for robot arm adapters.

    The arm only understands raw move codes: a code starts the motors it
    names and they keep running until another code (usually RESET) is sent.
    Subclasses implement the device access via _connect(), _disconnect()
    and _send_move().
    """

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self._connected = False

    def _log(self, msg: str):
        if self.verbose:
            print(f"[Arm] {msg}")

    @abstractmethod
    def _connect(self) -> None:
        """Open the device."""

    @abstractmethod
    def _disconnect(self) -> None:
        """Release the device."""

    @abstractmethod
    def _send_move(self, code: MoveCode) -> None:
        """Send a raw move code. Raises ActuatorError on failure."""

    @property
    def connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        """Connect to the arm."""
        self._connect()
        self._connected = True
        self._log("Connected")

    def disconnect(self) -> None:
        """Disconnect from the arm."""
        if self._connected:
            self._disconnect()
            self._connected = False
            self._log("Disconnected")

    def apply_raw(self, code: MoveCode) -> None:
        """Start a raw move. The motors keep running until the next code."""
        self._log(f"Move: {move_name(code)}")
        self._send_move(code)

    def stop(self) -> None:
        """Return every motor to neutral."""
        self.apply_raw(RESET)

    def wait(self, duration: float) -> None:
        """Wait for specified duration. Override for simulation."""
        if duration > 0:
            time.sleep(duration)

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, *args):
        self.disconnect()
