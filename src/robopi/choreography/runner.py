"""
Move execution - plays a list of timed moves on an arm.

Playback blocks the caller until every move has been held for its
duration. The arm is always reset to neutral afterwards, even when a
move fails part way through.
"""
from __future__ import annotations

import time
from typing import TYPE_CHECKING, Sequence

from ..base import ActuatorError

if TYPE_CHECKING:
    from ..base import RobotArmBase
    from .script import Move


def run_moves(
    arm: RobotArmBase,
    moves: Sequence[Move],
    *,
    verbose: bool = True,
) -> None:
    """
    Execute moves in order on a single arm.

    Each move code is applied and held for its duration before the next
    one starts. A final RESET is always sent.

    Args:
        arm: Connected RobotArmBase instance
        moves: Moves to play, in order
        verbose: Print status messages

    Raises:
        ActuatorError: The first move the arm failed to apply. Remaining
            moves are skipped. Reset failures are only logged.
    """
    total = sum(m.duration_s for m in moves)
    if verbose:
        print(f"[Dance] Executing {len(moves)} moves over {total:.1f}s")

    start_time = time.perf_counter()

    try:
        for index, move in enumerate(moves, start=1):
            try:
                arm.apply_raw(move.code)
            except ActuatorError as e:
                if verbose:
                    print(f"[Dance] Move {index}/{len(moves)} ({move}) failed: {e}")
                raise
            arm.wait(move.duration_s)
    finally:
        try:
            arm.stop()
        except ActuatorError as e:
            if verbose:
                print(f"[Dance] Reset failed: {e}")

    if verbose:
        elapsed = time.perf_counter() - start_time
        print(f"[Dance] Completed in {elapsed:.2f}s")
