"""
Choreography module for the robot arm.

Usage:
    from robopi import create_arm
    from robopi.choreography import DanceStore, parse_move, run_moves

    dances = DanceStore()
    dances.define("wave")
    dances.append("wave", parse_move("base", "left", "1"))
    dances.append("wave", parse_move("wrist", "up", "0.5"))

    with create_arm() as arm:
        run_moves(arm, dances.get("wave"))
"""
from .script import (
    Move,
    DanceStore,
    DanceExistsError,
    NoSuchDanceError,
    parse_duration,
    parse_move,
)
from .runner import run_moves

__all__ = [
    # Data structures
    "Move",
    "DanceStore",
    # Errors
    "DanceExistsError",
    "NoSuchDanceError",
    # Parsing
    "parse_duration",
    "parse_move",
    # Execution
    "run_moves",
]
