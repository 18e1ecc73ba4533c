"""
Move catalog for the Maplin/OWI USB robot arm.

Each move code is the 3-byte payload of the arm's USB control transfer:
- byte 0: grip, wrist, elbow and shoulder motors (two bits each)
- byte 1: base motor
- byte 2: LED (always off here)

Sending RESET de-energizes every motor.
"""
from typing import Dict, List, Tuple

MoveCode = bytes

RESET: MoveCode = bytes([0x00, 0x00, 0x00])

GRIP_CLOSE: MoveCode = bytes([0x01, 0x00, 0x00])
GRIP_OPEN: MoveCode = bytes([0x02, 0x00, 0x00])
WRIST_UP: MoveCode = bytes([0x04, 0x00, 0x00])
WRIST_DOWN: MoveCode = bytes([0x08, 0x00, 0x00])
ELBOW_UP: MoveCode = bytes([0x10, 0x00, 0x00])
ELBOW_DOWN: MoveCode = bytes([0x20, 0x00, 0x00])
SHOULDER_UP: MoveCode = bytes([0x40, 0x00, 0x00])
SHOULDER_DOWN: MoveCode = bytes([0x80, 0x00, 0x00])
BASE_LEFT: MoveCode = bytes([0x00, 0x01, 0x00])
BASE_RIGHT: MoveCode = bytes([0x00, 0x02, 0x00])

MOVES: Dict[Tuple[str, str], MoveCode] = {
    ("base", "left"): BASE_LEFT,
    ("base", "right"): BASE_RIGHT,
    ("grip", "open"): GRIP_OPEN,
    ("grip", "close"): GRIP_CLOSE,
    ("wrist", "up"): WRIST_UP,
    ("wrist", "down"): WRIST_DOWN,
    ("shoulder", "up"): SHOULDER_UP,
    ("shoulder", "down"): SHOULDER_DOWN,
    ("elbow", "up"): ELBOW_UP,
    ("elbow", "down"): ELBOW_DOWN,
}

_NAMES: Dict[MoveCode, str] = {code: f"{joint} {direction}" for (joint, direction), code in MOVES.items()}
_NAMES[RESET] = "reset"


class UnknownMoveError(ValueError):
    """Raised when a joint/direction pair is not in the catalog."""

    def __init__(self, joint: str, direction: str):
        super().__init__(f"Unknown move: {joint} {direction}")
        self.joint = joint
        self.direction = direction


def lookup(joint: str, direction: str) -> MoveCode:
    """Return the move code for a joint and direction (case-sensitive)."""
    try:
        return MOVES[(joint, direction)]
    except KeyError:
        raise UnknownMoveError(joint, direction) from None


def list_all() -> List[Tuple[str, str]]:
    """All known (joint, direction) pairs, sorted by joint then direction."""
    return sorted(MOVES)


def describe_moves() -> str:
    """Comma separated list of every known move, e.g. 'base left, base right, ...'."""
    return ", ".join(f"{joint} {direction}" for joint, direction in list_all())


def move_name(code: MoveCode) -> str:
    """Human readable name of a move code, or its hex bytes if unknown."""
    return _NAMES.get(bytes(code), bytes(code).hex(" "))
