"""
Robopi: a chat-controlled USB robot arm that can learn dances.

Usage:
    from robopi import create_arm
    from robopi.choreography import Move, run_moves
    from robopi.moves import GRIP_OPEN, GRIP_CLOSE

    with create_arm() as arm:  # auto-detects the USB arm
        run_moves(arm, [Move(GRIP_OPEN, 1.0), Move(GRIP_CLOSE, 1.0)])

Or without hardware:
    arm = create_arm("simulation")
"""
from typing import Literal, Optional

from .base import ActuatorError, RobotArmBase


__all__ = [
    "create_arm",
    "detect_adapter",
    "RobotArmBase",
    "ActuatorError",
]


AdapterType = Literal["auto", "usb", "simulation"]


def detect_adapter() -> Optional[str]:
    """
    Detect an attached arm.

    Returns:
        'usb' if the USB robot arm is plugged in
        None if no arm was found
    """
    from .adapters.usb import find_usb_arm
    if find_usb_arm() is not None:
        return "usb"
    return None


def create_arm(adapter: AdapterType = "auto", **kwargs) -> RobotArmBase:
    """
    Create a robot arm controller with the specified adapter.

    Args:
        adapter: Adapter type - 'auto', 'usb' or 'simulation'
        **kwargs: Additional arguments passed to the adapter constructor

    Returns:
        Configured (not yet connected) RobotArmBase instance

    Raises:
        RuntimeError: If no arm is found (when adapter='auto')
        ValueError: If invalid adapter type is specified
    """
    if adapter == "auto":
        detected = detect_adapter()
        if not detected:
            raise RuntimeError(
                "No robot arm found. "
                "Ensure the arm is plugged in, switched on and accessible over USB."
            )
        adapter = detected

    if adapter == "usb":
        from .adapters import UsbRobotArm
        return UsbRobotArm(**kwargs)
    elif adapter == "simulation":
        from .adapters import SimulationArm
        return SimulationArm(**kwargs)
    else:
        raise ValueError(f"Unknown adapter type: {adapter}")
