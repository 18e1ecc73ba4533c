"""Robot arm adapter implementations."""


def __getattr__(name: str):
    """Lazy import adapters to avoid importing dependencies until needed."""
    if name == "UsbRobotArm":
        from .usb import UsbRobotArm
        return UsbRobotArm
    if name == "SimulationArm":
        from .simulation import SimulationArm
        return SimulationArm
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["UsbRobotArm", "SimulationArm"]
