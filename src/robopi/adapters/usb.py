"""
USB robot arm adapter using pyusb.

Drives the Maplin/OWI edge robot arm, which accepts a 3-byte move code
through a vendor control transfer on endpoint 0. Requires a libusb backend
and, on Linux, permission to access the device without root (udev rule).
"""
from typing import Optional

import usb.core
import usb.util

from ..base import ActuatorError, RobotArmBase
from ..moves import MoveCode


MAPLIN_VENDOR_ID = 0x1267
MAPLIN_PRODUCT_ID = 0x0000

# Control transfer parameters
REQUEST_TYPE = 0x40  # host-to-device, vendor, device
REQUEST = 6
VALUE = 0x100
INDEX = 0

TRANSFER_TIMEOUT_MS = 1000


def find_usb_arm() -> Optional["usb.core.Device"]:
    """Find the robot arm on the USB bus, or None if absent."""
    try:
        return usb.core.find(idVendor=MAPLIN_VENDOR_ID, idProduct=MAPLIN_PRODUCT_ID)
    except usb.core.NoBackendError:
        return None


class UsbRobotArm(RobotArmBase):
    """
    Robot arm controller over USB.

    Each move is a single control transfer; there is no feedback from the
    arm beyond the transfer result.
    """

    def __init__(self, verbose: bool = True, timeout_ms: int = TRANSFER_TIMEOUT_MS):
        """
        Initialize the USB adapter.

        Args:
            verbose: Print status messages
            timeout_ms: Control transfer timeout in milliseconds
        """
        super().__init__(verbose=verbose)
        self.timeout_ms = timeout_ms
        self._device: Optional["usb.core.Device"] = None

    def _connect(self) -> None:
        device = find_usb_arm()
        if device is None:
            raise RuntimeError("Unable to connect to robot arm USB device")

        self._log(f"Found arm on bus {device.bus} address {device.address}")
        try:
            device.set_configuration()
        except usb.core.USBError as e:
            raise RuntimeError(f"Unable to configure robot arm USB device: {e}") from e
        self._device = device

    def _disconnect(self) -> None:
        if self._device is not None:
            usb.util.dispose_resources(self._device)
            self._device = None

    def _send_move(self, code: MoveCode) -> None:
        if self._device is None:
            raise ActuatorError("Robot arm is not connected")

        try:
            written = self._device.ctrl_transfer(
                REQUEST_TYPE, REQUEST, VALUE, INDEX, code, self.timeout_ms
            )
        except usb.core.USBError as e:
            raise ActuatorError(f"move failed with error {e}") from e

        if written != len(code):
            raise ActuatorError(f"move failed: wrote {written} of {len(code)} bytes")
