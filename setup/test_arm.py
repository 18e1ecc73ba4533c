#!/usr/bin/env python3
"""
Test USB robot arm connection and movement.

Opens and closes the gripper, then resets the arm.

WARNING: Arm will move! Ensure clear space around it.

On Linux you may need a udev rule to access the arm without root, e.g.
    SUBSYSTEM=="usb", ATTR{idVendor}=="1267", ATTR{idProduct}=="0000", MODE="0666"
"""
import sys

from robopi.adapters.usb import MAPLIN_PRODUCT_ID, MAPLIN_VENDOR_ID, UsbRobotArm, find_usb_arm
from robopi.base import ActuatorError
from robopi.choreography import Move, run_moves
from robopi.moves import GRIP_CLOSE, GRIP_OPEN, RESET

MOVE_SECONDS = 1.0


def main():
    print("=== Robot Arm Test ===")
    print()
    print("WARNING: Arm will move! Ensure clear space.")
    print()

    print(f"[1/3] Finding arm ({MAPLIN_VENDOR_ID:04x}:{MAPLIN_PRODUCT_ID:04x})...")
    if find_usb_arm() is None:
        print("      FAIL: No arm found (or no libusb backend installed)")
        print("      Fix: Check the cable, the power switch and USB permissions")
        sys.exit(1)
    print("      OK")

    print("[2/3] Connecting...")
    arm = UsbRobotArm(verbose=False)
    try:
        arm.connect()
    except RuntimeError as e:
        print(f"      FAIL: {e}")
        sys.exit(1)
    print("      OK")

    print("[3/3] Gripper test...")
    moves = [
        Move(GRIP_OPEN, MOVE_SECONDS),
        Move(GRIP_CLOSE, MOVE_SECONDS),
        Move(RESET, MOVE_SECONDS),
    ]
    try:
        run_moves(arm, moves, verbose=False)
        print("      OK")
    except ActuatorError as e:
        print(f"      FAIL: Unable to operate the robot arm: {e}")
        sys.exit(1)
    finally:
        arm.disconnect()

    print()
    print("=== Test Complete ===")


if __name__ == "__main__":
    main()
