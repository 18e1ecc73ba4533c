#!/usr/bin/env python3
"""
Robopi Demo

Teaches and plays a dance on a simulated arm, exactly as it would be
done over IRC, and prints what the arm was asked to do.
"""
from robopi import create_arm
from robopi.bot import CommandInterpreter, tokenize

SCRIPT = [
    "teach wave",
    "move base left 1",
    "move wrist up 0.5",
    "move grip open 0.25",
    "done",
    "dance wave",
]


def main():
    print("=== Robopi Demo ===")
    print()

    with create_arm("simulation", realtime=False, verbose=False) as arm:
        bot = CommandInterpreter(arm, verbose=False)

        for line in SCRIPT:
            print(f"> {line}")
            bot.handle(tokenize(line), lambda msg: print(f"  {msg}"))

        print()
        print("--- Arm log ---")
        for step in arm.history:
            print(f"  {step.name:<12} {step.held_s:.2f}s")

    print()
    print("=== Demo Complete ===")


if __name__ == "__main__":
    main()
