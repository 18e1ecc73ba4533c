#!/usr/bin/env python3
"""
CLI entry point for the robot arm chat bot.

Connect to an IRC server (port 6667 unless given):
    python -m robopi irc.example.net

TLS, custom nick and channel:
    python -m robopi irc.example.net:6697 --secure --nick robopi --channel '#robopi'

Simulation (no arm required):
    python -m robopi irc.example.net --simulation

Commands can also be typed on standard input, without the 'robopi:' prefix.
The bot keeps running after standard input ends, until Ctrl-C or until the
server drops the connection.
"""
import argparse
import sys

import irc.client

from . import create_arm
from .base import RobotArmBase
from .bot.commands import CommandInterpreter
from .bot.irc_client import DEFAULT_CHANNEL, DEFAULT_NICK, IrcTransport, parse_server
from .bot.loop import CommandLoop


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robopi",
        description="Control a USB robot arm over IRC",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "server",
        help="IRC server as host[:port] (default port: 6667)",
    )
    parser.add_argument(
        "--secure",
        action="store_true",
        help="Use a secure (TLS) connection",
    )
    parser.add_argument(
        "--nick",
        default=DEFAULT_NICK,
        help=f"Nickname to use and answer to (default: {DEFAULT_NICK})",
    )
    parser.add_argument(
        "--channel",
        default=DEFAULT_CHANNEL,
        help=f"Channel to join after connecting (default: {DEFAULT_CHANNEL})",
    )
    parser.add_argument(
        "--password",
        help="NickServ password, used if the nickname is registered",
    )
    parser.add_argument(
        "--simulation",
        action="store_true",
        help="Use a simulated arm instead of the USB arm",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity",
    )
    return parser


def open_arm(simulation: bool, verbose: bool) -> RobotArmBase:
    """Connect to the USB arm, falling back to a simulated arm."""
    if not simulation:
        arm = create_arm(adapter="usb", verbose=verbose)
        try:
            arm.connect()
            return arm
        except RuntimeError as e:
            print(f"[Arm] {e}")
            print("Unable to setup robot arm. Using a fake arm instead.")

    arm = create_arm(adapter="simulation", verbose=verbose)
    arm.connect()
    return arm


def main():
    parser = build_parser()
    args = parser.parse_args()
    verbose = not args.quiet

    try:
        host, port = parse_server(args.server)
    except ValueError as e:
        parser.error(str(e))

    try:
        run(args, host, port, verbose)
    except KeyboardInterrupt:
        print("\n[Bot] Interrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def run(args, host: str, port: int, verbose: bool):
    """Wire arm, transport and console into one command loop and run it."""
    arm = open_arm(args.simulation, verbose)

    transport = IrcTransport(
        host,
        port,
        nick=args.nick,
        channel=args.channel,
        password=args.password,
        secure=args.secure,
        verbose=verbose,
    )
    interpreter = CommandInterpreter(arm, channels=transport, verbose=verbose)
    loop = CommandLoop(interpreter)

    try:
        transport.connect(loop.submit, on_disconnect=loop.close)
    except irc.client.ServerConnectionError as e:
        print(f"Unable to connect to {host}:{port}: {e}", file=sys.stderr)
        arm.disconnect()
        sys.exit(1)

    transport.start()
    loop.start_console()

    try:
        loop.run()
    finally:
        transport.disconnect()
        arm.disconnect()


if __name__ == "__main__":
    main()
