"""
Chat command interpreter.

Turns tokenized command lines into arm moves and dance recordings:

    teach <dance>                 start recording a dance
    move <joint> <dir> <seconds>  do a move now, or record it while teaching
    done                          stop recording
    dance <dance>                 play a recorded dance
    forget <dance>                delete a dance
    join <channel> / leave <channel>
    echo <text...>

Replies are sent through a callback so the interpreter never needs to know
who it is talking to.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Protocol, Sequence

from ..base import ActuatorError
from ..choreography import DanceExistsError, DanceStore, parse_move, run_moves
from ..moves import UnknownMoveError, describe_moves

if TYPE_CHECKING:
    from ..base import RobotArmBase


Reply = Callable[[str], None]

# Commands are split on ASCII whitespace only
_WHITESPACE_RE = re.compile(r"[ \t\n\r\x0b\x0c]+")


def tokenize(line: str) -> List[str]:
    """Split a command line into words."""
    return [word for word in _WHITESPACE_RE.split(line) if word]


def extract_command(message: str, address: str) -> Optional[str]:
    """
    Return the text following the first occurrence of address, or None
    if the message is not addressed to us.
    """
    index = message.find(address)
    if index == -1:
        return None
    return message[index + len(address):]


class ChannelControl(Protocol):
    """Transport capability used by the join/leave commands."""

    def join(self, channel: str) -> None: ...

    def part(self, channel: str) -> None: ...


@dataclass
class ConversationState:
    """Dances known to the bot and the one currently being taught."""
    dances: DanceStore = field(default_factory=DanceStore)
    teaching: Optional[str] = None


class CommandInterpreter:
    """
    Dispatches commands on their first word.

    Two states: idle, and teaching a named dance. While teaching, valid
    'move' commands are recorded instead of executed.
    """

    def __init__(
        self,
        arm: RobotArmBase,
        channels: Optional[ChannelControl] = None,
        state: Optional[ConversationState] = None,
        verbose: bool = True,
    ):
        self.arm = arm
        self.channels = channels
        self.state = state if state is not None else ConversationState()
        self.verbose = verbose
        self._handlers: Dict[str, Callable[[Sequence[str], Reply], None]] = {
            "teach": self._teach,
            "move": self._move,
            "done": self._done,
            "dance": self._dance,
            "forget": self._forget,
            "join": self._join,
            "leave": self._leave,
            "echo": self._echo,
        }

    def _log(self, msg: str):
        if self.verbose:
            print(f"[Bot] {msg}")

    def handle(self, commands: Sequence[str], reply: Reply) -> None:
        """Run one tokenized command line. Empty lines are ignored."""
        if not commands:
            return

        verb, args = commands[0], commands[1:]
        self._log(" ".join(commands))
        handler = self._handlers.get(verb)
        if handler is None:
            reply(f"I don't understand '{verb}'")
            reply("Use 'teach', 'move' or 'dance'")
            return
        handler(args, reply)

    def _teach(self, args: Sequence[str], reply: Reply) -> None:
        if not args:
            reply("I need the name of a dance to learn! - Use 'teach <dance>'!")
            return

        name = args[0]
        try:
            self.state.dances.define(name)
        except DanceExistsError:
            reply(f"That's old hat - I already know '{name}'")
            reply(f"Use 'forget {name}' if you want to teach me again")
            return

        if self.state.teaching is not None:
            self._log(f"Stopped teaching '{self.state.teaching}'")
        self.state.teaching = name
        reply(f"Teach me the '{name}' dance!")
        reply(
            "Use 'move <body part> <direction> <duration>' for each move and "
            "'done' when you're finished :)"
        )

    def _move(self, args: Sequence[str], reply: Reply) -> None:
        if len(args) < 3:
            reply("I need a move to do! - Use 'move <body part> <direction> <duration>'")
            return

        try:
            move = parse_move(args[0], args[1], args[2])
        except UnknownMoveError:
            reply("I don't know that move :(")
            reply(f"I do know: {describe_moves()}")
            return

        if self.state.teaching is not None:
            self.state.dances.append(self.state.teaching, move)
            reply("OK!")
            return

        try:
            run_moves(self.arm, [move], verbose=self.verbose)
        except ActuatorError as e:
            self._log(f"Move failed: {e}")
            reply("Oh dear - my arm failed me :(")
            return
        reply("OK!")

    def _done(self, args: Sequence[str], reply: Reply) -> None:
        name = self.state.teaching or ""
        self.state.teaching = None
        reply(f"Use 'dance {name}' to see this!")

    def _dance(self, args: Sequence[str], reply: Reply) -> None:
        dances = self.state.dances
        if not args:
            reply(f"I need the name of a dance to do! - I know these ones: {', '.join(dances.names())}")
            return

        name = args[0]
        moves = dances.get(name) if name in dances else []
        if not moves:
            reply(f"I don't know that :( - Use 'teach {name}' to teach me")
            return

        try:
            run_moves(self.arm, moves, verbose=self.verbose)
        except ActuatorError as e:
            self._log(f"Dance '{name}' failed: {e}")
            reply("Oh dear - my arm didn't work :(")

    def _forget(self, args: Sequence[str], reply: Reply) -> None:
        if not args:
            return

        name = args[0]
        self.state.dances.forget(name)
        if self.state.teaching == name:
            self.state.teaching = None

    def _join(self, args: Sequence[str], reply: Reply) -> None:
        if not args:
            reply("I need the name of a channel to join")
        elif self.channels is None:
            reply("I'm not connected to a chat server")
        else:
            self.channels.join(args[0])

    def _leave(self, args: Sequence[str], reply: Reply) -> None:
        if not args:
            reply("I need the name of a channel to leave")
        elif self.channels is None:
            reply("I'm not connected to a chat server")
        else:
            self.channels.part(args[0])

    def _echo(self, args: Sequence[str], reply: Reply) -> None:
        reply(" ".join(args))
