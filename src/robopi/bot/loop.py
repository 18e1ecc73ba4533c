"""
Command loop - the single point where commands are executed.

Chat messages and console lines arrive on different threads. They are
queued here and run one at a time on the thread calling run(), so a
command (and any dance it plays) finishes before the next one starts.
A command that blows up is reported to its sender and the loop carries on.
"""
from __future__ import annotations

import queue
import sys
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, TextIO

from .commands import Reply, tokenize

if TYPE_CHECKING:
    from .commands import CommandInterpreter


@dataclass
class CommandRequest:
    """A tokenized command and where its replies go."""
    commands: List[str]
    reply: Reply


class CommandLoop:
    """FIFO of pending commands for one interpreter."""

    def __init__(self, interpreter: CommandInterpreter):
        self.interpreter = interpreter
        self._queue: "queue.Queue[Optional[CommandRequest]]" = queue.Queue()

    def submit(self, commands: List[str], reply: Reply) -> None:
        """Queue a command. Safe to call from any thread."""
        self._queue.put(CommandRequest(commands=list(commands), reply=reply))

    def close(self) -> None:
        """Stop run() once the commands already queued are done."""
        self._queue.put(None)

    def run(self) -> None:
        """Execute queued commands until close() is called."""
        while True:
            request = self._queue.get()
            if request is None:
                break
            try:
                self.interpreter.handle(request.commands, request.reply)
            except Exception as e:
                self._report_failure(request, e)

    def _report_failure(self, request: CommandRequest, error: Exception) -> None:
        print(f"[Bot] '{' '.join(request.commands)}' failed: {error!r}")
        try:
            request.reply("Oh dear - something went wrong :(")
        except Exception as e:
            print(f"[Bot] Unable to reply: {e!r}")

    def read_console(self, stream: Optional[TextIO] = None, reply: Reply = print) -> None:
        """
        Submit every line of stream (standard input by default) as a command.

        End of input only stops the console; chat commands keep running
        until close() is called.
        """
        if stream is None:
            stream = sys.stdin
        for line in stream:
            self.submit(tokenize(line), reply)
        if self.interpreter.verbose:
            print("[Bot] Console input closed")

    def start_console(self, stream: Optional[TextIO] = None) -> threading.Thread:
        """Read console commands on a background thread."""
        if stream is None:
            stream = sys.stdin
        thread = threading.Thread(target=self.read_console, args=(stream,), daemon=True)
        thread.start()
        return thread
