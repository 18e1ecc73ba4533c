"""
IRC transport using the irc package.

Connects to a single server, joins the home channel and forwards messages
addressed to the bot ("robopi: move base left 1") as tokenized commands.
Replies go back to the sender as private messages.

The irc reactor runs on a background thread; commands are handed to the
caller's callback (normally CommandLoop.submit) and executed elsewhere.
"""
import functools
import ssl
import threading
from typing import Callable, List, Optional, Tuple

import irc.client
import irc.connection

from .commands import Reply, extract_command, tokenize


DEFAULT_PORT = 6667
DEFAULT_NICK = "robopi"
DEFAULT_CHANNEL = "#robopi"

NICKSERV = "NickServ"
REGISTERED_NICK_NOTICE = "This nickname is registered"

CommandCallback = Callable[[List[str], Reply], None]


def parse_server(address: str) -> Tuple[str, int]:
    """
    Split 'host[:port]' into host and port.

    Raises:
        ValueError: If the port is not a number
    """
    host, sep, port = address.rpartition(":")
    if not sep:
        return address, DEFAULT_PORT
    if not host:
        raise ValueError(f"Missing host in server address: {address}")
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"Invalid port in server address: {address}") from None


class IrcTransport:
    """
    Chat transport for a single IRC server.

    Implements the join/part capability used by the 'join' and 'leave'
    commands.
    """

    def __init__(
        self,
        server: str,
        port: int = DEFAULT_PORT,
        *,
        nick: str = DEFAULT_NICK,
        channel: Optional[str] = DEFAULT_CHANNEL,
        password: Optional[str] = None,
        secure: bool = False,
        verbose: bool = True,
    ):
        """
        Initialize the transport (does not connect).

        Args:
            server: Server host name
            port: Server port
            nick: Nickname; messages must contain '<nick>:' to be commands
            channel: Channel to join once connected (None to stay out)
            password: NickServ password, sent when the nick is registered
            secure: Use TLS
            verbose: Print status messages
        """
        self.server = server
        self.port = port
        self.nick = nick
        self.channel = channel
        self.password = password
        self.secure = secure
        self.verbose = verbose

        self._reactor = irc.client.Reactor()
        self._connection = self._reactor.server()
        self._on_command: Optional[CommandCallback] = None
        self._on_closed: Optional[Callable[[], None]] = None
        self._thread: Optional[threading.Thread] = None

        self._reactor.add_global_handler("welcome", self._on_welcome)
        self._reactor.add_global_handler("pubmsg", self._on_message)
        self._reactor.add_global_handler("privmsg", self._on_message)
        self._reactor.add_global_handler("privnotice", self._on_notice)
        self._reactor.add_global_handler("pubnotice", self._on_notice)
        self._reactor.add_global_handler("disconnect", self._on_disconnect)

    @property
    def address(self) -> str:
        """Token that marks a message as a command for this bot."""
        return f"{self.nick}:"

    def _log(self, msg: str):
        if self.verbose:
            print(f"[IRC] {msg}")

    def _connect_factory(self) -> irc.connection.Factory:
        if not self.secure:
            return irc.connection.Factory()
        context = ssl.create_default_context()
        return irc.connection.Factory(
            wrapper=functools.partial(context.wrap_socket, server_hostname=self.server)
        )

    def connect(
        self,
        on_command: CommandCallback,
        on_disconnect: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Connect to the server.

        Args:
            on_command: Called from the reactor thread with the tokens of
                each addressed message and a reply function
            on_disconnect: Called from the reactor thread when the server
                connection is lost

        Raises:
            irc.client.ServerConnectionError: If the server is unreachable
        """
        self._on_command = on_command
        self._on_closed = on_disconnect
        self._log(f"Joining {self.server}:{self.port}{' (TLS)' if self.secure else ''}")
        self._connection.connect(
            self.server,
            self.port,
            self.nick,
            ircname=self.nick,
            connect_factory=self._connect_factory(),
        )

    def start(self) -> threading.Thread:
        """Process IRC events on a background thread."""
        self._thread = threading.Thread(target=self._reactor.process_forever, daemon=True)
        self._thread.start()
        return self._thread

    def disconnect(self, message: str = "Bye!") -> None:
        if self._connection.is_connected():
            with self._reactor.mutex:
                self._connection.disconnect(message)

    def privmsg(self, target: str, text: str) -> None:
        with self._reactor.mutex:
            self._connection.privmsg(target, text)

    def join(self, channel: str) -> None:
        self._log(f"Joining {channel}")
        with self._reactor.mutex:
            self._connection.join(channel)

    def part(self, channel: str) -> None:
        self._log(f"Leaving {channel}")
        with self._reactor.mutex:
            self._connection.part(channel)

    def _on_welcome(self, connection, event) -> None:
        self._log(f"Connected as {self.nick}")
        if self.channel:
            connection.join(self.channel)

    def _on_notice(self, connection, event) -> None:
        text = event.arguments[0] if event.arguments else ""
        self._log(f"NOTICE: {text}")
        if REGISTERED_NICK_NOTICE in text and self.password:
            connection.privmsg(NICKSERV, f"IDENTIFY {self.nick} {self.password}")
            if self.channel:
                connection.join(self.channel)

    def _on_message(self, connection, event) -> None:
        text = event.arguments[0] if event.arguments else ""
        self._log(f"PRIVMSG: {text}")

        command = extract_command(text, self.address)
        if command is None or self._on_command is None:
            return

        sender = event.source.nick
        self._on_command(tokenize(command), functools.partial(self.privmsg, sender))

    def _on_disconnect(self, connection, event) -> None:
        reason = event.arguments[0] if event.arguments else ""
        self._log(f"Disconnected: {reason}")
        if self._on_closed is not None:
            self._on_closed()
