"""Connected clients and their queue of timed commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from termcolor import colored

MAX_PENDING = 10
READ_SIZE = 512

_COMMAND_TICKS = {
    "avance": 7,
    "droite": 7,
    "gauche": 7,
    "voir": 7,
    "inventaire": 1,
    "prend": 7,
    "pose": 7,
    "expulse": 7,
    "broadcast": 7,
    "incantation": 300,
    "fork": 42,
    "connect_nbr": 0,
}


def command_ticks(command: str) -> int:
    """Return how many ticks ``command`` waits before it runs."""
    return _COMMAND_TICKS.get(command.strip(), 0)


@dataclass
class PendingCommand:
    """A received command waiting for its delay to run out."""

    command: str
    ticks_remaining: int


@dataclass(eq=False)
class Client:
    """One connection to the server with its queued commands."""

    stream: Any
    addr: tuple[str, int]
    id: int
    commands: list[str] = field(default_factory=list)
    player_id: str | None = None
    team_id: int = 0
    pending_commands: list[PendingCommand] = field(default_factory=list)

    def __post_init__(self) -> None:
        print(f"{colored('[+]', 'green', attrs=['bold'])} Client #{self.id} (IP: {self._addr_text})")

    @property
    def _addr_text(self) -> str:
        host, port = self.addr[0], self.addr[1]
        return f"{host}:{port}"

    def add_command(self, command: str) -> None:
        """Queue ``command`` with its delay, unless the queue is full."""
        if len(self.pending_commands) >= MAX_PENDING:
            return
        print(f"{colored('[RECV]', 'cyan', attrs=['bold'])} Client #{self.id}: "
              f"{colored(command, 'cyan', attrs=['bold'])}")
        self.pending_commands.append(PendingCommand(command, command_ticks(command)))

    def current_command(self) -> str | None:
        """Return the first stored command, if any."""
        if not self.commands:
            return None
        print(self.commands[0])
        return self.commands[0]

    def remove_command(self) -> None:
        """Drop the first stored command, if any."""
        if self.commands:
            del self.commands[0]

    def send_message(self, msg: str) -> None:
        """Write ``msg`` to the client; a failed write is only reported."""
        try:
            self.stream.sendall(msg.encode("utf-8"))
        except OSError as exc:
            print(f"{colored(f'[ERROR] impossible d envoyer un message au client {self.id}:'.replace('d envoyer', chr(100) + chr(39) + 'envoyer'), 'red', attrs=['bold'])} {exc}")
        print(f"{colored('[SEND]', 'blue', attrs=['bold'])} Server -> Client #{self.id}: "
              f"{colored(msg.rstrip(), 'cyan', attrs=['bold'])}")

    def disconnect(self) -> None:
        """Report the departure of the client and close its connection."""
        print(f"{colored('[-]', 'red', attrs=['bold'])} Client #{self.id} (IP: {self._addr_text})")
        try:
            self.stream.close()
        except OSError:
            pass

    def read_from_stream(self) -> bool:
        """Read one message into the queue; return False once the peer has closed."""
        try:
            data = self.stream.recv(READ_SIZE)
        except OSError:
            return True
        if not data:
            return False
        self.add_command(data.decode("utf-8", errors="replace").strip())
        return True

    def update_commands(self) -> str | None:
        """Advance the first pending command by one tick; return it once it is due."""
        if not self.pending_commands:
            return None
        pending = self.pending_commands[0]
        if pending.ticks_remaining > 0:
            pending.ticks_remaining -= 1
            return None
        del self.pending_commands[0]
        return pending.command