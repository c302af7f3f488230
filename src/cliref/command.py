"""Command identity model.

A Command is a binary plus the path of subcommand names leading to one node
of its command tree, e.g. ``./target/debug/app`` + ``("db", "stats")``.

Philosophy:
- Ruthlessly simple frozen dataclass
- Standard library only
- Children are new values, never mutated parents
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Command:
    """A binary and the subcommand segments that select one of its commands.

    Attributes:
        binary: Path to the binary (e.g. ./target/debug/app)
        subcommands: Subcommand segments in discovery order (e.g. ("db", "stats"))
    """

    binary: Path
    subcommands: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "binary", Path(self.binary))
        object.__setattr__(self, "subcommands", tuple(self.subcommands))

    @property
    def command_name(self) -> str:
        """File name of the binary."""
        name = self.binary.name
        if not name:
            raise ValueError(f"Expected a binary path, got: {self.binary}")
        return name

    @property
    def depth(self) -> int:
        """Number of subcommand segments below the binary."""
        return len(self.subcommands)

    @property
    def path(self) -> str:
        """Rendered form with spaces replaced by ``/`` (e.g. ``app/db/stats``)."""
        return str(self).replace(" ", "/")

    @property
    def args(self) -> list[str]:
        """Leading arguments passed to the binary."""
        return list(self.subcommands)

    def child(self, name: str) -> "Command":
        """Return the command one level below this one."""
        return Command(self.binary, (*self.subcommands, name))

    def __str__(self) -> str:
        return " ".join((self.command_name, *self.subcommands))
