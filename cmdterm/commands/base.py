from abc import ABC, abstractmethod


class Command(ABC):
    """Base class for terminal commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Dispatch key, matched case-sensitively."""
        pass

    @abstractmethod
    def execute(self, args: list[str]) -> str:
        """Run the command. Returns response text, empty for no output.

        Must not raise on bad arguments; return a usage message instead.
        """
        pass
