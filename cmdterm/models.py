from dataclasses import dataclass


@dataclass
class Bookmark:
    """A saved (name, url) pair. Names are not unique."""
    name: str
    url: str

    def __str__(self) -> str:
        return f"{self.name} -> {self.url}"
