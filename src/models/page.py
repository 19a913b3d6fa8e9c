"""Page data model."""

from dataclasses import dataclass


@dataclass
class Page:
    """A local Markdown file reduced to a title and a body.

    Attributes:
        name: Text of the first level-1 heading, trimmed
        content: Remaining Markdown with the heading line removed, trimmed
    """
    name: str
    content: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Page name cannot be empty")
