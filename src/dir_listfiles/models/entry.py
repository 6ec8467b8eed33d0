"""
Directory entry and listing result models.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Entry:
    """A discovered filesystem object."""

    path: str
    name: str
    is_dir: bool


@dataclass
class ListingResult:
    """Result of a listing operation."""

    paths: list[str] = field(default_factory=list)
    total_scanned: int = 0
    filtered_out: int = 0
    directories_visited: int = 0
    scan_time_ms: float = 0.0

    def __len__(self) -> int:
        return len(self.paths)
