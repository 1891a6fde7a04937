"""
File-save capability used by RosterManager.export_team.

The browser cannot be handed a file from the server side directly, so the app
queues the export and renders it with ``st.download_button`` on the next draw.
"""
from __future__ import annotations
from typing import Callable, List, NamedTuple, Optional, Protocol


class FileSaver(Protocol):
    def save(self, filename: str, content: str) -> None: ...


class PendingDownload(NamedTuple):
    filename: str
    content: str


class DownloadQueue:
    """Collects saved files in order; the app drains it into download buttons."""

    def __init__(self, items: Optional[List[PendingDownload]] = None):
        self.items: List[PendingDownload] = list(items or [])

    def save(self, filename: str, content: str) -> None:
        # one pending download per filename; a re-export replaces the older copy
        self.items = [d for d in self.items if d.filename != filename]
        self.items.append(PendingDownload(filename, content))

    def get(self, filename: str) -> Optional[PendingDownload]:
        for d in self.items:
            if d.filename == filename:
                return d
        return None

    def pop(self, filename: str) -> Optional[PendingDownload]:
        for i, d in enumerate(self.items):
            if d.filename == filename:
                return self.items.pop(i)
        return None

    def retain(self, keep: Callable[[PendingDownload], bool]) -> None:
        self.items = [d for d in self.items if keep(d)]

    def clear(self) -> None:
        self.items = []

    def __len__(self) -> int:
        return len(self.items)
