"""
Resolution history for SocialSave.
Bounded, newest-first log of past resolutions, owned by the API layer.
"""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from services.video_resolver import VideoDescriptor
from utils.constants import DEFAULT_HISTORY_LIMIT


@dataclass
class HistoryEntry:
    """One past resolution."""

    id: str
    url: str
    descriptor: VideoDescriptor
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "url": self.url,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.descriptor.to_dict(),
        }


class HistoryManager:
    """
    Thread-safe history with in-memory storage.
    Entries beyond the limit are dropped, oldest first.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self.limit = limit
        self._entries: list[HistoryEntry] = []
        self._lock = threading.Lock()

    def add(self, url: str, descriptor: VideoDescriptor) -> HistoryEntry:
        """Record a resolution and return the new entry."""
        entry = HistoryEntry(id=str(uuid.uuid4())[:8], url=url, descriptor=descriptor)
        with self._lock:
            self._entries.insert(0, entry)
            del self._entries[self.limit:]
        return entry

    def list_entries(self, limit: Optional[int] = None) -> list[HistoryEntry]:
        """List entries, newest first."""
        with self._lock:
            entries = list(self._entries)
        if limit is not None:
            entries = entries[:limit]
        return entries

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        """Get an entry by ID."""
        with self._lock:
            return next((e for e in self._entries if e.id == entry_id), None)

    def clear(self) -> int:
        """Remove all entries and return how many were removed."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
