import threading
from core.logging import log_queue_operation
from core.models import StreamInfoItem
from pydantic import BaseModel


class PlayQueueItem(BaseModel):
    """A stream in the play queue, keyed by its URL."""

    url: str
    title: str = ""
    duration: int = -1
    uploader: str | None = None
    thumbnail_url: str | None = None
    service_id: int = 0
    auto_queued: bool = False

    @classmethod
    def from_stream_item(cls, item: StreamInfoItem) -> "PlayQueueItem":
        return cls(
            url=item.url,
            title=item.name,
            duration=item.duration,
            uploader=item.uploader_name,
            thumbnail_url=item.thumbnail_url,
            service_id=item.service_id,
        )


class PlayQueue:
    """Ordered in-memory play queue with a current position."""

    def __init__(self, items: list[PlayQueueItem] | None = None, index: int = 0):
        self._items = list(items or [])
        self._index = index if 0 <= index < len(self._items) else 0
        self._lock = threading.RLock()  # Reentrant lock for thread-safe operations

    @property
    def items(self) -> list[PlayQueueItem]:
        """Snapshot of the queued items."""
        with self._lock:
            return list(self._items)

    @property
    def index(self) -> int:
        return self._index

    @property
    def item(self) -> PlayQueueItem | None:
        """Currently selected item, or None if the queue is empty."""
        with self._lock:
            if 0 <= self._index < len(self._items):
                return self._items[self._index]
            return None

    def size(self) -> int:
        return len(self._items)

    def urls(self) -> list[str]:
        with self._lock:
            return [item.url for item in self._items]

    def append(self, items: list[PlayQueueItem]) -> None:
        """Append items to the end of the queue.

        Args:
            items: Queue items to append
        """
        if not items:
            return

        with self._lock:
            log_queue_operation("append", count=len(items), queue_size=len(self._items))
            self._items.extend(items)

    def next(self) -> PlayQueueItem | None:
        """Advance to the next item.

        Returns:
            The new current item, or None if already at the end
        """
        with self._lock:
            if self._index < len(self._items) - 1:
                self._index += 1
                log_queue_operation("next", index=self._index)
                return self._items[self._index]
            return None

    def is_complete(self) -> bool:
        """True when the current item is the last one in a non-empty queue."""
        with self._lock:
            return bool(self._items) and self._index >= len(self._items) - 1

    def clear(self) -> None:
        """Clear all items from the queue."""
        with self._lock:
            log_queue_operation("clear", count=len(self._items))
            self._items = []
            self._index = 0


class SinglePlayQueue(PlayQueue):
    """A play queue holding exactly one stream."""

    def __init__(self, item: StreamInfoItem | PlayQueueItem):
        if isinstance(item, StreamInfoItem):
            item = PlayQueueItem.from_stream_item(item)
        super().__init__([item])
