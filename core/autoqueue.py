"""Selection of the item to play once a queue runs out.

Cycles are avoided naively: a candidate is rejected when its URL string is
already in the queue. Equivalent streams under different URLs are not
detected, and an item may come back once it has left the queue.
"""

import random
from collections.abc import Iterable
from core.logging import autoqueue_logger, log_autoqueue_decision
from core.models import StreamInfo, StreamInfoItem
from core.queue import PlayQueue, PlayQueueItem, SinglePlayQueue
from eliot import start_action


def _auto_queued(item: StreamInfoItem) -> SinglePlayQueue:
    queue = SinglePlayQueue(item)
    queue.item.auto_queued = True
    return queue


def select_next(
    explicit_next: StreamInfoItem | None,
    related: Iterable | None,
    existing_urls: Iterable[str],
    rng: random.Random | None = None,
) -> SinglePlayQueue | None:
    """Pick the next stream to auto-queue.

    An unseen explicit next video always wins. Otherwise one unseen stream is
    drawn uniformly at random from the related items; non-stream entries are
    skipped.

    Args:
        explicit_next: Platform provided "up next" stream, if any
        related: Related items listing, None when there is none
        existing_urls: URLs already in the queue
        rng: Random source, defaults to the random module

    Returns:
        Single item queue flagged as auto-queued, or None if nothing qualifies
    """
    seen = set(existing_urls)

    with start_action(autoqueue_logger, "autoqueue:select", queue_size=len(seen)):
        if isinstance(explicit_next, StreamInfoItem) and explicit_next.url not in seen:
            log_autoqueue_decision("next_video", explicit_next.url)
            return _auto_queued(explicit_next)

        if not isinstance(related, Iterable):
            log_autoqueue_decision("no_related")
            return None

        candidates = [item for item in related if isinstance(item, StreamInfoItem) and item.url not in seen]
        if not candidates:
            log_autoqueue_decision("exhausted")
            return None

        chosen = (rng or random).choice(candidates)
        log_autoqueue_decision("related", chosen.url, candidates=len(candidates))
        return _auto_queued(chosen)


def auto_queue_of(
    info: StreamInfo, existing_items: Iterable[PlayQueueItem], rng: random.Random | None = None
) -> SinglePlayQueue | None:
    """Build the auto-queue for a stream given the items already queued."""
    return select_next(info.next_video, info.related_streams, (item.url for item in existing_items), rng=rng)


def append_auto_queue(queue: PlayQueue, info: StreamInfo, preferences, rng: random.Random | None = None) -> PlayQueueItem | None:
    """Append an auto-queued stream to a finished queue.

    Does nothing unless auto-queue is enabled and the queue is on its last item.

    Args:
        queue: The active play queue
        info: Info of the stream currently playing
        preferences: PlayerPreferences used to check the auto-queue setting
        rng: Random source, defaults to the random module

    Returns:
        The appended item, or None if nothing was appended
    """
    if not preferences.is_auto_queue_enabled() or not queue.is_complete():
        return None

    auto_queue = auto_queue_of(info, queue.items, rng=rng)
    if auto_queue is None:
        return None

    queue.append(auto_queue.items)
    return auto_queue.item
