# storefront/notifications.py
from dataclasses import dataclass
from typing import Callable, List

from .logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Notice:
    title: str
    description: str


NoticeListener = Callable[[Notice], None]


class Notifier:
    """
    Fire-and-forget notices for the view layer.

    Notices queue until drained; drain() hands each one out exactly once.
    Listeners are told about a notice as it is queued.
    """

    def __init__(self):
        self._queue: List[Notice] = []
        self._listeners: List[NoticeListener] = []

    def notify(self, title: str, description: str) -> Notice:
        notice = Notice(title=title, description=description)
        self._queue.append(notice)
        logger.info("Notice: %s - %s", title, description)
        for listener in list(self._listeners):
            try:
                listener(notice)
            except Exception as e:
                logger.exception("Notice listener failed: %s", e)
        return notice

    def pending(self) -> List[Notice]:
        return list(self._queue)

    def drain(self) -> List[Notice]:
        notices, self._queue = self._queue, []
        return notices

    def subscribe(self, listener: NoticeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
