"""In-process event bus carrying user-facing notices to the presentation layer"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

logger = logging.getLogger(__name__)


class NoticeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class Notice:
    kind: NoticeKind
    title: str
    description: str
    dismissible: bool = True
    # Follow-up actions offered with the notice, e.g. "register_another"
    actions: List[str] = field(default_factory=list)


Subscriber = Callable[[Notice], None]


class NotificationBus:
    """
    Publish/subscribe channel for notices.

    Components publish notices; the presentation layer subscribes and renders
    them. Published notices stay active until dismissed.
    """

    def __init__(self):
        self._subscribers: List[Subscriber] = []
        self._active: List[Notice] = []

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a subscriber and return a function that removes it"""
        self._subscribers.append(subscriber)

        def unsubscribe():
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def publish(self, notice: Notice) -> None:
        logger.debug(f"Publishing {notice.kind.value} notice: {notice.title}")
        self._active.append(notice)
        for subscriber in list(self._subscribers):
            subscriber(notice)

    def dismiss(self, notice: Notice) -> None:
        if not notice.dismissible:
            raise ValueError(f"Notice '{notice.title}' cannot be dismissed")
        if notice in self._active:
            self._active.remove(notice)

    @property
    def active(self) -> List[Notice]:
        return list(self._active)
