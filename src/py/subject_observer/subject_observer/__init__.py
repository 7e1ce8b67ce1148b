"""Observer pattern implementation: a subject broadcasting a message.

Subjects hold their observers through weak references, so an observer that
is garbage collected is skipped on the next ``notify()`` instead of being
called.
"""

from .core import (
    DuplicateSubscriptionError,
    IObserver,
    ISubject,
    Observer,
    ObserverNotFoundError,
    ReentrantNotificationError,
    Subject,
    SubscriptionError,
)
from .identity import IdentityCounter

__all__ = [
    "IdentityCounter",
    "ISubject",
    "IObserver",
    "Observer",
    "Subject",
    "SubscriptionError",
    "DuplicateSubscriptionError",
    "ObserverNotFoundError",
    "ReentrantNotificationError",
]
