from typing import Iterator, Optional
from typing_extensions import override
import logging
import weakref

from .identity import IdentityCounter


class SubscriptionError(Exception):
    """Base class for failures raised by subscription management."""


class DuplicateSubscriptionError(SubscriptionError):
    """Raised by a strict subject when an observer is attached twice."""


class ObserverNotFoundError(SubscriptionError):
    """Raised by a strict subject when detaching an observer it does not hold."""


class ReentrantNotificationError(SubscriptionError):
    """Raised when the observer list is changed while the subject is notifying."""


class IObserver:
    def update(self, message: str) -> None:
        """
        Receive the subject's current message.
        """
        raise NotImplementedError


class ISubject:
    def attach(self, observer: IObserver) -> None:
        """
        Add an observer to the subject.
        """
        raise NotImplementedError

    def detach(self, observer: IObserver) -> None:
        """
        Remove an observer from the subject.
        """
        raise NotImplementedError

    def notify(self) -> None:
        """
        Notify all observers with the current message.
        """
        raise NotImplementedError


class Subject(ISubject):
    """
    Owns a message and broadcasts it to its observers whenever it changes.

    Observers are held through weak references, so the subject never keeps one
    alive and never calls ``update`` on one that has been collected. The list
    is not deduplicated: attaching the same observer twice registers it twice
    and it is updated twice per ``notify()``. Pass ``strict=True`` to turn
    duplicate attaches and detaches of unknown observers into errors.
    """

    def __init__(
        self, strict: bool = False, identities: Optional[IdentityCounter] = None
    ) -> None:
        self._observers: list[weakref.ref[IObserver]] = []
        self._message = ""
        self._notifying = False
        self.strict = strict
        self.identities = identities if identities is not None else IdentityCounter()
        weakref.finalize(
            self, logging.getLogger(__name__).info, "Goodbye, I was the Subject."
        )

    @property
    def message(self) -> str:
        return self._message

    @property
    def observers(self) -> tuple[IObserver, ...]:
        """
        Live observers in notification order, duplicates included.
        """
        return tuple(self._iter_live())

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_live())

    def __contains__(self, observer: object) -> bool:
        return any(live is observer for live in self._iter_live())

    @override
    def attach(self, observer: IObserver) -> None:
        self._check_not_notifying("attach")
        if self.strict and observer in self:
            raise DuplicateSubscriptionError(f"{observer!r} is already attached")
        self._observers.append(weakref.ref(observer))

    @override
    def detach(self, observer: IObserver) -> None:
        self._check_not_notifying("detach")
        for i, ref in enumerate(self._observers):
            if ref() is observer:
                del self._observers[i]
                return
        if self.strict:
            raise ObserverNotFoundError(f"{observer!r} is not attached")

    @override
    def notify(self) -> None:
        self._prune()
        self.how_many_observers()

        snapshot = list(self._observers)
        errors: list[Exception] = []
        was_notifying = self._notifying
        self._notifying = True
        try:
            for ref in snapshot:
                observer = ref()
                if observer is None:
                    continue
                try:
                    observer.update(self._message)
                except Exception as e:
                    logging.getLogger(__name__).exception("Observer update failed.")
                    errors.append(e)
        finally:
            self._notifying = was_notifying

        for error in errors:
            raise error

    def create_message(self, message: str = "empty") -> None:
        self._message = message
        self.notify()

    def how_many_observers(self) -> int:
        count = len(self)
        logging.getLogger(__name__).info(
            "There are %d observers in the list.", count
        )
        return count

    def some_business_logic(self) -> None:
        """
        Stand-in for the real work a subject does; notifies before carrying on.
        """
        self._message = "change message message"
        self.notify()
        logging.getLogger(__name__).info("I'm about to do some thing important")

    def _iter_live(self) -> Iterator[IObserver]:
        for ref in self._observers:
            observer = ref()
            if observer is not None:
                yield observer

    def _prune(self) -> None:
        self._observers = [ref for ref in self._observers if ref() is not None]

    def _check_not_notifying(self, operation: str) -> None:
        if self._notifying:
            raise ReentrantNotificationError(
                f"cannot {operation} an observer while the subject is notifying"
            )


class Observer(IObserver):
    """
    Subscribes itself to ``subject`` on construction and keeps the last
    message it was sent.

    Dropping the last reference to an observer does not detach it; the
    subject just stops seeing it.
    """

    def __init__(
        self, subject: Subject, identities: Optional[IdentityCounter] = None
    ) -> None:
        self._subject = subject
        self._message = ""
        counter = identities if identities is not None else subject.identities
        self._subject.attach(self)
        self._number = counter.next()
        logging.getLogger(__name__).info('Hi, I\'m the Observer "%d".', self._number)
        weakref.finalize(
            self,
            logging.getLogger(__name__).info,
            'Goodbye, I was the Observer "%d".',
            self._number,
        )

    def __repr__(self) -> str:
        return f"Observer({self._number})"

    @property
    def subject(self) -> Subject:
        return self._subject

    @property
    def number(self) -> int:
        return self._number

    @property
    def message(self) -> str:
        return self._message

    @override
    def update(self, message: str) -> None:
        self._message = message
        logging.getLogger(__name__).info(
            'Observer "%d": a new message is available --> %s',
            self._number,
            self._message,
        )

    def remove_me_from_list(self) -> None:
        self._subject.detach(self)
        logging.getLogger(__name__).info(
            'Observer "%d" removed from the list.', self._number
        )
