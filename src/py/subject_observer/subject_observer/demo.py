"""Walk through attaching, notifying and detaching observers on one subject."""

import logging
import os

from .core import Observer, Subject

LOG_LEVEL_ENV = "SUBJECT_OBSERVER_LOG_LEVEL"


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(level=level, format="%(message)s")


def run() -> None:
    subject = Subject()
    observer1 = Observer(subject)
    observer2 = Observer(subject)
    observer3 = Observer(subject)

    subject.create_message("hello world")
    observer3.remove_me_from_list()

    subject.create_message("The weather is hot today! :p")
    observer4 = Observer(subject)

    observer2.remove_me_from_list()
    observer5 = Observer(subject)

    subject.create_message("My new car is great! ;)")
    observer5.remove_me_from_list()

    observer4.remove_me_from_list()
    observer1.remove_me_from_list()

    del observer1, observer2, observer3, observer4, observer5
    del subject


def main() -> None:
    configure_logging()
    run()


if __name__ == "__main__":
    main()
