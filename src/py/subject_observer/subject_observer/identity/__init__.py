class IdentityCounter:
    """Hands out increasing display numbers for observers.

    Subjects own one by default; share a single counter between subjects to
    keep numbers unique across all of them.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """
        Number the next call to ``next()`` will return.
        """
        return self._next
