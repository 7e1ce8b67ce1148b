from subject_observer import IdentityCounter


def test_counter_starts_at_one() -> None:
    identities = IdentityCounter()

    assert identities.peek() == 1
    assert identities.next() == 1
    assert identities.next() == 2
    assert identities.peek() == 3


def test_counter_custom_start() -> None:
    identities = IdentityCounter(start=7)

    assert [identities.next() for _ in range(3)] == [7, 8, 9]


def test_counters_are_independent() -> None:
    first = IdentityCounter()
    second = IdentityCounter()

    first.next()
    first.next()

    assert second.next() == 1


def test_peek_does_not_advance() -> None:
    identities = IdentityCounter(start=4)

    assert identities.peek() == 4
    assert identities.peek() == 4
    assert identities.next() == 4
    assert identities.peek() == 5
