import pytest

from dsakit.errors import CapacityError, EmptyError
from dsakit.stacks import BoundedStack, QueueStack


def _check_lifo_round_trip(st, values):
    for value in values:
        st.push(value)
    assert st.is_full()
    assert [st.pop() for _ in values] == values[::-1]
    assert st.is_empty()


def _check_overflow_keeps_contents(st):
    st.push(1)
    st.push(2)
    with pytest.raises(CapacityError):
        st.push(3)
    assert len(st) == 2
    assert st.pop() == 2


def test_bounded_stack_lifo_round_trip():
    values = list(range(7))
    _check_lifo_round_trip(BoundedStack(len(values)), values)


def test_queue_stack_lifo_round_trip():
    values = list(range(7))
    _check_lifo_round_trip(QueueStack(len(values)), values)


def test_bounded_stack_overflow_keeps_contents():
    _check_overflow_keeps_contents(BoundedStack(2))


def test_queue_stack_overflow_keeps_contents():
    _check_overflow_keeps_contents(QueueStack(2))


def test_underflow():
    with pytest.raises(EmptyError):
        BoundedStack(3).pop()
    with pytest.raises(EmptyError):
        QueueStack(3).pop()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedStack(0)
    with pytest.raises(ValueError):
        QueueStack(0)


def test_default_capacity_is_five():
    assert BoundedStack().capacity == 5
    assert QueueStack().capacity == 5


def test_bounded_stack_example_sequence():
    st = BoundedStack(5)
    for value in (10, 20, 30):
        st.push(value)
    assert st.pop() == 30
    assert list(st) == [10, 20]
    st.push(40)
    assert [st.pop(), st.pop()] == [40, 20]
    assert list(st) == [10]
    for value in (50, 60, 70, 75):
        st.push(value)
    with pytest.raises(CapacityError):
        st.push(80)
    assert list(st) == [10, 50, 60, 70, 75]


def test_bounded_stack_peek():
    st = BoundedStack(3)
    with pytest.raises(EmptyError):
        st.peek()
    st.push("a")
    st.push("b")
    assert st.peek() == "b"
    assert len(st) == 2


def test_queue_stack_iterates_top_first():
    st = QueueStack()
    st.push(10)
    assert list(st) == [10]
    st.push(20)
    st.push(30)
    assert list(st) == [30, 20, 10]
    assert st.pop() == 30
    assert list(st) == [20, 10]


def test_queue_stack_interleaved_matches_list():
    st = QueueStack(5)
    reference = []
    for step, value in enumerate([4, 8, 15, 16, 23, 42]):
        if step % 3 == 2:
            assert st.pop() == reference.pop()
        st.push(value)
        reference.append(value)
        assert list(st) == reference[::-1]