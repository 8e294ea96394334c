import pytest

from puzzlekit.stacks import (
    MinStack,
    car_fleet,
    daily_temperatures,
    eval_rpn,
    is_valid_parentheses,
)


def test_min_stack_tracks_minimum():
    values = [5, 3, 7, 3, 1, 8]
    stack = MinStack()
    for i, v in enumerate(values):
        stack.push(v)
        assert stack.top() == v
        assert stack.get_min() == min(values[: i + 1])
    for i in range(len(values) - 1, 0, -1):
        stack.pop()
        assert stack.top() == values[i - 1]
        assert stack.get_min() == min(values[:i])


def test_min_stack_empty_errors():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.get_min()


def test_eval_rpn_example():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


def test_eval_rpn_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -3


def test_eval_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_eval_rpn_subtraction_order():
    a, b = 10, 4
    assert eval_rpn([str(a), str(b), "-"]) == a - b


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


def test_eval_rpn_missing_operand():
    with pytest.raises(ValueError):
        eval_rpn(["1", "+"])


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[()]}", ""])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s) is True


@pytest.mark.parametrize("s", ["(]", "(", ")", "([)]", "a"])
def test_invalid_parentheses(s):
    assert is_valid_parentheses(s) is False


@pytest.mark.parametrize(
    "temps",
    [[73, 74, 75, 71, 69, 72, 76, 73], [30, 40, 50, 60], [30, 60, 90], [50, 50, 50]],
)
def test_daily_temperatures_invariant(temps):
    answer = daily_temperatures(temps)
    assert len(answer) == len(temps)
    for i, wait in enumerate(answer):
        if wait:
            assert temps[i + wait] > temps[i]
            assert all(t <= temps[i] for t in temps[i + 1 : i + wait])
        else:
            assert all(t <= temps[i] for t in temps[i + 1 :])


def test_daily_temperatures_decreasing_all_zero():
    temps = [90, 80, 70, 60]
    assert daily_temperatures(temps) == [0] * len(temps)


def test_daily_temperatures_increasing():
    temps = [10, 20, 30, 40]
    assert daily_temperatures(temps) == [1] * (len(temps) - 1) + [0]


def test_car_fleet_example():
    assert car_fleet(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3]) == 3


def test_car_fleet_same_speed_never_merge():
    positions = [0, 2, 4, 6]
    assert car_fleet(10, positions, [1] * len(positions)) == len(positions)


def test_car_fleet_single_car():
    assert car_fleet(10, [3], [3]) == 1


def test_car_fleet_empty():
    assert car_fleet(10, [], []) == 0