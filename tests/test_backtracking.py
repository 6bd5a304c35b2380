# tests/test_backtracking.py
from hypothesis import given
from hypothesis import strategies as st

from bitparsec.Char import char, string
from bitparsec.Combinators import choice, sequence_of
from bitparsec.Parsec import State


def test_choice_retries_from_original_index():
    """
    (char('a') > char('b')) | char('a')
    Input: 'ac'

    1. First parser matches 'a' (index 1).
    2. Then fails on 'c' (expected 'b').
    3. The second branch starts again from index 0, not 1.
    4. Result: 'a', index 1.
    """
    parser = (char("a") > char("b")) | char("a")

    state = State("ac")
    result = parser(state)

    assert not result.is_error
    assert result.result == "a"
    assert result.index == 1


def test_choice_failure_reports_original_index():
    parser = choice(sequence_of(string("ab"), string("cd")), string("xy"))

    result = parser.run("abzz")

    assert result.is_error
    # the first branch got to index 2, but choice reports where it started
    assert result.index == 0


@given(st.integers(min_value=1, max_value=10), st.integers(min_value=0, max_value=5))
def test_second_branch_sees_original_position(k, start):
    prefix = "a" * k
    text = "." * start + prefix + "b"
    first = sequence_of(string(prefix), char("c"))
    second = sequence_of(string(prefix), char("b"))

    result = choice(first, second)(State(text, start))

    assert not result.is_error
    assert result.result == [prefix, "b"]
    assert result.index == start + k + 1
