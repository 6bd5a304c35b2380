# tests/conftest.py
import pytest

from bitparsec.Parsec import State


def assert_state_eq(s1: State, s2: State):
    """
    Field-by-field comparison of two States, with readable failures.
    """
    assert s1.is_error == s2.is_error, f"Error flag mismatch: {s1.is_error} != {s2.is_error}"
    assert s1.index == s2.index, f"Index mismatch: {s1.index} != {s2.index}"
    if s1.is_error:
        assert s1.error == s2.error
    else:
        assert s1.result == s2.result


@pytest.fixture
def initial_state():
    def _make(input_data, index=0):
        return State(input_data, index)

    return _make
