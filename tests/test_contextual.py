import pytest

from bitparsec.Char import char, digits, letters, string
from bitparsec.Contextual import contextual
from bitparsec.Parsec import State
from bitparsec.Prim import fail


@contextual
def tagged_value():
    tag = yield letters()
    yield char(":")
    if tag == "int":
        value = yield digits().map(int)
    else:
        value = yield letters()
    return {"tag": tag, "value": value}


def test_later_steps_depend_on_earlier_results():
    assert tagged_value.run("int:42").result == {"tag": "int", "value": 42}
    assert tagged_value.run("name:bob").result == {"tag": "name", "value": "bob"}


def test_step_failure_aborts_with_that_state():
    state = tagged_value.run("int:bob")
    assert state.is_error
    assert state.index == 4
    assert state.error.startswith("digits:")


def test_generator_is_closed_after_failure():
    closed = []

    @contextual
    def steps():
        try:
            yield string("a")
            yield string("b")
            yield string("c")
        finally:
            closed.append(True)

    assert steps.run("ax").is_error
    assert closed == [True]


def test_no_steps_after_failure():
    reached = []

    @contextual
    def steps():
        yield fail("nope")
        reached.append(True)
        yield string("a")

    state = steps.run("a")
    assert state.error == "nope"
    assert reached == []


def test_each_run_starts_a_fresh_generator():
    first = tagged_value.run("int:1")
    second = tagged_value.run("int:2")
    assert first.result["value"] == 1
    assert second.result["value"] == 2


def test_starts_from_given_state():
    state = tagged_value(State("xx int:7", 3))
    assert state.result == {"tag": "int", "value": 7}
    assert state.index == 8


def test_empty_generator_succeeds_without_consuming():
    @contextual
    def nothing():
        return "done"
        yield  # pragma: no cover

    state = nothing.run("abc")
    assert state.result == "done"
    assert state.index == 0


def test_yielding_a_non_parser_is_a_type_error():
    @contextual
    def bad():
        yield "not a parser"

    with pytest.raises(TypeError):
        bad.run("abc")
