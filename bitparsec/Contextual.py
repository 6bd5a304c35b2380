"""
Do-notation for parsers.

A grammar is written as a generator that yields parsers and gets their
results back, so later steps can depend on earlier values:

    @contextual
    def tagged_value():
        tag = yield letters()
        yield char(':')
        value = yield (digits() if tag == "int" else letters())
        return (tag, value)

The generator's return value becomes the parser's result.
"""
from typing import Any, Callable, Generator

from .Parsec import Parser, State, T

Steps = Generator[Parser[Any], Any, T]


def contextual(generator_fn: Callable[[], Steps]) -> Parser[T]:
    """Build a parser from a generator function of dependent parse steps.

    Each run starts a fresh generator. Steps run one at a time; the first
    failing step ends the run with its state, and the generator is closed.
    """
    def parse(state: State) -> State:
        steps = generator_fn()
        current = state
        value = None

        while True:
            try:
                next_parser = steps.send(value)
            except StopIteration as done:
                return current.with_result(done.value)

            if not isinstance(next_parser, Parser):
                steps.close()
                raise TypeError(f"contextual: yielded values must always be parsers, got {type(next_parser).__name__}")

            current = next_parser(current)
            if current.is_error:
                steps.close()
                return current
            value = current.result
    return Parser(parse)
