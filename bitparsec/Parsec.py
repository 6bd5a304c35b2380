import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class State(Generic[T]):
    """Parser state: the whole input, a cursor into it, the last result and the error flag.

    `index` counts characters for text input and bits for binary input.
    """
    input: Any
    index: int = 0
    result: Optional[T] = None
    is_error: bool = False
    error: Optional[str] = None

    @classmethod
    def initial(cls, input_data: Any) -> 'State':
        return cls(input_data)

    def advance(self, index: int, result: Any) -> 'State':
        """Move the cursor and record a new result."""
        return replace(self, index=index, result=result)

    def with_result(self, result: Any) -> 'State':
        return replace(self, result=result)

    def with_error(self, message: str) -> 'State':
        """Mark the state failed; index and result are kept for reporting."""
        return replace(self, is_error=True, error=message)

    @property
    def remaining(self) -> Any:
        return self.input[self.index:]


@dataclass(frozen=True)
class ParseError:
    """Represents a parsing error with a message and the index it stopped at."""
    index: int
    message: str

    def __str__(self) -> str:
        return f"Parse error at index {self.index}: {self.message}"


class Parser(Generic[T]):
    """A parser: a function from State to State plus the ways of combining it."""
    def __init__(self, transform: Callable[[State], State]):
        self.transform = transform

    def __call__(self, state: State) -> State:
        # An errored state is terminal: nothing downstream may consume from it.
        if state.is_error:
            return state
        return self.transform(state)

    def run(self, input_data: Any) -> State:
        """Run against a complete input from a fresh initial state. Never raises on bad input."""
        final_state = self(State.initial(input_data))
        if final_state.is_error:
            logger.debug("parse failed at index %d: %s", final_state.index, final_state.error)
        return final_state

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        def parse(state: State) -> State:
            next_state = self(state)
            if next_state.is_error:
                return next_state
            return next_state.with_result(f(next_state.result))
        return Parser(parse)

    # Monadic bind (>>=)
    def chain(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(state: State) -> State:
            next_state = self(state)
            if next_state.is_error:
                return next_state

            # f decides the next parser from the value just produced
            next_parser = f(next_state.result)
            if not isinstance(next_parser, Parser):
                raise TypeError(f"chain: continuation must return a Parser, got {type(next_parser).__name__}")
            return next_parser(next_state)
        return Parser(parse)

    bind = chain

    def error_map(self, f: Callable[[Optional[str], int], str]) -> 'Parser[T]':
        """Rewrite the error message of a failure; f receives the old message and the failing index."""
        def parse(state: State) -> State:
            next_state = self(state)
            if not next_state.is_error:
                return next_state
            return next_state.with_error(f(next_state.error, next_state.index))
        return Parser(parse)

    # Label (<?>)
    def label(self, name: str) -> 'Parser[T]':
        return self.error_map(lambda _, index: f"expected {name} at index {index}")

    # Alternative (<|>), always backtracks to the state before self was tried
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        def parse(state: State) -> State:
            first = self(state)
            if not first.is_error:
                return first
            return other(state)
        return Parser(parse)

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.chain(f)

    # Sequence (&)
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        return self.chain(lambda first: other.map(lambda second: (first, second)))

    # Sequence (*>)
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return self.chain(lambda _: other)

    # Sequence (<*)
    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        return self.chain(lambda first: other.map(lambda _: first))
