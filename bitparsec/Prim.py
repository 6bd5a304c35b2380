from typing import Any, Callable, List, Optional, Tuple

from .Parsec import Parser, State, ParseError, T


def succeed(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: State) -> State:
        return state.with_result(value)
    return Parser(parse)

pure = succeed

def fail(message: str) -> Parser[Any]:
    """A parser that always fails with a message."""
    def parse(state: State) -> State:
        return state.with_error(message)
    return Parser(parse)

def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first run, so grammars can refer to themselves."""
    built: List[Parser[T]] = []

    def parse(state: State) -> State:
        if not built:
            parser = thunk()
            if not isinstance(parser, Parser):
                raise TypeError(f"lazy: thunk must return a Parser, got {type(parser).__name__}")
            built.append(parser)
        return built[0](state)
    return Parser(parse)

def expect(expected: Any,
           message_fn: Optional[Callable[[Any, int], str]] = None
           ) -> Callable[[Any], Parser[Any]]:
    """Continuation for `chain` that only lets `expected` through.

    On a mismatch the message comes from `message_fn(value, index - 1)`, i.e. the
    index of the last unit read, or a generic "Invalid value".
    """
    def check(value: Any) -> Parser[Any]:
        def parse(state: State) -> State:
            if value == expected:
                return state
            if message_fn is None:
                return state.with_error("Invalid value")
            return state.with_error(message_fn(value, state.index - 1))
        return Parser(parse)
    return check

def look_ahead(parser: Parser[T]) -> Parser[T]:
    """Parse without consuming input."""
    def parse(state: State) -> State:
        next_state = parser(state)
        if next_state.is_error:
            return next_state
        return state.with_result(next_state.result)
    return Parser(parse)

def many(parser: Parser[T]) -> Parser[List[T]]:
    """Parse zero or more occurrences of `parser`. Never fails."""
    def parse(state: State) -> State:
        results: List[T] = []
        current = state

        while True:
            attempt = parser(current)
            if attempt.is_error:
                # Discard the failed attempt and keep everything before it
                break
            if attempt.index == current.index:
                # Succeeded without consuming; another round would loop forever
                break
            results.append(attempt.result)
            current = attempt

        return current.with_result(results)
    return Parser(parse)

def run_parser(parser: Parser[T], input_data: Any) -> Tuple[Optional[T], Optional[ParseError]]:
    """Run a parser and split the final state into (value, error)."""
    final_state = parser.run(input_data)
    if final_state.is_error:
        return None, ParseError(final_state.index, final_state.error or "")
    return final_state.result, None
