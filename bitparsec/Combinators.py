import logging
from typing import Any, Callable, List, Sequence, TypeVar

from .Parsec import Parser, State, T
from .Prim import fail, succeed, many

logger = logging.getLogger(__name__)

V = TypeVar('V')


def _require_parsers(name: str, parsers: Sequence[Any]) -> List[Parser[Any]]:
    # Accept both choice(a, b) and choice([a, b])
    if len(parsers) == 1 and isinstance(parsers[0], (list, tuple)):
        parsers = parsers[0]
    for p in parsers:
        if not isinstance(p, Parser):
            raise TypeError(f"{name}: expected Parser arguments, got {type(p).__name__}")
    return list(parsers)


# 1. sequenceOf: Runs parsers one after another, collecting every result
def sequence_of(*parsers: Parser[Any]) -> Parser[List[Any]]:
    """
    Applies each parser in order, threading the state through.
    Stops at the first failure and returns that failing state unchanged.
    """
    ps = _require_parsers("sequence_of", parsers)

    def parse(state: State) -> State:
        results = []
        current = state
        for p in ps:
            current = p(current)
            if current.is_error:
                return current
            results.append(current.result)
        return current.with_result(results)
    return Parser(parse)

# 2. choice: Tries parsers in order until one succeeds
def choice(*parsers: Parser[T]) -> Parser[T]:
    """
    Tries each parser against the same starting state and returns the first success.
    Fails at the starting index if none succeed.
    """
    ps = _require_parsers("choice", parsers)
    if not ps:
        return fail("choice: no alternatives")

    def parse(state: State) -> State:
        errors = []
        for p in ps:
            attempt = p(state)
            if not attempt.is_error:
                return attempt
            errors.append(attempt.error)
        return state.with_error(
            f"choice: Unable to match with any parser at index {state.index} "
            f"(tried: {'; '.join(str(e) for e in errors)})"
        )
    return Parser(parse)

# 3. many1: Applies a parser one or more times
def many1(p: Parser[T]) -> Parser[List[T]]:
    """
    Applies parser p once, then `many(p)`. Fails at the starting index if the first p fails.
    """
    rest = many(p)

    def parse(state: State) -> State:
        first = p(state)
        if first.is_error:
            return state.with_error(f"many1: Unable to match any input using parser at index {state.index}")
        rest_state = rest(first)
        return rest_state.with_result([first.result] + rest_state.result)
    return Parser(parse)

def _sep_by_loop(separator: Parser[Any], value: Parser[T], state: State) -> State:
    first = value(state)
    if first.is_error:
        return state.with_result([])

    results: List[T] = [first.result]
    current = first
    while True:
        separator_state = separator(current)
        if separator_state.is_error:
            break
        # A separator only counts once a value follows it
        value_state = value(separator_state)
        if value_state.is_error:
            break
        if value_state.index == current.index:
            # Separator and value both matched nothing; another round would loop forever
            break
        results.append(value_state.result)
        current = value_state

    return current.with_result(results)

# 4. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(separator: Parser[Any]) -> Callable[[Parser[T]], Parser[List[T]]]:
    """
    sep_by(sep)(value) parses `value (sep value)*`, returning the values.
    A trailing separator with no value after it is left unconsumed.
    """
    def with_value(value: Parser[T]) -> Parser[List[T]]:
        def parse(state: State) -> State:
            return _sep_by_loop(separator, value, state)
        return Parser(parse)
    return with_value

# 5. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(separator: Parser[Any]) -> Callable[[Parser[T]], Parser[List[T]]]:
    """
    As `sep_by`, but fails at the starting index if no value was found.
    """
    def with_value(value: Parser[T]) -> Parser[List[T]]:
        def parse(state: State) -> State:
            next_state = _sep_by_loop(separator, value, state)
            if not next_state.result:
                return state.with_error(f"sepBy1: Unable to capture any results at index {state.index}")
            return next_state
        return Parser(parse)
    return with_value

# 6. between: Parses an opening parser, a main parser, and a closing parser
def between(left: Parser[Any], right: Parser[Any]) -> Callable[[Parser[T]], Parser[T]]:
    """
    between(left, right)(value) returns only the result of `value`.
    """
    def with_value(value: Parser[T]) -> Parser[T]:
        return sequence_of(left, value, right).map(lambda results: results[1])
    return with_value

# 7. count: Parses n occurrences of a parser
def count(n: int, p: Parser[T]) -> Parser[List[T]]:
    if n <= 0:
        return succeed([])
    return sequence_of(*([p] * n))

# 8. option: Tries a parser, returning a default value on failure
def option(default: V, p: Parser[V]) -> Parser[V]:
    """
    Tries parser p; returns its result if successful, else `default` from the original state.
    """
    return p | succeed(default)

# 9. parserTrace: Debugging parser that logs the upcoming input
def parser_trace(label_str: str) -> Parser[None]:
    def parse(state: State) -> State:
        upcoming = state.input[state.index:state.index + 30]
        logger.debug("%s: %r at index %d", label_str, upcoming, state.index)
        # parser_trace does not consume and keeps the previous result
        return state
    return Parser(parse)

# 10. parserTraced: Debugging parser that traces execution and backtracking
def parser_traced(label_str: str, p: Parser[T]) -> Parser[T]:
    trace_enter = parser_trace(label_str)

    def parse(state: State) -> State:
        next_state = p(trace_enter(state))
        if next_state.is_error:
            logger.debug("%s backtracked at index %d: %s", label_str, next_state.index, next_state.error)
        return next_state
    return Parser(parse)
