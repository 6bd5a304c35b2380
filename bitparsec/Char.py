import re
from typing import Callable, Union

from .Parsec import Parser, State
from .Prim import many

# How much of the actual input is quoted back in a mismatch message
SNIPPET_LENGTH = 10

LETTERS_RE = re.compile(r"[a-zA-Z]+")
DIGITS_RE = re.compile(r"[0-9]+")


def _snippet(state: State) -> str:
    return state.input[state.index:state.index + SNIPPET_LENGTH]

# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool], name: str = "character") -> Parser[str]:
    """Succeeds for any character where f returns True. Returns the parsed character."""
    def parse(state: State) -> State:
        if state.index >= len(state.input):
            return state.with_error(f"{name}: Unexpected end of input")
        token = state.input[state.index]
        if f(token):
            return state.advance(state.index + 1, token)
        return state.with_error(f"{name}: Unexpected {token!r} at index {state.index}")
    return Parser(parse)

def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c, f"char {c!r}")

def string(s: str) -> Parser[str]:
    """Parses the exact string s (case-sensitive) and returns it."""
    if not s:
        raise ValueError("string: literal must not be empty")

    def parse(state: State) -> State:
        if state.index >= len(state.input):
            return state.with_error("str: Unexpected end of input")
        if state.input.startswith(s, state.index):
            return state.advance(state.index + len(s), s)
        return state.with_error(f"str: Tried to match {s!r}, but got {_snippet(state)!r}")
    return Parser(parse)

def regex(pattern: Union[str, re.Pattern], name: str) -> Parser[str]:
    """Matches `pattern` anchored at the current index and returns the matched text."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def parse(state: State) -> State:
        if state.index >= len(state.input):
            return state.with_error(f"{name}: Unexpected end of input")
        match = compiled.match(state.input, state.index)
        if match:
            return state.advance(match.end(), match.group(0))
        return state.with_error(f"{name}: Couldn't match {name} at index {state.index}")
    return Parser(parse)

def letters() -> Parser[str]:
    """Longest run of ASCII letters at the current index."""
    return regex(LETTERS_RE, "letters")

def digits() -> Parser[str]:
    """Longest run of ASCII digits at the current index."""
    return regex(DIGITS_RE, "digits")

def spaces() -> Parser[str]:
    """Skips zero or more ' ' characters and returns them."""
    return many(char(' ')).map(''.join)

def end_of_input() -> Parser[None]:
    """Succeeds only when nothing is left to parse."""
    def parse(state: State) -> State:
        if state.index >= len(state.input):
            return state.with_result(None)
        return state.with_error(f"end_of_input: Expected end of input, but got {_snippet(state)!r}")
    return Parser(parse)
