# Core
from .Parsec import Parser, State, ParseError
from .Prim import run_parser, succeed, pure, fail, lazy, expect, look_ahead, many

# Characters
from .Char import (
    satisfy, char, string, regex, letters, digits, spaces, end_of_input
)

# Combinators
from .Combinators import (
    sequence_of, choice, many1, sep_by, sep_by1, between, count, option,
    parser_trace, parser_traced
)

# Do-notation
from .Contextual import contextual

# Bit-level parsing
from .Binary import bit, zero, one, uint, sint, raw_string
