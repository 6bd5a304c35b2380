"""
Ready-made grammar for typed variable declarations, one per line:

    let x: int = 42
    const greeting: string = "hello"
    let flag: boolean = true
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .Parsec import Parser
from .Char import char, digits, letters, spaces, string
from .Combinators import between, choice, many1, sep_by
from .Contextual import contextual


class VarType(str, Enum):
    INT = "int"
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass
class Declaration:
    declaration_type: str
    name: str
    type: VarType
    value: Any


def value_parser(var_type: VarType) -> Parser[Any]:
    """The literal parser for a declared type."""
    if var_type is VarType.INT:
        return digits().map(int)
    if var_type is VarType.STRING:
        quote = choice(char("'"), char('"'))
        return between(quote, quote)(letters())
    if var_type is VarType.BOOLEAN:
        return choice(string("true"), string("false")).map(lambda word: word == "true")
    raise ValueError(f"value_parser: unknown type {var_type!r}")


declaration_type = choice(string("let"), string("const"))

variable_name = many1(letters() | char("_")).map("".join).error_map(
    lambda _, index: f"declaration: expected variable name at index {index}"
)

type_tag = choice(*[string(t.value) for t in VarType]).map(VarType)


@contextual
def declaration():
    kind = yield declaration_type
    yield spaces()
    name = yield variable_name
    yield char(":") > spaces()
    var_type = yield type_tag
    yield (spaces() > char("=")) > spaces()
    value = yield value_parser(var_type)
    return Declaration(kind, name, var_type, value)


declarations = sep_by(string("\n"))(declaration)
