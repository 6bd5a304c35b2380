"""
Ready-made grammar for an IPv4 header, decoded bit by bit.

The result is a list of `Field`s in wire order. When the header length
(IHL, in 32-bit words) is above the minimum of 5, the `(IHL - 5) * 4`
option octets that follow are returned as one `Options` field.
"""
from dataclasses import dataclass
from typing import Any, Dict, List

from .Parsec import Parser
from .Prim import succeed
from .Binary import uint
from .Combinators import count, sequence_of

MIN_IHL = 5
BYTES_PER_WORD = 4

# (field name, width in bits), in wire order
HEADER_LAYOUT = [
    ("Version", 4),
    ("IHL", 4),
    ("DSCP", 6),
    ("ECN", 2),
    ("Total Length", 16),
    ("Identification", 16),
    ("Flags", 3),
    ("Fragment Offset", 13),
    ("TTL", 8),
    ("Protocol", 8),
    ("Header Checksum", 16),
    ("Source IP Address", 32),
    ("Destination IP Address", 32),
]


@dataclass
class Field:
    type: str
    value: Any


def tag(type_name: str):
    return lambda value: Field(type_name, value)


def options_length(ihl: int) -> int:
    """Number of option octets implied by the header length."""
    return max(ihl - MIN_IHL, 0) * BYTES_PER_WORD


def _with_options(fields: List[Field]) -> Parser[List[Field]]:
    ihl = fields[1].value
    if ihl <= MIN_IHL:
        return succeed(fields)
    return count(options_length(ihl), uint(8)).map(lambda octets: fields + [Field("Options", octets)])


fixed_header = sequence_of(*[uint(width).map(tag(name)) for name, width in HEADER_LAYOUT])

ipv4_header = fixed_header.chain(_with_options)


def fields_by_type(fields: List[Field]) -> Dict[str, Any]:
    return {field.type: field.value for field in fields}
