from bitparsec.Binary import uint
from bitparsec.Char import letters, spaces
from bitparsec.Declaration import declarations
from bitparsec.Prim import many, run_parser

LINE = "let counter: int = 42\n"


class TimeText:
    def setup(self):
        self.words = many(letters() < spaces())
        self.word_input = "declare some words " * 2000
        self.short_program = (LINE * 50).rstrip("\n")
        self.long_program = (LINE * 2000).rstrip("\n")

    def time_many_letters(self):
        run_parser(self.words, self.word_input)

    def time_declarations_short(self):
        run_parser(declarations, self.short_program)

    def time_declarations_long(self):
        run_parser(declarations, self.long_program)


class TimeUint:
    def setup(self):
        self.parser = many(uint(32))
        self.small = bytes(range(256)) * 4
        self.large = bytes(range(256)) * 64

    def time_uint_small(self):
        run_parser(self.parser, self.small)

    def time_uint_large(self):
        run_parser(self.parser, self.large)
