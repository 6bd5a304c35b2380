import logging
import sys
from pathlib import Path

from bitparsec.Declaration import declarations
from bitparsec.Prim import run_parser

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger("declarations")

DEFAULT_INPUT = Path(__file__).parent / "data" / "declarations.txt"


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_INPUT
    source = path.read_text(encoding="utf-8")

    result, err = run_parser(declarations, source)

    if err:
        logger.error("Parsing failed: %s", err)
        sys.exit(1)
    for declaration in result:
        print(f"{declaration.declaration_type} {declaration.name}: {declaration.type.value} = {declaration.value!r}")
