import logging
import sys
from pathlib import Path

from bitparsec.Ipv4 import ipv4_header

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger("ipv4_packet")

DEFAULT_INPUT = Path(__file__).parent / "data" / "packet.bin"


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_INPUT
    state = ipv4_header.run(path.read_bytes())

    if state.is_error:
        logger.error("Decoding failed at bit %d: %s", state.index, state.error)
        sys.exit(1)
    for field in state.result:
        print(f"{field.type:>24}: {field.value}")
    logger.info("decoded %d bits", state.index)
