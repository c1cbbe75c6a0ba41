"""
Mini-DES Decipherer - Main Entry Point

Prints the plaintext produced by every one of the 512 keys for a single
12-bit ciphertext block:

    $ minides-decipher 000000000000
    Ciphertext: 000000000000 (   0)
    Key            	Plaintext
    000000000 (  0)	101011010100 (2772)
    ...
"""

import sys
from typing import List, Optional, TextIO

from .core_crypto.bit_codec import parse_bits, InvalidBitString
from .core_crypto.feistel import BLOCK_BITS
from .attack.key_search import exhaustive_search, render_table
from .integration.event_logger import EventLogger


PROGRAM_NAME = "minides-decipher"
USAGE = f"Usage: {PROGRAM_NAME} <ciphertext string>"
BAD_CIPHERTEXT = f"The ciphertext must contain {BLOCK_BITS} ones and zeroes."


class WrongArgumentCount(ValueError):
    """Raised when the program is not given exactly one argument."""


def parse_arguments(args: List[str]) -> int:
    """
    Validate the command line and return the ciphertext block.

    Args:
        args: Command-line arguments, without the program name

    Returns:
        12-bit ciphertext

    Raises:
        WrongArgumentCount: If there is not exactly one argument
        InvalidBitString: If the argument is not 12 characters of 0/1
    """
    if len(args) != 1:
        raise WrongArgumentCount(USAGE)

    try:
        return parse_bits(args[0], BLOCK_BITS)
    except InvalidBitString as e:
        raise InvalidBitString(BAD_CIPHERTEXT) from e


def main(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    logger: Optional[EventLogger] = None
) -> int:
    """
    Run the decipherer.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        stdout: Stream for the table (defaults to sys.stdout)
        stderr: Stream for diagnostics (defaults to sys.stderr)
        logger: Optional event logger

    Returns:
        Process exit status: 0 on success, 1 on bad input
    """
    if argv is None:
        argv = sys.argv[1:]
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    try:
        ciphertext = parse_arguments(argv)
    except (WrongArgumentCount, InvalidBitString) as e:
        if logger is not None:
            logger.log_input_rejected(type(e).__name__)
        print(e, file=stderr)
        return 1

    records = exhaustive_search(ciphertext, logger=logger)
    for line in render_table(ciphertext, records):
        stdout.write(line + "\n")
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
