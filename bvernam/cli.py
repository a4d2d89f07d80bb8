"""Command line entry point: ``bvernam KEY INPUT OUTPUT``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from bvernam.cipher import BVernamError, encrypt_file

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt INPUT with KEY into OUTPUT; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Error: Incorrect number of parameters!", file=sys.stderr)
        return 1
    key_path, input_path, output_path = args
    try:
        encrypt_file(key_path, input_path, output_path)
    except BVernamError as exc:
        print(f"Error : {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())