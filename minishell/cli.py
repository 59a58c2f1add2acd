"""The command-line entry point."""

from __future__ import annotations

import os
import sys
from typing import List, Optional

from .executor import executor


def main(argv: Optional[List[str]] = None) -> int:
    """Run the shell. It takes no arguments; any given are refused with status 1."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        print("Minishell doesn't get arguments.")
        return 1
    executor(dict(os.environ))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())