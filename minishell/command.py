"""The description of one command to run: its words and its redirections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Command:
    """A command line ready to execute.

    ``args`` holds the program name followed by its arguments. ``infile``
    and ``outfile`` name files for standard input and output; ``append``
    makes output go to the end of ``outfile`` instead of replacing it.
    ``next`` links to the following command of a pipeline.
    """

    args: List[str] = field(default_factory=list)
    infile: Optional[str] = None
    outfile: Optional[str] = None
    append: bool = False
    next: Optional["Command"] = None

    @property
    def name(self) -> Optional[str]:
        """The program name, or None when there are no words."""
        return self.args[0] if self.args else None


def tester_command() -> Command:
    """Return the fixed sample command: ``cat < infile.txt > test.txt``."""
    return Command(
        args=["cat"],
        infile="infile.txt",
        outfile="test.txt",
        append=False,
        next=None,
    )