"""Keyboard shortcuts of the line editor (emacs mode)."""

from __future__ import annotations

import sys
from typing import TextIO

SHORTCUTS = """\
Ask the Terminal Anything (ATA): keyboard shortcuts

Exit / cancel:
  Ctrl-C          Exit ata
  Ctrl-D          Exit ata (on an empty line)

Editing:
  Ctrl-A, Home    Move to start of line
  Ctrl-E, End     Move to end of line
  Ctrl-B, Left    Move back one character
  Ctrl-F, Right   Move forward one character
  Alt-B           Move back one word
  Alt-F           Move forward one word
  Ctrl-H, Bksp    Delete previous character
  Ctrl-K          Delete from cursor to end of line
  Ctrl-U          Delete from start of line to cursor
  Ctrl-W          Delete previous word
  Alt-D           Delete next word
  Ctrl-T          Transpose characters
  Ctrl-Y          Paste the last deleted text
  Ctrl-L          Clear screen

History (this session only):
  Ctrl-P, Up      Previous prompt
  Ctrl-N, Down    Next prompt
  Ctrl-R          Reverse search in history
  Alt-<           First prompt in history
  Alt->           Last prompt in history

Type `commands` at the prompt to show this list again.
"""


def print_shortcuts(file: TextIO | None = None) -> None:
    print(SHORTCUTS, end="", file=file or sys.stdout)
