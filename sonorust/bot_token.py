"""Read the bot token from disk or ask the user for it."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

log = logging.getLogger(__name__)

TOKEN_FILEPATH = Path("./appdata/BOT_TOKEN")

_PROMPT = "Your Bot Token: "
# Cursor up one line, clear to the end of the screen, go to the first column.
_ERASE_PREVIOUS_LINE = "\x1b[1A\x1b[J\x1b[1G"


def get_or_set_token(
    path: str | Path = TOKEN_FILEPATH,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> str:
    """Return the stored token, asking for one when none is stored."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        return input_token(path, input_func, output)


def input_token(
    path: str | Path = TOKEN_FILEPATH,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> str:
    """Ask for the token, store it, and redraw the prompt with the token masked."""
    out = output or sys.stdout
    log.info("Input Bot Token")
    out.write(_PROMPT)
    out.flush()

    token = input_func().strip()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(token, encoding="utf-8")

    out.write(_ERASE_PREVIOUS_LINE)
    out.write(f"{_PROMPT}{'*' * len(token)}\n")
    out.flush()
    return token