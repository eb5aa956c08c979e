# tokenizer.py
from __future__ import annotations

from typing import List

QUOTES = ("'", '"')


class MalformedLineError(ValueError):
    """Raised when a line opens a quote it never closes."""


def tokenize(line: str) -> List[str]:
    """
    Split a directive line on whitespace, keeping quoted spans together.

    A span opened by ' or " runs to the next occurrence of the same quote;
    the quotes themselves are dropped. Bare and quoted pieces that touch
    form a single token, so `a"b c"` becomes `ab c`.

    Returns:
        List of tokens. Empty for a blank line.

    Raises:
        MalformedLineError: If a quote is never closed.
    """
    tokens: List[str] = []
    current: List[str] = []
    in_token = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]

        if ch in QUOTES:
            end = line.find(ch, i + 1)
            if end == -1:
                raise MalformedLineError(f"Unterminated {ch} quote at column {i + 1}.")
            current.append(line[i + 1:end])
            in_token = True
            i = end + 1
            continue

        if ch.isspace():
            if in_token:
                tokens.append("".join(current))
                current = []
                in_token = False
        else:
            current.append(ch)
            in_token = True
        i += 1

    if in_token:
        tokens.append("".join(current))

    return tokens
