"""Reverse the order of the words in a line, keeping every space in place."""

from __future__ import annotations

import re

_TOKENS = re.compile(r" |[^ ]+")


def reverse_words(text: str) -> str:
    """Return ``text`` with its words and single spaces in reverse order.

    Words are runs of non-space characters; each space is kept as its own
    token, so runs of spaces survive unchanged.
    """
    return "".join(reversed(_TOKENS.findall(text)))