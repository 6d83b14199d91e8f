"""
Results Notation Lexer for Bumps Results Processing

This module splits results text into tagged tokens. It only recognises the
grammar; the meaning of each token is applied by the decoder.
"""

import re
from enum import Enum
from typing import List, NamedTuple

from . import constants
from .errors import MalformedToken


class TokenKind(Enum):
    ROW_OVER = "r"
    TECHNICAL = "t"
    BUMP_UP = "u"
    OVERBUMP = "o"
    EXACT_MOVE = "e"


class Token(NamedTuple):
    kind: TokenKind
    value: int = 0      # places moved for OVERBUMP / EXACT_MOVE
    offset: int = 0     # character offset in the results text


_TOKEN_RE = re.compile(constants.TOKEN_PATTERN)


def tokenize(text: str) -> List[Token]:
    """
    Split results text into tokens.

    Whitespace between tokens is ignored, so tokens may be written run
    together ("rrur") or spaced out ("r r u r").

    Args:
        text: Results notation text.

    Returns:
        List of Token tuples in text order.

    Raises:
        MalformedToken: If the text contains anything outside the grammar
            r | t | u | o[0-9]+ | e-?[0-9]+.
    """
    tokens = []
    pos = 0

    while pos < len(text):
        if text[pos].isspace():
            pos += 1
            continue

        match = _TOKEN_RE.match(text, pos)
        if not match:
            raise MalformedToken(f"Unexpected {text[pos]!r} in results", offset=pos)

        lexeme = match.group()
        kind = TokenKind(lexeme[0])
        value = int(lexeme[1:]) if len(lexeme) > 1 else 0
        tokens.append(Token(kind, value, pos))
        pos = match.end()

    return tokens
