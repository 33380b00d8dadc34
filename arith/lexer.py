"""Tokenizer for the Arith language.

The lexer walks the source with a cursor and, at each position, tries a
fixed list of patterns in priority order. The first pattern producing a
non-empty match wins, so `let` and `func` are recognised as keywords simply
because their patterns come before the identifier pattern. Whitespace is
consumed without producing a token; every newline it contains advances the
line counter used in diagnostics.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

from .errors import LexError


@dataclass(frozen=True)
class Token:
    kind: str
    lexeme: str
    line: int

    def __str__(self) -> str:
        return f"{self.kind} {self.lexeme!r} (line {self.line})"


EOF = 'EOF'

# Order matters: first non-empty match wins. A kind of None means the match
# is skipped.
TOKEN_PATTERNS: List[Tuple[Optional[str], Pattern[str]]] = [
    ('NUMBER', re.compile(r'\d*\.?\d+')),
    ('+', re.compile(r'\+')),
    ('-', re.compile(r'-')),
    ('*', re.compile(r'\*')),
    ('/', re.compile(r'/')),
    ('(', re.compile(r'\(')),
    (')', re.compile(r'\)')),
    (None, re.compile(r'\s+')),
    ('LET', re.compile(r'let')),
    ('FUNC', re.compile(r'func')),
    ('IDENT', re.compile(r'[a-zA-Z]+')),
    ('=', re.compile(r'=')),
    (';', re.compile(r';')),
    (',', re.compile(r',')),
]


def tokenize(source: str) -> List[Token]:
    """Convert source text into a list of tokens ending with an EOF token."""
    tokens: List[Token] = []
    pos = 0
    line = 1
    length = len(source)
    while pos < length:
        for kind, pattern in TOKEN_PATTERNS:
            m = pattern.match(source, pos)
            if m is None or not m.group():
                continue
            text = m.group()
            if kind is not None:
                tokens.append(Token(kind, text, line))
            line += text.count('\n')
            pos = m.end()
            break
        else:
            raise LexError(source[pos], line)
    tokens.append(Token(EOF, '', line))
    return tokens
