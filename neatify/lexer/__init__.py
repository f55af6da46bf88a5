"""Lexer."""

from neatify.lexer.lexer import (
    KEYWORDS,
    OPERATOR_CHARS,
    Lexer,
    LexMode,
    dump_tokens,
    token_text,
    tokenize,
)
from neatify.lexer.tokens import (
    PUNCTUATION_TEXT,
    Token,
    TokenFlags,
    TokenKind,
)

__all__ = [
    "KEYWORDS",
    "OPERATOR_CHARS",
    "PUNCTUATION_TEXT",
    "LexMode",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "token_text",
    "tokenize",
]
