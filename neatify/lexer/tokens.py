"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Trivia tokens (emitted by the lexer, dropped or re-synthesized on render)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    KEYWORD = 21
    STRING = 22
    NUMBER = 23

    # -------------------------
    # Operators (any run of operator characters)
    # -------------------------
    OPERATOR = 30

    # -------------------------
    # Punctuation / separators
    # -------------------------
    COLON = 40  # :
    SEMICOLON = 41  # ;
    COMMA = 42  # ,
    DOT = 43  # .

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    # -------------------------
    # Fallback: any single unclassified character
    # -------------------------
    OTHER = 90


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    SINGLE_QUOTED = 1 << 0  # STRING delimited by ' instead of "
    BLOCK_COMMENT = 1 << 1  # COMMENT written as /* ... */
    UNTERMINATED = 1 << 2  # STRING or block COMMENT ran into end of input


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` holds the payload only: the lexeme for identifiers, keywords,
    numbers and operators, the contents of a string without its quotes, the
    body of a comment without its markers, or the single character of an
    `OTHER` token. Punctuation and newlines carry no payload.
    """

    kind: TokenKind
    text: str = ""
    flags: TokenFlags = TokenFlags.NONE

    @property
    def quote(self) -> str:
        return "'" if self.flags & TokenFlags.SINGLE_QUOTED else '"'

    @property
    def is_block_comment(self) -> bool:
        return bool(self.flags & TokenFlags.BLOCK_COMMENT)

    @property
    def is_unterminated(self) -> bool:
        return bool(self.flags & TokenFlags.UNTERMINATED)


PUNCTUATION_TEXT: Final[dict[TokenKind, str]] = {
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
    TokenKind.SEMICOLON: ";",
    TokenKind.COLON: ":",
    TokenKind.COMMA: ",",
    TokenKind.DOT: ".",
}

# Payload-free tokens are shared; there is nothing to distinguish two `{`.
LBRACE_TOKEN: Final[Token] = Token(TokenKind.LBRACE)
RBRACE_TOKEN: Final[Token] = Token(TokenKind.RBRACE)
LPAREN_TOKEN: Final[Token] = Token(TokenKind.LPAREN)
RPAREN_TOKEN: Final[Token] = Token(TokenKind.RPAREN)
LBRACKET_TOKEN: Final[Token] = Token(TokenKind.LBRACKET)
RBRACKET_TOKEN: Final[Token] = Token(TokenKind.RBRACKET)
SEMICOLON_TOKEN: Final[Token] = Token(TokenKind.SEMICOLON)
COLON_TOKEN: Final[Token] = Token(TokenKind.COLON)
COMMA_TOKEN: Final[Token] = Token(TokenKind.COMMA)
DOT_TOKEN: Final[Token] = Token(TokenKind.DOT)
NEWLINE_TOKEN: Final[Token] = Token(TokenKind.NEWLINE)
