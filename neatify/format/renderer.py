"""Token-stream renderer producing the canonical layout."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from neatify.lexer import Token, TokenKind

INDENT_UNIT: Final[str] = "  "

# Previous-token kinds after which an operator is treated as unary.
_UNARY_CONTEXT: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.LPAREN,
        TokenKind.LBRACE,
        TokenKind.LBRACKET,
        TokenKind.COMMA,
        TokenKind.SEMICOLON,
        TokenKind.COLON,
        TokenKind.OPERATOR,
    }
)

# Next-token kinds that glue onto the token before them.
_CLOSE_BRACE_GLUE: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.SEMICOLON, TokenKind.COMMA, TokenKind.RPAREN}
)
_OPERATOR_GLUE: Final[frozenset[TokenKind]] = _CLOSE_BRACE_GLUE
_KEYWORD_GLUE: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.SEMICOLON, TokenKind.COMMA, TokenKind.DOT}
)

_BARE: Final[dict[TokenKind, str]] = {
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
    TokenKind.DOT: ".",
    TokenKind.COLON: ": ",
    TokenKind.COMMA: ", ",
}


class Renderer:
    """Single pass over a token sequence, tracking brace depth and line starts.

    Source whitespace is never copied: every space in the output is
    synthesized from the kinds of the neighbouring tokens. Source newlines
    are kept as-is, in addition to the breaks the renderer forces around
    braces and after semicolons.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._parts: list[str] = []
        self._indent_level = 0
        self._at_line_start = True

    @property
    def indent_level(self) -> int:
        return self._indent_level

    def render(self) -> str:
        self._parts = []
        self._indent_level = 0
        self._at_line_start = True

        for index, token in enumerate(self._tokens):
            self._render_token(index, token)

        # Exactly one trailing line break, however many the source had.
        return "".join(self._parts).rstrip("\n") + "\n"

    def _render_token(self, index: int, token: Token) -> None:
        match token.kind:
            case TokenKind.LBRACE:
                if not self._at_line_start and not self._ends_with(" "):
                    self._write(" ")
                self._write("{")
                self._indent_level += 1
                self._line_break()
            case TokenKind.RBRACE:
                if not self._at_line_start:
                    self._write("\n")
                if self._indent_level > 0:
                    self._indent_level -= 1
                self._write_indent()
                self._write("}")
                if self._next_kind(index) in _CLOSE_BRACE_GLUE:
                    self._at_line_start = False
                else:
                    self._line_break()
            case TokenKind.SEMICOLON:
                self._write(";")
                self._line_break()
            case TokenKind.OPERATOR:
                self._render_operator(index, token)
            case TokenKind.KEYWORD:
                self._write_indent_at_line_start()
                self._write(token.text)
                if self._next_kind(index) not in _KEYWORD_GLUE:
                    self._write(" ")
                self._at_line_start = False
            case TokenKind.IDENTIFIER:
                self._write_indent_at_line_start()
                self._write(token.text)
                self._at_line_start = False
            case TokenKind.STRING:
                closing = "" if token.is_unterminated else token.quote
                self._write(f"{token.quote}{token.text}{closing}")
                self._at_line_start = False
            case TokenKind.COMMENT:
                self._render_comment(token)
            case TokenKind.WHITESPACE:
                pass
            case TokenKind.NEWLINE:
                self._line_break()
            case TokenKind.NUMBER | TokenKind.OTHER:
                self._write(token.text)
                self._at_line_start = False
            case _:
                self._write(_BARE[token.kind])
                self._at_line_start = False

    def _render_operator(self, index: int, token: Token) -> None:
        previous = self._tokens[index - 1].kind if index > 0 else None
        is_unary = previous is None or previous in _UNARY_CONTEXT

        if not is_unary and not self._at_line_start:
            self._write(" ")
        self._write(token.text)
        if self._next_kind(index) not in _OPERATOR_GLUE:
            self._write(" ")
        self._at_line_start = False

    def _render_comment(self, token: Token) -> None:
        if self._at_line_start:
            self._write_indent()
        else:
            self._write(" ")

        if token.is_block_comment:
            closing = "" if token.is_unterminated else "*/"
            self._write(f"/*{token.text}{closing}")
        else:
            self._write(f"//{token.text}")
        self._at_line_start = False

    def _next_kind(self, index: int) -> TokenKind | None:
        if index + 1 < len(self._tokens):
            return self._tokens[index + 1].kind
        return None

    def _line_break(self) -> None:
        self._write("\n")
        self._at_line_start = True

    def _write_indent_at_line_start(self) -> None:
        if self._at_line_start:
            self._write_indent()

    def _write_indent(self) -> None:
        self._write(INDENT_UNIT * self._indent_level)

    def _write(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def _ends_with(self, suffix: str) -> bool:
        return bool(self._parts) and self._parts[-1].endswith(suffix)


def render(tokens: Sequence[Token]) -> str:
    """Render a token sequence in the canonical layout; the result always ends with a newline."""
    return Renderer(tokens).render()
