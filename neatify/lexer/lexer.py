"""Lexer."""

from enum import IntEnum
from typing import Final

from neatify.diagnostics import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    diagnostic_from_spec,
)
from neatify.lexer.tokens import (
    COLON_TOKEN,
    COMMA_TOKEN,
    DOT_TOKEN,
    LBRACE_TOKEN,
    LBRACKET_TOKEN,
    LPAREN_TOKEN,
    NEWLINE_TOKEN,
    PUNCTUATION_TEXT,
    RBRACE_TOKEN,
    RBRACKET_TOKEN,
    RPAREN_TOKEN,
    SEMICOLON_TOKEN,
    Token,
    TokenFlags,
    TokenKind,
)

KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "var", "let", "const", "function", "return", "if", "else", "for", "while", "do",
        "switch", "case", "default", "break", "continue", "try", "catch", "finally", "throw",
        "new", "delete", "typeof", "instanceof", "in", "this", "super", "class", "extends",
        "import", "export", "from", "as", "async", "await", "yield", "true", "false", "null",
        "undefined", "void",
    }
)

OPERATOR_CHARS: Final[frozenset[str]] = frozenset("+-*/%=!<>&|^~?")
QUOTE_CHARS: Final[frozenset[str]] = frozenset("\"'")
DIGITS: Final[frozenset[str]] = frozenset("0123456789")
NUMBER_CHARS: Final[frozenset[str]] = DIGITS | frozenset(".eE+-")
IDENTIFIER_START: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_$"
)

_STRUCTURAL_TOKENS: Final[dict[str, Token]] = {
    "{": LBRACE_TOKEN,
    "}": RBRACE_TOKEN,
    "(": LPAREN_TOKEN,
    ")": RPAREN_TOKEN,
    "[": LBRACKET_TOKEN,
    "]": RBRACKET_TOKEN,
    ";": SEMICOLON_TOKEN,
    ":": COLON_TOKEN,
    ",": COMMA_TOKEN,
}


class LexMode(IntEnum):
    """What the lexer is currently accumulating."""

    NORMAL = 0
    STRING = 1
    LINE_COMMENT = 2
    BLOCK_COMMENT = 3
    IDENTIFIER = 4
    NUMBER = 5
    OPERATOR = 6


class Lexer:
    """Total single-pass JavaScript lexer with one character of lookahead.

    Every input character ends up in exactly one token. Malformed input
    (unterminated strings or block comments) is never an error; it is
    flagged on the token and reported through `diagnostics`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._reset()

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def mode(self) -> LexMode:
        return self._mode

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def tokenize(self) -> list[Token]:
        self._reset()
        while not self.is_eof:
            ch = self._current_char()
            self._advance(1)
            self._lex_char(ch)
        self._flush_at_eof()
        return self._tokens

    def _reset(self) -> None:
        self._position = 0
        self._mode = LexMode.NORMAL
        self._buffer: list[str] = []
        self._lexeme_start = 0
        self._delimiter = '"'
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []

    def _lex_char(self, ch: str) -> None:
        match self._mode:
            case LexMode.STRING:
                self._lex_string_char(ch)
            case LexMode.LINE_COMMENT:
                self._lex_line_comment_char(ch)
            case LexMode.BLOCK_COMMENT:
                self._lex_block_comment_char(ch)
            case LexMode.IDENTIFIER:
                if ch.isalnum() or ch == "_" or ch == "$":
                    self._buffer.append(ch)
                else:
                    self._emit_word()
                    self._dispatch(ch)
            case LexMode.NUMBER:
                if ch in NUMBER_CHARS:
                    self._buffer.append(ch)
                else:
                    self._emit_buffer(TokenKind.NUMBER)
                    self._dispatch(ch)
            case LexMode.OPERATOR:
                if ch in OPERATOR_CHARS:
                    self._buffer.append(ch)
                else:
                    self._emit_buffer(TokenKind.OPERATOR)
                    self._dispatch(ch)
            case _:
                self._dispatch(ch)

    def _dispatch(self, ch: str) -> None:
        """Handle a character seen in NORMAL mode (the caller has already consumed it)."""
        start = self._position - 1
        structural = _STRUCTURAL_TOKENS.get(ch)
        if structural is not None:
            self._tokens.append(structural)
            return

        if ch == ".":
            if self._current_char() in DIGITS:
                self._begin(LexMode.NUMBER, start, ch)
            else:
                self._tokens.append(DOT_TOKEN)
            return

        if ch in QUOTE_CHARS:
            self._begin(LexMode.STRING, start)
            self._delimiter = ch
            return

        if ch == "/" and self._current_char() == "/":
            self._advance(1)
            self._begin(LexMode.LINE_COMMENT, start)
            return

        if ch == "/" and self._current_char() == "*":
            self._advance(1)
            self._begin(LexMode.BLOCK_COMMENT, start)
            return

        if ch in DIGITS:
            self._begin(LexMode.NUMBER, start, ch)
            return

        if ch in IDENTIFIER_START:
            self._begin(LexMode.IDENTIFIER, start, ch)
            return

        if ch == " " or ch == "\t":
            self._tokens.append(Token(TokenKind.WHITESPACE, ch))
            return

        if ch == "\n":
            self._tokens.append(NEWLINE_TOKEN)
            return

        if ch in OPERATOR_CHARS:
            self._begin(LexMode.OPERATOR, start, ch)
            return

        self._tokens.append(Token(TokenKind.OTHER, ch))

    def _lex_string_char(self, ch: str) -> None:
        if ch == "\\":
            # An escape keeps both characters, so an escaped delimiter never closes the string.
            self._buffer.append(ch)
            if not self.is_eof:
                self._buffer.append(self._current_char())
                self._advance(1)
            return
        if ch == self._delimiter:
            self._emit_buffer(TokenKind.STRING, self._string_flags())
            return
        self._buffer.append(ch)

    def _lex_line_comment_char(self, ch: str) -> None:
        if ch == "\n":
            self._emit_buffer(TokenKind.COMMENT)
            self._tokens.append(NEWLINE_TOKEN)
            return
        self._buffer.append(ch)

    def _lex_block_comment_char(self, ch: str) -> None:
        if ch == "*" and self._current_char() == "/":
            self._advance(1)
            self._emit_buffer(TokenKind.COMMENT, TokenFlags.BLOCK_COMMENT)
            return
        self._buffer.append(ch)
        if ch == "\n":
            self._tokens.append(NEWLINE_TOKEN)

    def _flush_at_eof(self) -> None:
        match self._mode:
            case LexMode.IDENTIFIER:
                self._emit_word()
            case LexMode.NUMBER:
                self._emit_buffer(TokenKind.NUMBER)
            case LexMode.OPERATOR:
                self._emit_buffer(TokenKind.OPERATOR)
            case LexMode.LINE_COMMENT:
                self._emit_buffer(TokenKind.COMMENT)
            case LexMode.STRING:
                self._diagnostics.append(diagnostic_from_spec(LEXER_UNTERMINATED_STRING, self._lexeme_start))
                self._emit_buffer(TokenKind.STRING, self._string_flags() | TokenFlags.UNTERMINATED)
            case LexMode.BLOCK_COMMENT:
                self._diagnostics.append(diagnostic_from_spec(LEXER_UNTERMINATED_BLOCK_COMMENT, self._lexeme_start))
                self._emit_buffer(TokenKind.COMMENT, TokenFlags.BLOCK_COMMENT | TokenFlags.UNTERMINATED)
            case _:
                pass

    def _begin(self, mode: LexMode, start: int, first: str = "") -> None:
        self._lexeme_start = start
        self._mode = mode
        self._buffer = [first] if first else []

    def _emit_word(self) -> None:
        text = "".join(self._buffer)
        kind = TokenKind.KEYWORD if text in KEYWORDS else TokenKind.IDENTIFIER
        self._emit(Token(kind, text))

    def _emit_buffer(self, kind: TokenKind, flags: TokenFlags = TokenFlags.NONE) -> None:
        self._emit(Token(kind, "".join(self._buffer), flags))

    def _emit(self, token: Token) -> None:
        self._tokens.append(token)
        self._buffer = []
        self._mode = LexMode.NORMAL

    def _string_flags(self) -> TokenFlags:
        return TokenFlags.SINGLE_QUOTED if self._delimiter == "'" else TokenFlags.NONE

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def tokenize(source: str) -> list[Token]:
    """Tokenize `source` into a flat token sequence covering every character."""
    return Lexer(source).tokenize()


def token_text(token: Token) -> str:
    """Nominal source text of a token, with quotes and comment markers re-attached."""
    match token.kind:
        case TokenKind.NEWLINE:
            return "\n"
        case TokenKind.STRING:
            closing = "" if token.is_unterminated else token.quote
            return f"{token.quote}{token.text}{closing}"
        case TokenKind.COMMENT:
            if not token.is_block_comment:
                return f"//{token.text}"
            closing = "" if token.is_unterminated else "*/"
            return f"/*{token.text}{closing}"
        case _:
            return PUNCTUATION_TEXT.get(token.kind, token.text)


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(tok)
        print(f"{i:03d} {tok.kind.name:<12} flags={tok.flags!r} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} offset={d.offset} message={d.message}")
