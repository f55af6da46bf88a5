import pytest

from neatify.lexer import (
    KEYWORDS,
    Lexer,
    LexMode,
    Token,
    TokenFlags,
    TokenKind,
    token_text,
    tokenize,
)
from tests._shared_cases import RENDER_CASES, FormatCase, case_id


def kinds(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens]


def non_trivia(tokens: list[Token]) -> list[Token]:
    return [token for token in tokens if token.kind not in (TokenKind.WHITESPACE, TokenKind.NEWLINE)]


def test_structural_characters_emit_dedicated_tokens() -> None:
    tokens = tokenize("{}()[];:,")

    assert kinds(tokens) == [
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.SEMICOLON,
        TokenKind.COLON,
        TokenKind.COMMA,
    ]
    assert all(token.text == "" for token in tokens)


def test_identifiers_are_classified_against_keywords() -> None:
    tokens = non_trivia(tokenize("const iffy = typeof $el_1"))

    assert tokens[0] == Token(TokenKind.KEYWORD, "const")
    assert tokens[1] == Token(TokenKind.IDENTIFIER, "iffy")
    assert tokens[2] == Token(TokenKind.OPERATOR, "=")
    assert tokens[3] == Token(TokenKind.KEYWORD, "typeof")
    assert tokens[4] == Token(TokenKind.IDENTIFIER, "$el_1")


def test_keyword_set_is_fixed() -> None:
    assert "function" in KEYWORDS
    assert "undefined" in KEYWORDS
    assert "let" in KEYWORDS
    assert "console" not in KEYWORDS


def test_identifier_redispatches_the_terminating_character() -> None:
    tokens = tokenize('a"b"')

    assert tokens == [
        Token(TokenKind.IDENTIFIER, "a"),
        Token(TokenKind.STRING, "b"),
    ]


def test_operator_characters_are_grouped() -> None:
    tokens = non_trivia(tokenize("a === b => c ?? !d"))

    operators = [token.text for token in tokens if token.kind == TokenKind.OPERATOR]
    assert operators == ["===", "=>", "??", "!"]


def test_numbers_use_a_permissive_grammar() -> None:
    tokens = tokenize("1.5e-3 .25 1..2")

    numbers = [token.text for token in tokens if token.kind == TokenKind.NUMBER]
    assert numbers == ["1.5e-3", ".25", "1..2"]


def test_dot_not_followed_by_digit_is_member_access() -> None:
    tokens = tokenize("a.b")

    assert kinds(tokens) == [TokenKind.IDENTIFIER, TokenKind.DOT, TokenKind.IDENTIFIER]


def test_strings_drop_delimiters_and_record_quote_style() -> None:
    double, _ws, single = tokenize("\"a b\" 'c'")

    assert double == Token(TokenKind.STRING, "a b")
    assert double.quote == '"'
    assert single == Token(TokenKind.STRING, "c", TokenFlags.SINGLE_QUOTED)
    assert single.quote == "'"


def test_escaped_delimiter_does_not_close_string() -> None:
    tokens = tokenize(r'"a\"b" + 1')

    assert tokens[0] == Token(TokenKind.STRING, r"a\"b")
    assert tokens[2] == Token(TokenKind.OPERATOR, "+")


def test_other_quote_inside_string_is_plain_content() -> None:
    tokens = tokenize("'say \"hi\"'")

    assert tokens == [Token(TokenKind.STRING, 'say "hi"', TokenFlags.SINGLE_QUOTED)]


def test_line_comment_emits_comment_then_newline() -> None:
    tokens = tokenize("x // hello\ny")

    assert tokens[2] == Token(TokenKind.COMMENT, " hello")
    assert tokens[3].kind == TokenKind.NEWLINE
    assert tokens[4] == Token(TokenKind.IDENTIFIER, "y")


def test_block_comment_emits_newline_per_line_break() -> None:
    tokens = tokenize("/* a\nb\nc */x")

    assert kinds(tokens) == [
        TokenKind.NEWLINE,
        TokenKind.NEWLINE,
        TokenKind.COMMENT,
        TokenKind.IDENTIFIER,
    ]
    assert tokens[2].text == " a\nb\nc "
    assert tokens[2].is_block_comment


def test_slash_alone_is_an_operator() -> None:
    tokens = tokenize("a / b")

    assert Token(TokenKind.OPERATOR, "/") in tokens


def test_whitespace_is_one_token_per_character() -> None:
    tokens = tokenize("a \t  b")

    whitespace = [token.text for token in tokens if token.kind == TokenKind.WHITESPACE]
    assert whitespace == [" ", "\t", " ", " "]


def test_unclassified_characters_become_other_tokens() -> None:
    tokens = tokenize("#@\r")

    assert tokens == [
        Token(TokenKind.OTHER, "#"),
        Token(TokenKind.OTHER, "@"),
        Token(TokenKind.OTHER, "\r"),
    ]


def test_open_modes_are_flushed_at_end_of_input() -> None:
    assert tokenize("abc") == [Token(TokenKind.IDENTIFIER, "abc")]
    assert tokenize("42") == [Token(TokenKind.NUMBER, "42")]
    assert tokenize("a+=") == [Token(TokenKind.IDENTIFIER, "a"), Token(TokenKind.OPERATOR, "+=")]
    assert tokenize("// tail") == [Token(TokenKind.COMMENT, " tail")]


def test_unterminated_string_is_kept_and_reported() -> None:
    lexer = Lexer('x = "abc')
    tokens = lexer.tokenize()

    assert tokens[-1] == Token(TokenKind.STRING, "abc", TokenFlags.UNTERMINATED)
    assert len(lexer.diagnostics) == 1
    diagnostic = lexer.diagnostics[0]
    assert diagnostic.code == "LEXER_UNTERMINATED_STRING"
    assert diagnostic.offset == 4
    assert diagnostic.severity == "warning"


def test_unterminated_block_comment_consumes_rest_of_input() -> None:
    lexer = Lexer("a /* open { ;")
    tokens = lexer.tokenize()

    assert tokens[-1] == Token(TokenKind.COMMENT, " open { ;", TokenFlags.BLOCK_COMMENT | TokenFlags.UNTERMINATED)
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_BLOCK_COMMENT"]
    assert lexer.diagnostics[0].offset == 2


def test_lexer_can_be_rerun() -> None:
    lexer = Lexer("'x")

    first = lexer.tokenize()
    second = lexer.tokenize()

    assert first == second
    assert len(lexer.diagnostics) == 1
    assert lexer.mode == LexMode.NORMAL
    assert lexer.is_eof


@pytest.mark.parametrize(
    "source",
    [
        "",
        'const s = "x\\"y"; // c\nlet n = .5e-3 + 1;\t{a:[1,2]}?#@',
        "if(a&&b||!c){x<<=2}else{y>>>=1}",
        "'unterminated",
        "/* closed */ 'ok' // trailing",
        "/* open",
        "\\é中 xé",
    ],
)
def test_token_text_reconstructs_source(source: str) -> None:
    tokens = tokenize(source)

    assert "".join(token_text(token) for token in tokens) == source


def test_block_comment_newlines_are_the_only_duplicated_characters() -> None:
    source = "a /* x\ny */ b"
    tokens = tokenize(source)

    without_comment_breaks = [token for token in tokens if token.kind != TokenKind.NEWLINE]
    assert "".join(token_text(token) for token in without_comment_breaks) == source


@pytest.mark.parametrize("case", RENDER_CASES, ids=case_id)
def test_shared_cases_tokenize_without_errors(case: FormatCase) -> None:
    lexer = Lexer(case.source)
    tokens = lexer.tokenize()

    assert lexer.diagnostics == []
    assert "".join(token_text(token) for token in tokens) == case.source
