# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the PL/0 lexer and the numeric lexeme list reader/writer.
#
# Test coverage includes:
#   - Reserved words, identifiers and numbers
#   - One- and two-character operators
#   - Comments and whitespace handling
#   - Source positions
#   - Error conditions
#   - Lexeme list format
# =============================================================================

import pytest

from pl0.lexer import Lexer, tokenize, read_token_list, format_token_list
from pl0.tokens import Token, TokenKind
from pl0.errors import (
    LexerError,
    InvalidCharacterError,
    IdentifierTooLongError,
    NumberTooLongError,
    InvalidIdentifierError,
    TokenListError,
)


def kinds(source: str) -> list:
    """Helper returning only the token kinds of a source string."""
    return [t.kind for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens; the cursor supplies the sentinel."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        assert tokenize("  \n\t \r\n ") == []

    def test_identifier(self):
        tokens = tokenize("count")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.IDENT
        assert tokens[0].lexeme == "count"

    def test_identifier_with_digits(self):
        tokens = tokenize("x1y2")
        assert tokens[0].kind == TokenKind.IDENT
        assert tokens[0].lexeme == "x1y2"

    def test_number(self):
        tokens = tokenize("12345")
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].lexeme == "12345"

    def test_reserved_words(self):
        source = "const var procedure call begin end if then else while do write read odd"
        assert kinds(source) == [
            TokenKind.CONST, TokenKind.VAR, TokenKind.PROCEDURE, TokenKind.CALL,
            TokenKind.BEGIN, TokenKind.END, TokenKind.IF, TokenKind.THEN,
            TokenKind.ELSE, TokenKind.WHILE, TokenKind.DO, TokenKind.WRITE,
            TokenKind.READ, TokenKind.ODD,
        ]

    def test_reserved_words_are_case_sensitive(self):
        assert kinds("BEGIN Begin") == [TokenKind.IDENT, TokenKind.IDENT]

    def test_keyword_prefix_is_identifier(self):
        assert kinds("constant ends") == [TokenKind.IDENT, TokenKind.IDENT]

    def test_keyword_lexeme_kept(self):
        assert tokenize("while")[0].lexeme == "while"


# =============================================================================
# Operator Tests
# =============================================================================

class TestOperators:
    """Single and double character operators."""

    @pytest.mark.parametrize("text,kind", [
        ("+", TokenKind.PLUS),
        ("-", TokenKind.MINUS),
        ("*", TokenKind.MULT),
        ("/", TokenKind.SLASH),
        ("(", TokenKind.LPARENT),
        (")", TokenKind.RPARENT),
        ("=", TokenKind.EQ),
        (",", TokenKind.COMMA),
        (";", TokenKind.SEMICOLON),
        (".", TokenKind.PERIOD),
        ("<", TokenKind.LES),
        (">", TokenKind.GTR),
        ("<>", TokenKind.NEQ),
        ("<=", TokenKind.LEQ),
        (">=", TokenKind.GEQ),
        (":=", TokenKind.BECOMES),
    ])
    def test_operator(self, text, kind):
        tokens = tokenize(text)
        assert len(tokens) == 1
        assert tokens[0].kind == kind
        assert tokens[0].lexeme == text

    def test_operators_without_spaces(self):
        assert kinds("x:=y<=1") == [
            TokenKind.IDENT, TokenKind.BECOMES, TokenKind.IDENT,
            TokenKind.LEQ, TokenKind.NUMBER,
        ]

    def test_less_then_greater_is_neq(self):
        assert kinds("a<>b") == [TokenKind.IDENT, TokenKind.NEQ, TokenKind.IDENT]

    def test_greater_then_less_is_two_tokens(self):
        assert kinds("a><b") == [
            TokenKind.IDENT, TokenKind.GTR, TokenKind.LES, TokenKind.IDENT,
        ]


# =============================================================================
# Comment and Position Tests
# =============================================================================

class TestCommentsAndPositions:
    """Comments are skipped and positions point at token starts."""

    def test_block_comment(self):
        assert kinds("x /* ignored := */ y") == [TokenKind.IDENT, TokenKind.IDENT]

    def test_multiline_comment(self):
        tokens = tokenize("/* one\ntwo */\n  x")
        assert len(tokens) == 1
        assert (tokens[0].line, tokens[0].column) == (3, 3)

    def test_unterminated_comment_runs_to_end(self):
        assert kinds("x /* never closed") == [TokenKind.IDENT]

    def test_slash_alone_is_division(self):
        assert kinds("a / b") == [TokenKind.IDENT, TokenKind.SLASH, TokenKind.IDENT]

    def test_positions(self):
        tokens = tokenize("var x;\n  x := 1")
        assert [(t.line, t.column) for t in tokens] == [
            (1, 1), (1, 5), (1, 6), (2, 3), (2, 5), (2, 8),
        ]

    def test_filename_recorded(self):
        token = tokenize("x", "prog.pl0")[0]
        assert str(token.location) == "prog.pl0:1:1"

    def test_lexer_is_lazy(self):
        """tokenize() yields tokens before reaching a later bad character."""
        stream = Lexer("x #").tokenize()
        assert next(stream).kind == TokenKind.IDENT
        with pytest.raises(InvalidCharacterError):
            next(stream)


# =============================================================================
# Error Condition Tests
# =============================================================================

class TestErrors:
    """Invalid input raises a LexerError with a location."""

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("x := 1 # 2", "bad.pl0")
        assert exc_info.value.char == "#"
        assert "bad.pl0:1:8" in str(exc_info.value)

    def test_lone_colon(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("x : 1")
        assert "':='" in str(exc_info.value)

    def test_identifier_too_long(self):
        tokenize("abcdefghijk")
        with pytest.raises(IdentifierTooLongError):
            tokenize("abcdefghijkl")

    def test_number_too_long(self):
        tokenize("99999")
        with pytest.raises(NumberTooLongError):
            tokenize("100000")

    def test_identifier_starting_with_digit(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            tokenize("x := 2abc")
        assert exc_info.value.text == "2abc"

    def test_errors_share_base_class(self):
        with pytest.raises(LexerError):
            tokenize("?")


# =============================================================================
# Lexeme List Tests
# =============================================================================

class TestLexemeList:
    """Numeric lexeme list reading and writing."""

    def test_read(self):
        tokens = read_token_list("29 2 x 18 2 x 20 3 1 19")
        assert [t.kind for t in tokens] == [
            TokenKind.VAR, TokenKind.IDENT, TokenKind.SEMICOLON, TokenKind.IDENT,
            TokenKind.BECOMES, TokenKind.NUMBER, TokenKind.PERIOD,
        ]
        assert tokens[1].lexeme == "x"
        assert tokens[5].lexeme == "1"

    def test_read_fills_in_spellings(self):
        tokens = read_token_list("21 22 12")
        assert [t.lexeme for t in tokens] == ["begin", "end", "<="]

    def test_read_across_lines(self):
        assert len(read_token_list("29 2 x\n18\n\n19\n")) == 4

    def test_write(self):
        tokens = tokenize("var x; x := 10.")
        assert format_token_list(tokens) == "29 2 x 18 2 x 20 3 10 19"

    def test_write_then_read_keeps_kinds(self):
        tokens = tokenize("if odd x then write y else read z.")
        again = read_token_list(format_token_list(tokens))
        assert [(t.kind, t.lexeme) for t in again] == [(t.kind, t.lexeme) for t in tokens]

    @pytest.mark.parametrize("text", ["99", "abc", "2", "29 3", "1", "3 abc", "3 -4", "3 1a"])
    def test_read_rejects_malformed(self, text):
        with pytest.raises(TokenListError):
            read_token_list(text)

    def test_hand_built_tokens_compare_equal(self):
        assert read_token_list("2 a")[0] == Token(TokenKind.IDENT, "a")

    def test_read_rejects_non_digit_constant_value(self):
        """A constant whose number lexeme is not decimal is rejected on reading."""
        with pytest.raises(TokenListError, match="'abc' is not a valid number lexeme"):
            read_token_list("28 2 a 9 3 abc 18 19")
