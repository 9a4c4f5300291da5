# =============================================================================
# test_properties.py - Property-Based Lexer Tests
# =============================================================================
# Generated inputs checked against scanner-wide guarantees.
#
# Test coverage includes:
#   - Identifier and keyword classification, identifier truncation
#   - Trivia-only input yields only END_OF_INPUT
#   - Rescanning the same text gives the same tokens
#   - Lexemes separated by trivia reconstruct the source, with positions
# =============================================================================

import hypothesis.strategies as st
from hypothesis import given

from cscan.config import ScanOptions
from cscan.lexer import tokenize
from cscan.tokens import KEYWORDS, LONGEST_KEYWORD, MAX_IDENTIFIER_LENGTH, Token, TokenKind


# =============================================================================
# Strategies
# =============================================================================

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,63}", fullmatch=True).filter(
    lambda name: name not in KEYWORDS
)
keywords = st.sampled_from(sorted(KEYWORDS))
integers = st.from_regex(r"[0-9]{1,8}", fullmatch=True)
floats = st.from_regex(r"[0-9]{1,5}\.[0-9]{0,5}", fullmatch=True)
string_bodies = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126, blacklist_characters='"\\'),
    max_size=20,
)
char_bodies = st.sampled_from(list("abcXYZ019 +(") + ["\\n", "\\t", "\\'", "\\\\", "\\0"])
operators = st.sampled_from(
    ["==", "!=", "<=", ">=", "&&", "||", "++", "--", "+=", "-=", "*=", "/=", "%=", "->"]
    + list("+-*/%<>=!&|^~?:.")
)
separators = st.sampled_from(list("(){}[];,"))

# Every separator starts with whitespace so adjacent lexemes never merge
trivia = st.sampled_from([" ", "\n", "\t", "  ", " /* c */ ", " // c\n", "\n\t", " /*\n*/\n"])

comment_pieces = st.sampled_from(
    [" ", "\t", "\n", "\r\n", "// line\n", "/* block */", "/* multi\nline */", "/**/", "//\n"]
)


def _raw(token: Token) -> str:
    """The exact source text a token was scanned from."""
    if token.kind is TokenKind.STRING_LITERAL:
        return f'"{token.text}"'
    if token.kind is TokenKind.CHAR_LITERAL:
        return f"'{token.text}'"
    return token.text


@st.composite
def lexemes(draw):
    return draw(
        st.one_of(
            identifiers,
            keywords,
            integers,
            floats,
            string_bodies.map(lambda body: f'"{body}"'),
            char_bodies.map(lambda body: f"'{body}'"),
            operators,
            separators,
        )
    )


# =============================================================================
# Property Tests
# =============================================================================

class TestProperties:
    """Scanner guarantees over generated source text."""

    @given(identifiers)
    def test_identifiers_are_identifiers(self, name):
        tokens = list(tokenize(name))
        assert tokens[0] == Token(TokenKind.IDENTIFIER, name, 1, 1)
        assert len(tokens) == 2

    @given(st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{64,120}", fullmatch=True))
    def test_long_identifiers_truncated(self, name):
        token = next(tokenize(name))
        assert token.kind is TokenKind.IDENTIFIER
        assert token.text == name[:MAX_IDENTIFIER_LENGTH]

    @given(keywords)
    def test_keywords_are_keywords(self, word):
        assert next(tokenize(word)) == Token(TokenKind.KEYWORD, word, 1, 1)

    @given(keywords, st.integers(min_value=1, max_value=8))
    def test_keywords_survive_small_identifier_bounds(self, word, bound):
        options = ScanOptions(max_identifier_length=bound, max_lexeme_length=LONGEST_KEYWORD)
        assert next(tokenize(word, options=options)) == Token(TokenKind.KEYWORD, word, 1, 1)

    @given(st.lists(comment_pieces, max_size=12))
    def test_trivia_only_yields_end_of_input(self, pieces):
        tokens = list(tokenize("".join(pieces)))
        assert [t.kind for t in tokens] == [TokenKind.END_OF_INPUT]

    @given(st.text(alphabet=st.characters(min_codepoint=9, max_codepoint=126), max_size=80))
    def test_rescanning_is_idempotent(self, source):
        assert list(tokenize(source)) == list(tokenize(source))

    @given(st.lists(st.tuples(lexemes(), trivia), min_size=1, max_size=15))
    def test_lexemes_and_trivia_reconstruct_source(self, pairs):
        source = "".join(lexeme + gap for lexeme, gap in pairs)
        tokens = list(tokenize(source))

        assert tokens[-1].kind is TokenKind.END_OF_INPUT
        scanned = tokens[:-1]
        assert [_raw(t) for t in scanned] == [lexeme for lexeme, _ in pairs]

        # each token's recorded position points at its lexeme in the source
        lines = source.split("\n")
        for token in scanned:
            raw = _raw(token)
            line = lines[token.line - 1]
            assert line[token.column - 1:token.column - 1 + len(raw)] == raw

        rebuilt = "".join(_raw(t) + gap for t, (_, gap) in zip(scanned, pairs))
        assert rebuilt == source
