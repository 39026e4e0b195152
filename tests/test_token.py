import pytest

from _pdflex.tokenizer.token import Reference, Token, XrefEntry
from _pdflex.tokenizer.token_kind import TokenKind


def test_offsets_are_not_compared():
    assert Token.integer(1, 0, 1) == Token.integer(1, 5, 6)
    assert Token.end_of_input(3) == Token.end_of_input()


def test_kinds_are_compared():
    assert Token.integer(1) != Token.real(1.0)
    assert Token.keyword("null") != Token.null()
    assert Token.name("R") != Token.keyword("R")


@pytest.mark.parametrize(
    "token, is_numeric",
    [
        (Token.integer(1), True),
        (Token.real(0.5), True),
        (Token.string(b"1"), False),
        (Token.reference(1, 0), False),
    ],
)
def test_is_numeric(token, is_numeric):
    assert token.is_numeric == is_numeric


def test_is_keyword():
    assert Token.keyword("obj").is_keyword("obj")
    assert not Token.name("obj").is_keyword("obj")


def test_is_delimiter():
    assert Token.delimiter("<<").is_delimiter("<<")
    assert not Token.string(b"<<").is_delimiter("<<")


def test_invalid_delimiter():
    with pytest.raises(ValueError, match="Not a pdf delimiter"):
        Token.delimiter("(")


def test_reference_value():
    token = Token.reference(12, 3)
    assert token.kind == TokenKind.REFERENCE
    assert token.value == Reference(object_number=12, generation=3)


def test_xref_entry_unpacks():
    offset, generation, entry_type = XrefEntry(18, 0, "n")
    assert (offset, generation, entry_type) == (18, 0, "n")
