from dataclasses import dataclass, field
from typing import Any, NamedTuple

from _pdflex.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Reference:
    """
    An indirect reference, written as "12 0 R" in a pdf file.
    """

    object_number: int
    generation: int


class XrefEntry(NamedTuple):
    """
    One entry of a cross-reference subsection, ie. "0000000018 00000 n \\n"
    is XrefEntry(offset=18, generation=0, type="n").
    """

    offset: int
    generation: int
    type: str


@dataclass(frozen=True)
class Token:
    """
    A token in a pdf file. The value depends on the kind:

    * BOOLEAN: bool
    * INTEGER: int
    * REAL: float
    * NAME, KEYWORD, DELIMITER: str (bytes decoded as latin-1)
    * STRING: bytes
    * REFERENCE: Reference
    * NULL, END_OF_INPUT: None

    start and end are the byte offsets of the token in the input and do not
    take part in comparisons.
    """

    kind: TokenKind
    value: Any = None
    start: int = field(default=None, compare=False)
    end: int = field(default=None, compare=False)

    @property
    def is_numeric(self):
        return self.kind in TokenKind.numeric_types()

    @property
    def is_end_of_input(self):
        return self.kind == TokenKind.END_OF_INPUT

    def is_keyword(self, word):
        return self.kind == TokenKind.KEYWORD and self.value == word

    def is_delimiter(self, delimiter):
        return self.kind == TokenKind.DELIMITER and self.value == delimiter

    @classmethod
    def boolean(cls, value, start=None, end=None):
        return cls(TokenKind.BOOLEAN, value, start, end)

    @classmethod
    def integer(cls, value, start=None, end=None):
        return cls(TokenKind.INTEGER, value, start, end)

    @classmethod
    def real(cls, value, start=None, end=None):
        return cls(TokenKind.REAL, value, start, end)

    @classmethod
    def name(cls, value, start=None, end=None):
        return cls(TokenKind.NAME, value, start, end)

    @classmethod
    def string(cls, value, start=None, end=None):
        return cls(TokenKind.STRING, value, start, end)

    @classmethod
    def keyword(cls, value, start=None, end=None):
        return cls(TokenKind.KEYWORD, value, start, end)

    @classmethod
    def delimiter(cls, value, start=None, end=None):
        if value not in TokenKind.delimiters():
            raise ValueError(f"Not a pdf delimiter: {value!r}")
        return cls(TokenKind.DELIMITER, value, start, end)

    @classmethod
    def null(cls, start=None, end=None):
        return cls(TokenKind.NULL, None, start, end)

    @classmethod
    def reference(cls, object_number, generation, start=None, end=None):
        reference = Reference(object_number, generation)
        return cls(TokenKind.REFERENCE, reference, start, end)

    @classmethod
    def end_of_input(cls, position=None):
        return cls(TokenKind.END_OF_INPUT, None, position, position)
