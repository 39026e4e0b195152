from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version

from _pdflex.reading import lazy_tokenize, tokenize
from _pdflex.tokenizer import Tokenizer
from _pdflex.tokenizer.errors import (
    IntegerOverflowWarning,
    MalformedTokenError,
    MalformedXrefEntryError,
    PdfSyntaxError,
    UnterminatedHexStringError,
    UnterminatedLiteralError,
    WrongFileModeError,
)
from _pdflex.tokenizer.token import Reference, Token, XrefEntry
from _pdflex.tokenizer.token_kind import TokenKind
from _pdflex.xref import XREF_DTYPE, read_xref_subsection

try:
    __version__ = distribution_version("PdfLex")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "IntegerOverflowWarning",
    "MalformedTokenError",
    "MalformedXrefEntryError",
    "PdfSyntaxError",
    "Reference",
    "Token",
    "TokenKind",
    "Tokenizer",
    "UnterminatedHexStringError",
    "UnterminatedLiteralError",
    "WrongFileModeError",
    "XREF_DTYPE",
    "XrefEntry",
    "lazy_tokenize",
    "read_xref_subsection",
    "tokenize",
]
