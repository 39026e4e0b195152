import re
import warnings

from _pdflex.tokenizer.errors import IntegerOverflowWarning
from _pdflex.tokenizer.token import Token
from _pdflex.tokenizer.token_kind import TokenKind

# See PDF 1.7 section 7.2.2
WHITESPACE = b"\0\t\n\f\r "
DELIMITERS = b"()<>{}/[]%"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_DIGITS = len(str(INT64_MAX))

INTEGER_RE = re.compile(rb"[+-]?[0-9]+")
REAL_RE = re.compile(rb"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
NAME_ESCAPE_RE = re.compile(rb"#([0-9A-Fa-f]{2})")


def to_int64(word):
    """
    Convert the digits of an integer token to an int, saturating at the
    bounds of a signed 64 bit integer.

    >>> to_int64(b"-12")
    -12

    """
    negative = word.startswith(b"-")
    digits = word.lstrip(b"+-").lstrip(b"0")
    # Longer digit runs are out of range and may exceed int()'s digit limit
    if len(digits) <= INT64_DIGITS:
        value = -int(digits or b"0") if negative else int(digits or b"0")
        if INT64_MIN <= value <= INT64_MAX:
            return value
    warnings.warn(
        f"Integer of {len(digits)} digits does not fit in 64 bits and is saturated",
        IntegerOverflowWarning,
    )
    return INT64_MIN if negative else INT64_MAX


def convert_keyword(word, start=None, end=None):
    """
    Classify a run of regular characters, ie. b"true" becomes a boolean token,
    b"12." a real token with value 12.0 and b"obj" a keyword token.

    See PDF 1.7 sections 7.3.2, 7.3.3 and 7.3.9.

    :param word: The bytes of the token.
    :returns: The Token for the given word.
    """
    text = word.decode("latin-1")
    literal = TokenKind.literals().get(text)
    if literal is not None:
        kind, value = literal
        return Token(kind, value, start, end)
    if INTEGER_RE.fullmatch(word):
        return Token.integer(to_int64(word), start, end)
    if REAL_RE.fullmatch(word):
        if text.endswith("."):
            text += "0"
        return Token.real(float(text), start, end)
    return Token.keyword(text, start, end)


def decode_name(raw):
    """
    Decode the #xx escapes of a name (without the leading slash).

    >>> decode_name(b"A#20B")
    'A B'

    """
    decoded = NAME_ESCAPE_RE.sub(lambda m: bytes([int(m.group(1), 16)]), raw)
    return decoded.decode("latin-1")


def decode_hex(digits):
    """
    Decode the contents of a hex string, whitespace is ignored and an odd
    number of digits is padded with a final 0.

    :raises ValueError: If there are characters other than hex digits.
    """
    digits = digits.translate(None, WHITESPACE)
    if len(digits) % 2:
        digits += b"0"
    return bytes.fromhex(digits.decode("ascii"))
