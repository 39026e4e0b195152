import logging
import re
import warnings

from _pdflex.tokenizer.byte_cursor import CHUNK_SIZE, ByteCursor
from _pdflex.tokenizer.common import (
    DELIMITERS,
    WHITESPACE,
    convert_keyword,
    decode_hex,
    decode_name,
)
from _pdflex.tokenizer.errors import (
    IntegerOverflowWarning,
    MalformedTokenError,
    MalformedXrefEntryError,
    PdfSyntaxError,
    UnterminatedHexStringError,
    UnterminatedLiteralError,
)
from _pdflex.tokenizer.token import Token, XrefEntry
from _pdflex.tokenizer.token_kind import TokenKind

logger = logging.getLogger(__name__)

WHITESPACE_RUN_RE = re.compile(b"[" + re.escape(WHITESPACE) + b"]*")
TOKEN_END_RE = re.compile(b"(?=[" + re.escape(WHITESPACE + DELIMITERS) + b"])")
LINE_END_RE = re.compile(rb"(?=[\r\n])")
LITERAL_STRING_SPECIAL_RE = re.compile(rb"[()\\\r]")
HEX_STRING_END_RE = re.compile(rb">")
XREF_ENTRY_RE = re.compile(rb"([0-9]{10}) ([0-9]{5}) ([nf])( \r| \n|\r\n)")

XREF_ENTRY_SIZE = 20
MAX_GENERATION = 65535

LITERAL_STRING_ESCAPES = {
    ord("n"): b"\n",
    ord("r"): b"\r",
    ord("t"): b"\t",
    ord("b"): b"\b",
    ord("f"): b"\f",
    ord("("): b"(",
    ord(")"): b")",
    ord("\\"): b"\\",
}
OCTAL_DIGITS = b"01234567"
LF = ord("\n")
CR = ord("\r")


class Tokenizer:
    """
    Tokenizes the contents of a seekable byte stream following the lexical
    rules of PDF 1.7 section 7.2.

    The tokenizer keeps its own position which may differ from the position
    of the stream, as reading is buffered (see ByteCursor).

    >>> tokenizer = Tokenizer(io.BytesIO(b"<< /Parent 3 0 R >>"))
    >>> [t.value for t in tokenizer]
    ['<<', 'Parent', Reference(object_number=3, generation=0), '>>']

    """

    def __init__(self, stream, chunk_size=CHUNK_SIZE):
        """
        :param stream: A byte stream containing pdf data.
        :param chunk_size: Number of bytes read from the stream at a time.
        """
        self.cursor = ByteCursor(stream, chunk_size=chunk_size)

    @property
    def position(self):
        """
        The byte offset of the next token.
        """
        return self.cursor.position

    @position.setter
    def position(self, position):
        logger.debug("Tokenizer moved to offset %d", position)
        self.cursor.position = position

    def __iter__(self):
        while True:
            token = self.next_token()
            if token.is_end_of_input:
                return
            yield token

    def next_token(self):
        """
        Read the token at the current position, collapsing "<int> <int> R" into
        a single reference token (see PDF 1.7 section 7.3.10).
        """
        token = self.parse_token()
        if token.kind == TokenKind.INTEGER:
            return self.collapse_reference(token)
        return token

    def peek_token(self):
        """
        Read the token at the current position without advancing.
        """
        start = self.position
        try:
            return self.next_token()
        finally:
            self.cursor.rewind(start)

    def next_byte(self):
        """
        :returns: The byte at the current position as an int, or None at the end
            of the stream.
        """
        return self.cursor.get_byte()

    def read_bytes(self, size):
        """
        Read size raw bytes, ie. the data of a stream object. Fewer bytes are
        returned only at the end of the input.
        """
        return self.cursor.read(size)

    def skip_whitespace(self):
        self.cursor.skip(WHITESPACE_RUN_RE)

    def next_xref_entry(self):
        """
        Read the cross-reference subsection entry at the current position, see
        PDF 1.7 section 7.5.4.

        :returns: XrefEntry(offset, generation, type)
        """
        start = self.position
        groups = self.cursor.match(XREF_ENTRY_RE, XREF_ENTRY_SIZE)
        if groups is None:
            raise MalformedXrefEntryError(
                "Invalid cross-reference subsection entry", start
            )
        offset, generation, entry_type, _ = groups
        return XrefEntry(int(offset), int(generation), entry_type.decode("ascii"))

    def collapse_reference(self, token):
        """
        Try to read the generation number and the R keyword of a reference
        following the integer token. If they are not there, the position
        is restored to just after the integer.
        """
        start = self.position
        # Tokens read here are read again after a rewind, which warns then.
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", IntegerOverflowWarning)
            try:
                generation = self.parse_token()
                if generation.kind == TokenKind.INTEGER:
                    keyword = self.parse_token()
                    if (
                        keyword.is_keyword("R")
                        and token.value >= 0
                        and 0 <= generation.value <= MAX_GENERATION
                    ):
                        logger.debug(
                            "Reference %d %d R at %d",
                            token.value,
                            generation.value,
                            token.start,
                        )
                        return Token.reference(
                            token.value, generation.value, token.start, keyword.end
                        )
            except PdfSyntaxError as err:
                # The error is raised again when the caller reaches that token.
                logger.debug("Reference lookahead stopped: %s", err)
        self.cursor.rewind(start)
        return token

    def parse_token(self):
        """
        Parse the single token at the current position. Whitespace and comments
        are skipped.
        """
        while True:
            start = self.position
            byte = self.cursor.get_byte()
            if byte is None:
                return Token.end_of_input(start)
            if byte in WHITESPACE:
                self.skip_whitespace()
                continue

            char = chr(byte)
            if char == "%":
                if self.cursor.scan_until(LINE_END_RE) is None:
                    self.cursor.rest()
                    return Token.end_of_input(self.position)
                continue
            if char == "/":
                name = decode_name(self.scan_regular())
                return Token.name(name, start, self.position)
            if char == "(":
                string = self.parse_literal_string(start)
                return Token.string(string, start, self.position)
            if char == "<":
                if self.cursor.peek_byte() == byte:
                    self.cursor.get_byte()
                    return Token.delimiter("<<", start, self.position)
                string = self.parse_hex_string(start)
                return Token.string(string, start, self.position)
            if char == ">":
                if self.cursor.get_byte() != byte:
                    raise MalformedTokenError(
                        "Delimiter '>' found at invalid position", self.position
                    )
                return Token.delimiter(">>", start, self.position)
            if char in "[]{}":
                return Token.delimiter(char, start, self.position)
            word = bytes([byte]) + self.scan_regular()
            return convert_keyword(word, start, self.position)

    def scan_regular(self):
        """
        Consume regular characters up to the next whitespace or delimiter.
        """
        data = self.cursor.scan_until(TOKEN_END_RE)
        if data is None:
            data = self.cursor.rest()
        return data

    def parse_literal_string(self, start):
        """
        Parse a literal string, the opening parenthesis has already been
        consumed. See PDF 1.7 section 7.3.4.2.

        :returns: The bytes of the string.
        """
        result = bytearray()
        depth = 1
        while True:
            data = self.cursor.scan_until(LITERAL_STRING_SPECIAL_RE)
            if data is None:
                raise UnterminatedLiteralError(
                    f"Unclosed literal string starting at {start}",
                    self.cursor.buffered_end,
                )
            special = data[-1]
            result += data[:-1]

            if special == ord("("):
                depth += 1
                result.append(special)
            elif special == ord(")"):
                depth -= 1
                if depth == 0:
                    return bytes(result)
                result.append(special)
            elif special == CR:
                result.append(LF)
                if self.cursor.peek_byte() == LF:
                    self.cursor.get_byte()
            else:
                self.parse_escape(result, start)

    def parse_escape(self, result, start):
        """
        Append the character denoted by the escape sequence following a
        backslash in a literal string to result.
        """
        byte = self.cursor.get_byte()
        if byte is None:
            raise UnterminatedLiteralError(
                f"Unclosed literal string starting at {start}", self.position
            )

        if byte in LITERAL_STRING_ESCAPES:
            result += LITERAL_STRING_ESCAPES[byte]
        elif byte == CR:
            if self.cursor.peek_byte() == LF:
                self.cursor.get_byte()
        elif byte == LF:
            pass
        elif byte in OCTAL_DIGITS:
            digits = bytes([byte])
            while len(digits) < 3:
                next_byte = self.cursor.peek_byte()
                if next_byte is None or next_byte not in OCTAL_DIGITS:
                    break
                digits += bytes([self.cursor.get_byte()])
            result.append(int(digits, 8) & 0xFF)
        else:
            result.append(byte)

    def parse_hex_string(self, start):
        """
        Parse a hex string, the opening '<' has already been consumed.
        See PDF 1.7 section 7.3.4.3.
        """
        data = self.cursor.scan_until(HEX_STRING_END_RE)
        if data is None:
            raise UnterminatedHexStringError(
                f"Unclosed hex string starting at {start}",
                self.cursor.buffered_end,
            )
        try:
            return decode_hex(data[:-1])
        except ValueError as err:
            raise MalformedTokenError(
                f"Invalid hex string starting at {start}", self.position
            ) from err
