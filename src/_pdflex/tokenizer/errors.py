class PdfSyntaxError(Exception):
    """
    Base class of the errors raised by the tokenizer when the input does not
    follow the PDF lexical grammar. The offset is the byte position in the
    input at which the problem was detected.
    """

    def __init__(self, message, offset):
        super().__init__(f"{message} (at offset {offset})")
        self.offset = offset


class MalformedTokenError(PdfSyntaxError):
    """
    Raised when a delimiter occurs at an invalid position, for instance a
    single '>' which does not close a dictionary, or when a hex string
    contains characters that are not hexadecimal digits.
    """

    pass


class UnterminatedLiteralError(PdfSyntaxError):
    """
    Raised when the end of the input is reached before the closing
    parenthesis of a literal string.
    """

    pass


class UnterminatedHexStringError(PdfSyntaxError):
    """
    Raised when the end of the input is reached before the closing '>' of a
    hex string.
    """

    pass


class MalformedXrefEntryError(PdfSyntaxError):
    """
    Raised when a cross-reference subsection entry does not follow the fixed
    20 byte format. The offset is the start of the offending entry.
    """

    pass


class WrongFileModeError(Exception):
    """
    Thrown when a pdf file is given as a text stream instead of
    a binary stream.
    """

    pass


class IntegerOverflowWarning(UserWarning):
    """
    Emitted when an integer token does not fit in a signed 64 bit integer
    and is saturated.
    """

    pass
