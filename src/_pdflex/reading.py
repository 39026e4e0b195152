import io
import pathlib
from contextlib import contextmanager

from _pdflex.tokenizer import Tokenizer
from _pdflex.tokenizer.errors import WrongFileModeError


def tokenize(filelike):
    """
    Tokenizes a pdf file and returns the list of tokens,
    ie. tokens = tokenize("/my/file.pdf")

    Indirect references are returned as one token of kind
    TokenKind.REFERENCE. The end of input is not part of the list.
    """
    with lazy_tokenize(filelike) as tokens:
        return list(tokens)


@contextmanager
def lazy_tokenize(filelike):
    """
    Context manager yielding an iterator over the tokens of a pdf file.

    :param filelike: Either a path to a pdf file, which is opened and closed
        again, or a seekable binary stream, which is left open.
    """
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")
    elif isinstance(filelike, io.TextIOBase):
        raise WrongFileModeError("Pdf file was opened in text mode!")

    try:
        yield iter(Tokenizer(file_stream))
    finally:
        if did_open:
            file_stream.close()
