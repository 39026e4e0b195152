"""
Reading of whole cross-reference subsections (PDF 1.7 section 7.5.4).

A subsection is a run of fixed width 20 byte entries, so instead of matching
the entries one at a time (see Tokenizer.next_xref_entry) the bytes of all
entries are viewed as a two dimensional array and validated column by column.
"""

import logging

import numpy as np

from _pdflex.tokenizer.errors import MalformedXrefEntryError
from _pdflex.tokenizer.pdf_tokenizer import XREF_ENTRY_SIZE

logger = logging.getLogger(__name__)

XREF_DTYPE = np.dtype(
    [
        ("offset", np.uint64),
        ("generation", np.uint32),
        ("type", "S1"),
    ]
)

OFFSET_COLUMNS = slice(0, 10)
GENERATION_COLUMNS = slice(11, 16)
SEPARATOR_COLUMNS = [10, 16]
TYPE_COLUMN = 17
TERMINATOR_COLUMNS = slice(18, 20)

ENTRY_TYPES = np.frombuffer(b"nf", dtype=np.uint8)
TERMINATORS = np.frombuffer(b" \r \n\r\n", dtype=np.uint8).reshape(3, 2)


def is_digit(columns):
    return (columns >= ord("0")) & (columns <= ord("9"))


def digits_value(columns):
    """
    :param columns: (n, k) array of ascii digits.
    :returns: The n numbers written with those digits.
    """
    weights = 10 ** np.arange(columns.shape[1] - 1, -1, -1, dtype=np.uint64)
    return ((columns - ord("0")).astype(np.uint64) * weights).sum(axis=1)


def valid_entries(table):
    """
    :param table: (n, 20) uint8 array of subsection entries.
    :returns: Boolean array telling which entries are well formed.
    """
    terminators = table[:, TERMINATOR_COLUMNS]
    return (
        is_digit(table[:, OFFSET_COLUMNS]).all(axis=1)
        & is_digit(table[:, GENERATION_COLUMNS]).all(axis=1)
        & (table[:, SEPARATOR_COLUMNS] == ord(" ")).all(axis=1)
        & np.isin(table[:, TYPE_COLUMN], ENTRY_TYPES)
        & (terminators[:, np.newaxis, :] == TERMINATORS).all(axis=2).any(axis=1)
    )


def read_xref_subsection(tokenizer, count):
    """
    Read count cross-reference entries at the position of the tokenizer.

    >>> entries = b"0000000000 65535 f \\n0000000018 00000 n \\n"
    >>> tokenizer = Tokenizer(io.BytesIO(entries))
    >>> read_xref_subsection(tokenizer, 2)["offset"]
    array([ 0, 18], dtype=uint64)

    :param tokenizer: Tokenizer positioned at the first entry.
    :param count: Number of entries in the subsection.
    :returns: numpy array with dtype XREF_DTYPE.
    :raises MalformedXrefEntryError: With the offset of the first malformed
        entry, the position of the tokenizer is then unchanged.
    """
    if count < 0:
        raise ValueError(f"Subsection entry count has to be non-negative, got {count}")
    if count == 0:
        return np.empty(0, dtype=XREF_DTYPE)

    start = tokenizer.position
    data = tokenizer.read_bytes(XREF_ENTRY_SIZE * count)
    complete = len(data) // XREF_ENTRY_SIZE
    table = np.frombuffer(data, dtype=np.uint8, count=complete * XREF_ENTRY_SIZE)
    table = table.reshape(complete, XREF_ENTRY_SIZE)

    invalid = np.flatnonzero(~valid_entries(table))
    if invalid.size > 0 or complete < count:
        first_invalid = int(invalid[0]) if invalid.size > 0 else complete
        tokenizer.position = start
        raise MalformedXrefEntryError(
            "Invalid cross-reference subsection entry",
            start + first_invalid * XREF_ENTRY_SIZE,
        )

    result = np.empty(count, dtype=XREF_DTYPE)
    result["offset"] = digits_value(table[:, OFFSET_COLUMNS])
    result["generation"] = digits_value(table[:, GENERATION_COLUMNS])
    result["type"] = np.frombuffer(table[:, TYPE_COLUMN].tobytes(), dtype="S1")
    logger.debug("Read %d cross-reference entries at %d", count, start)
    return result
