"""
In this module, the tokenizer reads a seekable byte stream and returns one
pdf token at a time. The stream is read through a ByteCursor which buffers a
window of the stream, so that files too large for memory can be tokenized
and so that the tokenizer can be moved to any offset (ie. the location of a
cross-reference table) and continue from there.

The pdf syntax is mostly LL(1), the exception being indirect references
"12 0 R" which start like two integers. Tokenizer.next_token therefore looks
two tokens ahead after every integer and winds back to just after the
integer if the lookahead does not end in the R keyword.

The tokenizers have to be given byte streams.
"""

from .pdf_tokenizer import Tokenizer

__all__ = ["Tokenizer"]
