import io

import pytest

from _pdflex.reading import lazy_tokenize, tokenize
from _pdflex.tokenizer.errors import WrongFileModeError
from _pdflex.tokenizer.token import Token

contents = b"%PDF-1.7\n1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n"
expected_tokens = [
    Token.integer(1),
    Token.integer(0),
    Token.keyword("obj"),
    Token.delimiter("<<"),
    Token.name("Type"),
    Token.name("Catalog"),
    Token.name("Pages"),
    Token.reference(2, 0),
    Token.delimiter(">>"),
    Token.keyword("endobj"),
]


def test_tokenize_path(tmp_path):
    test_file = tmp_path / "test.pdf"
    test_file.write_bytes(contents)

    assert tokenize(test_file) == expected_tokens
    assert tokenize(str(test_file)) == expected_tokens


def test_tokenize_stream():
    stream = io.BytesIO(contents)
    assert tokenize(stream) == expected_tokens
    assert not stream.closed


def test_lazy_tokenize_path(tmp_path):
    test_file = tmp_path / "test.pdf"
    test_file.write_bytes(contents)

    with lazy_tokenize(test_file) as tokens:
        assert next(tokens) == Token.integer(1)


def test_wrong_mode_error():
    with pytest.raises(WrongFileModeError):
        tokenize(io.StringIO(contents.decode("ascii")))


def test_wrong_mode_error_opened_file(tmp_path):
    test_file = tmp_path / "test.pdf"
    test_file.write_bytes(contents)

    with open(test_file, "r") as f:
        with pytest.raises(WrongFileModeError):
            tokenize(f)
