import logging

import pytest

from secret_recover.document import load_document, parse_document
from secret_recover.errors import DocumentError, ShareDecodeError
from secret_recover.points import Point

SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_parse_document_sample():
    document = parse_document(SAMPLE)
    assert document.k == 3
    assert document.n == 4
    assert set(document.points) == {Point(1, 4), Point(2, 7), Point(3, 12), Point(6, 39)}


def test_load_document_from_file(write_document):
    document = load_document(write_document(SAMPLE))
    assert document.k == 3
    assert len(document.points) == 4


def test_k_may_be_a_string():
    document = parse_document({"keys": {"k": "2"}, "1": {"base": "10", "value": "5"}})
    assert document.k == 2
    assert document.n is None


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"1": {"base": "10", "value": "4"}},
        {"keys": {"n": 2}},
        {"keys": {"k": "three"}},
        {"keys": {"k": True}},
        {"keys": []},
    ],
)
def test_malformed_documents(payload):
    with pytest.raises(DocumentError):
        parse_document(payload)


def test_bad_share_is_reported(write_document):
    path = write_document({"keys": {"k": 1}, "1": {"base": "10", "value": "1a"}})
    with pytest.raises(ShareDecodeError):
        load_document(path)


def test_missing_file(tmp_path):
    with pytest.raises(DocumentError, match="Error reading file"):
        load_document(tmp_path / "missing.json")


def test_invalid_json(write_document):
    with pytest.raises(DocumentError, match="Error parsing JSON"):
        load_document(write_document("{not json"))


def test_share_count_mismatch_warns(caplog):
    payload = {"keys": {"n": 5, "k": 1}, "1": {"base": "10", "value": "9"}}
    with caplog.at_level(logging.WARNING, logger="secret_recover.document"):
        document = parse_document(payload)
    assert document.points == (Point(1, 9),)
    assert "n=5" in caplog.text


def test_repeated_share_label_rejected(write_document):
    text = '{"keys": {"k": 2}, "1": {"base": "10", "value": "4"}, "1": {"base": "10", "value": "5"}}'
    with pytest.raises(DocumentError, match="duplicate key '1'"):
        load_document(write_document(text))
