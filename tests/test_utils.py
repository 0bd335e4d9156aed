"""Shared utility tests."""
from bson import ObjectId
from shared.utils import calculate_skip, calculate_total_pages, serialize_document


def test_total_pages_rounds_up():
    assert calculate_total_pages(45, 20) == 3
    assert calculate_total_pages(40, 20) == 2
    assert calculate_total_pages(0, 20) == 0


def test_skip_for_page():
    assert calculate_skip(1, 20) == 0
    assert calculate_skip(3, 20) == 40


def test_serialize_document_stringifies_object_id():
    oid = ObjectId()
    document = {"_id": oid, "link": "https://example.com"}

    serialized = serialize_document(document)

    assert serialized == {"_id": str(oid), "link": "https://example.com"}
    assert document["_id"] is oid
