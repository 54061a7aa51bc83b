from comment_extractor.core.id_assigner import generate_uid
from comment_extractor.core.models import CommentRecord
from comment_extractor.core.record_normalizer import RecordNormalizer


def normalize(element, index=0, unit_id="U"):
    return RecordNormalizer().normalize(element, index, unit_id)


def test_primary_fields():
    record = normalize({
        "id": 7,
        "author": "bob",
        "content": "hi",
        "created_at": 100,
        "avatar": "https://cdn.example.com/bob.png",
    })
    assert record == CommentRecord(
        id=7,
        author="bob",
        content="hi",
        timestamp=100,
        avatar_url="https://cdn.example.com/bob.png",
    )


def test_secondary_fields():
    record = normalize({"comment_id": 9, "username": "ann", "body": "text", "timestamp": 5})
    assert record.id == 9
    assert record.author == "ann"
    assert record.content == "text"
    assert record.timestamp == 5


def test_id_precedence():
    assert normalize({"id": 1, "comment_id": 2, "content": "x"}).id == 1


def test_fallback_id_uses_index_and_unit():
    record = normalize({"content": "x"}, index=3, unit_id="chapter-9")
    assert record.id == generate_uid("chapter-9:comment:3")


def test_numeric_string_id_is_coerced():
    assert normalize({"id": "17", "content": "x"}).id == 17


def test_non_numeric_id_becomes_zero():
    assert normalize({"id": "abc", "content": "x"}).id == 0
    assert normalize({"id": "1_000", "content": "x"}).id == 0


def test_out_of_range_numbers_become_zero():
    record = normalize({"id": 2 ** 70, "content": "x", "created_at": -(2 ** 64)})
    assert record.id == 0
    assert record.timestamp == 0
    assert normalize({"comment_id": str(2 ** 63), "content": "x"}).id == 0


def test_author_precedence_chain():
    assert normalize({"name": "n", "username": "u", "content": "x"}).author == "u"
    assert normalize({"name": "n", "content": "x"}).author == "n"
    assert normalize({"user": {"name": "nested"}, "content": "x"}).author == "nested"
    assert normalize({"content": "x"}).author is None


def test_null_author_falls_through():
    assert normalize({"author": None, "username": "u", "content": "x"}).author == "u"


def test_avatar_from_nested_user():
    record = normalize({"user": {"name": "a", "avatar": "a.png"}, "content": "x"})
    assert record.avatar_url == "a.png"
    assert normalize({"content": "x"}).avatar_url is None


def test_timestamp_defaults_to_zero():
    assert normalize({"content": "x"}).timestamp == 0
    assert normalize({"content": "x", "created_at": "2024-01-01"}).timestamp == 0
    assert normalize({"content": "x", "timestamp": "1700000000000"}).timestamp == 1700000000000


def test_empty_content_is_dropped():
    assert normalize({"author": "bob"}) is None
    assert normalize({"author": "bob", "content": ""}) is None


def test_non_string_content_keeps_json_spelling():
    assert normalize({"content": 42}).content == "42"
    assert normalize({"content": {"text": "hi"}}).content == '{"text":"hi"}'
