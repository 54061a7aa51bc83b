from comment_extractor.core.id_assigner import generate_uid


def test_same_seed_same_id():
    assert generate_uid("chapter-1:comment:0") == generate_uid("chapter-1:comment:0")


def test_id_is_non_negative_32_bit():
    for seed in ["", "a", "chapter-1:comment:0", "ünïcødé:htmlcomment:9"]:
        uid = generate_uid(seed)
        assert 0 <= uid < 2 ** 32


def test_different_seeds_differ():
    assert generate_uid("U:comment:0") != generate_uid("U:comment:1")
    assert generate_uid("U:comment:0") != generate_uid("U:htmlcomment:0")
