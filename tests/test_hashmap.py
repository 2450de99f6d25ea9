import pytest

from probemap.hashmap import HashMap, Pair, hash_key, is_equal

SAMPLE_WORDS = ["casa", "carro", "saco", "olla", "cesa", "case"]
SAMPLE_SLOTS = [8, 7, 6, 0, 4, 2]


@pytest.fixture
def sample():
    table = HashMap(10)
    for i, word in enumerate(SAMPLE_WORDS):
        table.insert(word, f"value{i}")
    return table


def test_new_map_state():
    table = HashMap(10)
    assert table.buckets == [None] * 10
    assert (table.size, table.capacity, table.current) == (0, 10, -1)
    table = HashMap(5)
    assert (table.size, table.capacity, table.current) == (0, 5, -1)
    assert len(table) == 0


def test_invalid_capacity():
    with pytest.raises(ValueError):
        HashMap(0)
    with pytest.raises(ValueError):
        hash_key("casa", 0)


@pytest.mark.parametrize("key,capacity", [("computador", 10), ("silla", 50), ("mesa", 5)])
def test_hash_in_range(key, capacity):
    assert 0 <= hash_key(key, capacity) < capacity


def test_hash_deterministic_and_case_insensitive():
    for word in ("hola", "chao", "casa"):
        assert hash_key(word, 10) == hash_key("".join(word), 10)
        assert hash_key(word.upper(), 10) == hash_key(word, 10)


def test_hash_collision_words_slots():
    words = ["caso", "cosa", "cesa", "cae", "casa", "saca", "saco", "case"]
    slots = [hash_key(word, 10) for word in words]
    assert slots == [2, 4, 4, 3, 8, 2, 6, 2]


def test_hash_known_slots():
    for word, slot in zip(SAMPLE_WORDS, SAMPLE_SLOTS):
        assert hash_key(word, 10) == slot
    assert hash_key(":key", 10) == 3
    assert hash_key("key", 10) == 7
    assert hash_key("holo", 10) == 2


def test_is_equal():
    assert is_equal("hola", "hola") is True
    assert is_equal("hola", "chao") is False
    assert is_equal("hola", None) is False
    assert is_equal(None, None) is False


def test_sample_layout(sample):
    for word, slot in zip(SAMPLE_WORDS, SAMPLE_SLOTS):
        assert sample.buckets[slot].key == word
    assert len(sample) == 6


def test_insert_free_slot(sample):
    sample.insert(":key", "value")
    assert sample.buckets[3].key == ":key"
    assert sample.buckets[3].value == "value"
    assert sample.size == 7
    assert sample.current == 3
    assert sample.enlarged is False


def test_insert_duplicate_ignored(sample):
    sample.insert("case", "repetido")
    assert sample.buckets[1] is None
    assert sample.search("case").value == "value5"
    assert sample.size == 6


def test_insert_collision_probes(sample):
    sample.insert("key", "value")
    assert sample.buckets[9].value == "value"
    sample.size = 6
    sample.insert("holi", "other")
    assert sample.buckets[1].value == "other"


def test_insert_triggers_enlarge(sample):
    sample.size = 7
    sample.insert("key", "value")
    assert sample.enlarged is True
    assert sample.capacity == 20


def test_search_found(sample):
    pair = sample.search("carro")
    assert pair is sample.buckets[7]
    assert sample.current == 7


def test_search_collided(sample):
    sample.buckets[9] = Pair("key", "value")
    assert sample.search("key") is sample.buckets[9]
    assert sample.current == 9


def test_search_missing(sample):
    assert sample.search("holo") is None


def test_erase(sample):
    sample.erase("olla")
    assert sample.buckets[0] is not None and sample.buckets[0].key is None
    assert sample.size == 5
    assert sample.search("olla") is None


def test_erase_collided(sample):
    sample.buckets[9] = Pair("key", "value")
    sample.erase("key")
    assert sample.buckets[9].key is None


def test_erase_missing(sample):
    sample.erase("holo")
    assert sample.buckets[2].key == "case"
    assert sample.size == 6


def test_reinsert_reuses_tombstone(sample):
    sample.erase("olla")
    sample.insert("olla", "again")
    assert sample.buckets[0].key == "olla"
    assert sample.buckets[0].value == "again"
    assert sample.size == 6


def test_first(sample):
    assert sample.first() is sample.buckets[0]
    assert sample.current == 0
    sample.buckets[0].key = None
    assert sample.first() is sample.buckets[2]
    assert sample.current == 2


def test_first_empty():
    assert HashMap(4).first() is None


def test_next(sample):
    sample.current = 0
    assert sample.next() is sample.buckets[2]
    assert sample.current == 2
    sample.current = 7
    assert sample.next() is sample.buckets[8]
    assert sample.next() is None


def test_enlarge_layout(sample):
    values = {slot: sample.buckets[slot].value for slot in SAMPLE_SLOTS}
    sample.enlarge()
    assert sample.capacity == 20
    assert sample.buckets[0].value is values[0]
    assert sample.buckets[2] is None
    assert sample.buckets[12].value is values[2]
    assert sample.buckets[4].value is values[4]
    assert sample.size == 6


def test_iteration_matches_first_next(sample):
    walked = []
    pair = sample.first()
    while pair is not None:
        walked.append(pair)
        pair = sample.next()
    assert list(sample) == walked
    assert sorted(p.key for p in sample) == sorted(SAMPLE_WORDS)


def test_many_inserts_all_searchable():
    table = HashMap(2)
    keys = [f"k{i}" for i in range(200)]
    for i, key in enumerate(keys):
        table.insert(key, i)
    assert len(table) == 200
    assert table.size / table.capacity <= 0.7
    for i, key in enumerate(keys):
        assert table.search(key).value == i