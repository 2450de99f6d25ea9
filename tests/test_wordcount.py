from collections import Counter

from probemap.wordcount import ALICE_WORDS, HEADER, count_words, format_counts, main


def test_counts_match_occurrences():
    table = count_words(ALICE_WORDS)
    assert {pair.key: pair.value for pair in table} == dict(Counter(ALICE_WORDS))
    assert len(table) == len(set(ALICE_WORDS))


def test_counts_case_sensitive():
    table = count_words(["Word", "word", "word"], capacity=10)
    assert table.search("Word").value == 1
    assert table.search("word").value == 2


def test_counts_grow_small_table():
    table = count_words(ALICE_WORDS, capacity=4)
    assert table.capacity > 4
    assert sum(pair.value for pair in table) == len(ALICE_WORDS)


def test_format_counts_lines():
    table = count_words(["a", "b", "a"], capacity=10)
    text = format_counts(table)
    lines = text.splitlines()
    assert lines[0] == "Recorriendo el mapa:"
    assert lines[1:] == [f"{pair.key}: {pair.value}" for pair in table]
    assert text.endswith("\n")


def test_format_empty():
    assert format_counts(count_words([], capacity=10)) == HEADER + "\n"


def test_main_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == HEADER
    assert len(out) == len(set(ALICE_WORDS)) + 1


def test_main_with_words(capsys):
    assert main(["x", "y", "x"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert sorted(out[1:]) == ["x: 2", "y: 1"]