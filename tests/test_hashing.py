import pytest

from algodrills.hashing import FrequencyTable, character_counts, number_counts

TEXTS = ["hello world", "aaaa", "abcabcab", "Mississippi"]


@pytest.mark.parametrize("text", TEXTS)
def test_character_counts_match_str_count(text):
    table = character_counts(text)
    for ch in set(text):
        assert table.count(ch) == text.count(ch)


@pytest.mark.parametrize("text", TEXTS)
def test_character_total_is_text_length(text):
    assert len(character_counts(text)) == len(text)


def test_absent_character_counts_zero():
    table = character_counts("abc")
    assert table.count("z") == 0
    assert "z" not in table
    assert "a" in table


def test_number_counts_on_intro_array():
    data = [1, 2, 3, 3, 1]
    table = number_counts(data)
    for value in range(0, 6):
        assert table.count(value) == data.count(value)


def test_batch_queries_keep_order():
    data = [4, 4, 7, 1, 4, 7]
    table = number_counts(data)
    queries = [7, 9, 4, 1, 4]
    assert table.counts(queries) == [data.count(q) for q in queries]


def test_empty_table():
    table = FrequencyTable([])
    assert len(table) == 0
    assert table.counts(["x", 0]) == [0, 0]


def test_table_accepts_generator():
    data = [2, 2, 5]
    table = FrequencyTable(x for x in data)
    assert table.count(2) == data.count(2)
    assert len(table) == len(data)