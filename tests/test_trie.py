import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.trie import SuffixTrie, Trie, has_palindrome_pair

words_strategy = st.lists(st.text(alphabet="abcd", min_size=1, max_size=6), max_size=15)


@pytest.fixture
def sample_trie():
    trie = Trie()
    for word in ["are", "ben", "no", "note", "node", "notes", "need"]:
        trie.insert(word)
    return trie


def test_search_source_example(sample_trie):
    assert sample_trie.search("are")
    assert not sample_trie.search("ar")


def test_complete_source_example(sample_trie):
    assert sample_trie.complete("no") == ["no", "node", "note", "notes"]


def test_complete_unknown_prefix(sample_trie):
    assert sample_trie.complete("zz") == []


def test_remove_source_example():
    trie = Trie()
    for word in ["are", "ben", "a", "bet"]:
        trie.insert(word)
    assert trie.search("are")
    trie.remove("are")
    assert not trie.search("are")
    assert trie.search("a")
    assert trie.search("ben")


def test_remove_keeps_longer_and_shorter_words(sample_trie):
    sample_trie.remove("note")
    assert "note" not in sample_trie
    assert "notes" in sample_trie
    assert "no" in sample_trie
    sample_trie.remove("notes")
    assert sample_trie.complete("not") == []
    assert sample_trie.complete("no") == ["no", "node"]


def test_invalid_characters_raise():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert("Hello")
    with pytest.raises(ValueError):
        trie.search("a b")


@given(words_strategy)
def test_inserted_words_are_found_and_listed_in_order(words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    assert all(trie.search(word) for word in words)
    assert trie.complete("") == sorted(set(words))


@given(words_strategy)
def test_removing_everything_empties_the_trie(words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    for word in words:
        trie.remove(word)
    assert trie.complete("") == []
    assert not any(word in trie for word in words)


def test_suffix_trie_source_example():
    trie = SuffixTrie()
    for word in ["are", "ben", "a", "bet"]:
        trie.insert(word)
    for pattern in ["are", "ar", "re", "e", "et", "b"]:
        assert trie.search(pattern)


@given(st.lists(st.text(alphabet="abc", min_size=1, max_size=8), min_size=1, max_size=6))
def test_suffix_trie_finds_every_substring(words):
    trie = SuffixTrie()
    for word in words:
        trie.insert(word)
    for word in words:
        for i in range(len(word)):
            for j in range(i + 1, len(word) + 1):
                assert trie.search(word[i:j])
    assert not trie.search("d")


@given(st.text(alphabet="abcd", min_size=1, max_size=8))
def test_palindrome_pair_with_reverse(word):
    assert has_palindrome_pair(["zz" + word, word[::-1] + "zz"]) == has_palindrome_pair(
        [word[::-1] + "zz", "zz" + word]
    )
    assert has_palindrome_pair([word, word[::-1]])


def test_palindrome_pair_absent():
    assert not has_palindrome_pair(["ab", "cd"])