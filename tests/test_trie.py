import pytest

from algorithms.step import StepKind
from algorithms.trie_ops import trie_insert, trie_search, trie_starts_with
from structures import InvalidInput, Trie


@pytest.fixture
def trie():
    t = Trie()
    t.insert("cat")
    t.insert("car")
    return t


def test_prefix_of_word_is_incomplete_not_found(trie):
    final = list(trie_search(trie, "ca"))[-1]
    assert final.kind is StepKind.INCOMPLETE
    assert final.description == 'Path exists but "ca" is not a complete word'
    assert not trie.contains("ca")


def test_starts_with_reports_prefix_found(trie):
    final = list(trie_starts_with(trie, "ca"))[-1]
    assert final.kind is StepKind.FOUND
    assert final.output == 'PREFIX FOUND: Words starting with "ca" exist'


def test_search_found_and_missing(trie):
    assert list(trie_search(trie, "car"))[-1].kind is StepKind.FOUND
    missing = list(trie_search(trie, "cow"))[-1]
    assert missing.kind is StepKind.NOT_FOUND
    assert missing.description == "Character 'o' not found. Word \"cow\" does not exist"


def test_lookup_is_case_insensitive(trie):
    assert list(trie_search(trie, "CAT"))[-1].kind is StepKind.FOUND
    m = trie.insert("DOG")
    assert m.word == "dog"
    assert trie.contains("dog")


def test_insert_narrates_created_and_shared_nodes():
    t = Trie()
    t.insert("cat")
    m = t.insert("car")
    descriptions = [s.description for s in trie_insert(t, m)]
    assert descriptions == [
        'Inserting word "car"',
        "Looking for character 'c' in node 'ROOT'",
        "Character 'c' found, moving to child node",
        "Looking for character 'a' in node 'c'",
        "Character 'a' found, moving to child node",
        "Looking for character 'r' in node 'a'",
        "Character 'r' not found, creating new node",
        'Marking end of word "car"',
        'Successfully inserted "car"',
    ]
    assert len(m.created) == 1


def test_end_of_word_flags_match_inserted_words():
    t = Trie()
    t.load_sample()
    assert t.words() == sorted(Trie.SAMPLE_WORDS)
    flagged = sum(1 for n in t.nodes.values() if n.is_end_of_word)
    assert flagged == len(Trie.SAMPLE_WORDS)


def test_empty_word_rejected_before_mutation():
    t = Trie()
    with pytest.raises(InvalidInput):
        t.insert("   ")
    assert len(t) == 0
