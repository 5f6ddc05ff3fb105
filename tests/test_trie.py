import pytest

from trie import Trie, TrieAllocationError, TrieDestroyedError, TrieNode, normalize_word


def _scenario_trie():
    t = Trie()
    t.insert("sus", "suspicious behavior")
    t.insert("yeet", "to throw something forcefully")
    t.insert("simp", "someone who...")
    t.insert("sus", "updated: still suspicious")
    t.insert("savage", "cool...")
    t.insert("ship", "to support...")
    return t


def test_normalize_word():
    assert normalize_word("SuS") == "sus"
    assert normalize_word("s-u-s!") == "sus"
    assert normalize_word("don't 42") == "dont"
    assert normalize_word("123") == ""
    assert normalize_word("café") == "caf"


def test_scenario():
    t = _scenario_trie()
    assert t.search("sus") == "updated: still suspicious"
    assert t.search("yeet") == "to throw something forcefully"
    assert t.search("unknown") is None
    assert t.prefix_search("s") == [
        ("savage", "cool..."),
        ("ship", "to support..."),
        ("simp", "someone who..."),
        ("sus", "updated: still suspicious"),
    ]
    assert t.prefix_search("z") == []
    words = [w for w, _ in t.list_all()]
    assert words == ["savage", "ship", "simp", "sus", "yeet"]
    assert len(t) == 5


def test_round_trip_and_overwrite():
    t = Trie()
    t.insert("cat", "a small feline")
    assert t.search("cat") == "a small feline"
    t.insert("CAT", "replaced")
    assert t.search("cat") == "replaced"
    assert len(t) == 1


def test_case_and_character_folding():
    t = _scenario_trie()
    expected = t.search("sus")
    assert t.search("SUS") == expected
    assert t.search("Sus") == expected
    assert t.search("s-u-s") == expected
    assert "S.U.S" in t


def test_prefix_node_without_description_is_not_found():
    t = Trie()
    t.insert("card", "a piece of stiff paper")
    assert t.search("car") is None
    assert t.search("cards") is None
    assert "car" not in t


def test_prefix_search_includes_prefix_word_and_full_words():
    t = Trie()
    t.insert_many([("car", "vehicle"), ("card", "paper"), ("cart", "wagon"), ("cat", "pet")])
    assert t.prefix_search("car") == [("car", "vehicle"), ("card", "paper"), ("cart", "wagon")]
    assert t.prefix_search("C-A") == t.prefix_search("ca")
    assert t.prefix_search("cars") == []


def test_prefix_completeness():
    words = ["a", "ab", "abc", "abd", "b", "ba", "zz", "zza"]
    t = Trie()
    t.insert_many((w, w.upper()) for w in words)
    for prefix in ["", "a", "ab", "abc", "b", "z", "zz", "q"]:
        got = [w for w, _ in t.prefix_search(prefix)]
        assert got == sorted(w for w in words if w.startswith(prefix))


def test_list_all_is_strictly_ascending():
    t = Trie()
    for w in ["zebra", "apple", "app", "application", "b", "banana", "ba", "apples"]:
        t.insert(w, "x")
    words = [w for w, _ in t.list_all()]
    assert words == sorted(words)
    assert len(set(words)) == len(words)


def test_empty_trie():
    t = Trie()
    assert t.list_all() == []
    assert t.search("anything") is None
    assert t.prefix_search("a") == []
    assert len(t) == 0


def test_empty_key_maps_to_root():
    t = Trie()
    t.insert("word", "w")
    assert t.search("") is None
    t.insert("123", "root description")
    assert t.search("") == "root description"
    assert t.list_all()[0] == ("", "root description")
    assert t.prefix_search("w") == [("word", "w")]


def test_very_long_word_is_not_limited():
    long_word = "a" * 5000 + "b"
    t = Trie()
    t.insert(long_word, "long")
    t.insert("a" * 150, "shorter")
    assert t.search(long_word) == "long"
    assert t.prefix_search("a" * 150) == [("a" * 150, "shorter"), (long_word, "long")]
    t.destroy()


def test_destroy_releases_nodes_and_blocks_further_use():
    t = _scenario_trie()
    root = t.root
    t.destroy()
    assert root.children == [None] * 26
    assert root.description is None
    with pytest.raises(TrieDestroyedError):
        len(t)
    with pytest.raises(TrieDestroyedError):
        t.search("sus")
    with pytest.raises(TrieDestroyedError):
        t.insert("sus", "again")
    with pytest.raises(TrieDestroyedError):
        t.list_all()
    with pytest.raises(TrieDestroyedError):
        t.insert_many([])
    with pytest.raises(TrieDestroyedError):
        "sus" in t
    t.destroy()


def test_destroy_empty_trie():
    t = Trie()
    t.destroy()
    assert t.root is None


def test_allocation_failure_is_reported(monkeypatch):
    def failing_init(self):
        raise MemoryError()

    t = Trie()
    monkeypatch.setattr(TrieNode, "__init__", failing_init)
    with pytest.raises(TrieAllocationError):
        t.insert("new", "word")
    assert len(t) == 0


def test_insert_rejects_non_string_description():
    t = Trie()
    with pytest.raises(TypeError):
        t.insert("ghost", None)
    with pytest.raises(TypeError):
        t.insert("ghost", 42)
    assert t.search("ghost") is None
    assert t.list_all() == []
    assert len(t) == 0
