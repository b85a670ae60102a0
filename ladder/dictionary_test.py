from inline_snapshot import snapshot

from ladder.dictionary import (
    is_ladder_word,
    load_default_words,
    load_words,
    normalize_word,
    read_words,
)


def test_is_ladder_word():
    assert is_ladder_word("cold")
    assert is_ladder_word("cold", 4)
    assert not is_ladder_word("cold", 5)
    assert not is_ladder_word("")
    assert not is_ladder_word("Cold")
    assert not is_ladder_word("x-ray")
    assert not is_ladder_word("naïf")


def test_normalize_word():
    assert normalize_word("  Cold\n") == "cold"
    assert normalize_word("WARM") == "warm"


def test_read_words():
    assert read_words(["cold\n", "COLD\n", "cord", "", "card"]) == ["cold", "cord", "card"]
    assert read_words(["cold", "colder", "ab"], 4) == ["cold"]
    assert read_words([]) == []


def test_load_file():
    assert load_words("testdata/ladder-words-4.txt", 4) == snapshot(
        ["cold", "cord", "card", "ward", "warm", "wood", "word", "worm", "abcd"]
    )
    assert load_words("testdata/ladder-words-4.txt") == snapshot(
        ["cold", "cord", "card", "ward", "warm", "wood", "zz", "word", "worm", "abcd"]
    )


def test_load_default():
    words = load_default_words()
    assert len(words) == len(set(words))
    assert all(len(w) == 4 for w in words)
    for word in ("cold", "cord", "card", "ward", "warm", "head", "tail"):
        assert word in words
    assert load_default_words(5) == []
