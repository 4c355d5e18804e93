import pytest

from quizline.keys import Key, KeyCode, KeyModifiers, char_keys_from_str


def test_char_builds_character_key_without_modifiers():
    key = Key.char("a")
    assert key.code is KeyCode.CHAR
    assert key.character == "a"
    assert key.modifiers == KeyModifiers.NONE


def test_char_keeps_modifiers():
    key = Key.char("c", KeyModifiers.CONTROL)
    assert KeyModifiers.CONTROL in key.modifiers
    assert key == Key(KeyCode.CHAR, KeyModifiers.CONTROL, "c")


def test_char_keys_from_str_round_trips():
    keys = char_keys_from_str("yes")
    assert [k.character for k in keys] == ["y", "e", "s"]
    assert all(k.modifiers == KeyModifiers.NONE for k in keys)
    assert "".join(k.character for k in keys) == "yes"


def test_char_keys_from_empty_string():
    assert char_keys_from_str("") == []


def test_char_key_requires_single_character():
    with pytest.raises(ValueError):
        Key.char("ab")
    with pytest.raises(ValueError):
        Key(KeyCode.CHAR)


def test_non_char_key_rejects_character():
    with pytest.raises(ValueError):
        Key(KeyCode.ENTER, character="x")


def test_keys_compare_by_value():
    assert Key(KeyCode.LEFT, KeyModifiers.CONTROL) == Key(KeyCode.LEFT, KeyModifiers.CONTROL)
    assert Key(KeyCode.LEFT) == Key(KeyCode.LEFT, KeyModifiers.NONE)
    assert len({Key(KeyCode.HOME), Key(KeyCode.HOME)}) == 1