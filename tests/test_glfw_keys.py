import pytest

from hazelengine.glfw_keys import (
    GLFW_KEY_UNKNOWN,
    GLFW_KEYS,
    Action,
    glfw_key_to_hazel_key,
)
from hazelengine.keycodes import HazelKey, MouseButton


def test_action_values_follow_press_order():
    assert Action(0) is Action.RELEASE
    assert Action(1) is Action.PRESS
    assert Action(2) is Action.REPEAT


def test_every_engine_key_is_reachable_exactly_once():
    values = list(GLFW_KEYS.values())
    assert len(set(values)) == len(values)
    assert set(values) == set(HazelKey) - {HazelKey.NONE}


def test_mouse_buttons_keep_their_numbers():
    for button in MouseButton:
        assert int(glfw_key_to_hazel_key(int(button))) == int(button)


@pytest.mark.parametrize(
    "first,last",
    [(ord("0"), ord("9")), (ord("A"), ord("Z"))],
)
def test_ascii_keys_map_to_same_code(first, last):
    for code in range(first, last + 1):
        key = glfw_key_to_hazel_key(code)
        assert int(key) == code
        assert str(key) == chr(code)


def test_space_key():
    assert glfw_key_to_hazel_key(ord(" ")) is HazelKey.Space


def test_function_keys_are_consecutive():
    f1_code = next(code for code, key in GLFW_KEYS.items() if key is HazelKey.F1)
    for offset in range(12):
        assert glfw_key_to_hazel_key(f1_code + offset).name == f"F{offset + 1}"


def test_numpad_digits_are_consecutive():
    kp0 = next(code for code, key in GLFW_KEYS.items() if key is HazelKey.Numpad0)
    for offset in range(10):
        assert glfw_key_to_hazel_key(kp0 + offset).name == f"Numpad{offset}"


def test_unknown_code_gives_none_and_warns(capsys):
    assert glfw_key_to_hazel_key(GLFW_KEY_UNKNOWN) is HazelKey.NONE
    out = capsys.readouterr().out
    assert f"Keycode {GLFW_KEY_UNKNOWN} in GLFW is not mapped in HazelKey!" in out


def test_unmapped_large_code_gives_none(capsys):
    assert glfw_key_to_hazel_key(100000) is HazelKey.NONE
    assert "[warning] Hazel:" in capsys.readouterr().out


def test_table_is_read_only():
    with pytest.raises(TypeError):
        GLFW_KEYS[12345] = HazelKey.A  # type: ignore[index]
    assert glfw_key_to_hazel_key(12345) is HazelKey.NONE