"""Engine key and mouse-button codes and their display names."""

from __future__ import annotations

import enum

_UNKNOWN = "UnknownKey"


class HazelKey(enum.IntEnum):
    """Platform-independent key codes used by input events."""

    NONE = -1

    # Mouse buttons
    MouseLeft = 0
    MouseRight = 1
    MouseMiddle = 2
    MouseButton4 = 3
    MouseButton5 = 4

    # Number keys (top row)
    Digit0 = 48
    Digit1 = 49
    Digit2 = 50
    Digit3 = 51
    Digit4 = 52
    Digit5 = 53
    Digit6 = 54
    Digit7 = 55
    Digit8 = 56
    Digit9 = 57

    # Alphabet keys
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90

    # Function keys
    F1 = 91
    F2 = 92
    F3 = 93
    F4 = 94
    F5 = 95
    F6 = 96
    F7 = 97
    F8 = 98
    F9 = 99
    F10 = 100
    F11 = 101
    F12 = 102

    # Numpad keys
    Numpad0 = 103
    Numpad1 = 104
    Numpad2 = 105
    Numpad3 = 106
    Numpad4 = 107
    Numpad5 = 108
    Numpad6 = 109
    Numpad7 = 110
    Numpad8 = 111
    Numpad9 = 112
    NumpadAdd = 113
    NumpadSubtract = 114
    NumpadMultiply = 115
    NumpadDivide = 116
    NumpadEnter = 117
    NumpadDecimal = 118

    # Control keys
    Tab = 119
    Enter = 120
    LeftShift = 121
    RightShift = 122
    LeftControl = 123
    RightControl = 124
    LeftAlt = 125
    RightAlt = 126
    LeftSuper = 127
    RightSuper = 128
    Space = 129
    CapsLock = 130
    Escape = 131
    Backspace = 132
    PageUp = 133
    PageDown = 134
    Home = 135
    End = 136
    Insert = 137
    Delete = 138
    LeftArrow = 139
    UpArrow = 140
    RightArrow = 141
    DownArrow = 142
    NumLock = 143
    ScrollLock = 144

    # Additional keyboard keys
    Apostrophe = 145
    Comma = 146
    Minus = 147
    Period = 148
    Slash = 149
    Semicolon = 150
    Equal = 151
    LeftBracket = 152
    Backslash = 153
    RightBracket = 154
    GraveAccent = 155

    def __str__(self) -> str:
        return key_name(self)

    def __format__(self, format_spec: str) -> str:
        return format(key_name(self), format_spec)


class MouseButton(enum.IntEnum):
    """Mouse buttons, numbered like the mouse entries of HazelKey."""

    Left = 0
    Right = 1
    Middle = 2
    Button4 = 3
    Button5 = 4


_DIGITS = frozenset(
    {
        HazelKey.Digit0,
        HazelKey.Digit1,
        HazelKey.Digit2,
        HazelKey.Digit3,
        HazelKey.Digit4,
        HazelKey.Digit5,
        HazelKey.Digit6,
        HazelKey.Digit7,
        HazelKey.Digit8,
        HazelKey.Digit9,
    }
)


def key_name(key: HazelKey | int) -> str:
    """Return the display name of a key; unknown codes give 'UnknownKey'."""
    try:
        member = HazelKey(key)
    except ValueError:
        return _UNKNOWN
    if member is HazelKey.NONE:
        return _UNKNOWN
    if member in _DIGITS:
        return chr(int(member))
    return member.name