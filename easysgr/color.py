# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
"""
Color catalog. Named colors are a closed enumeration mapped to their codes
with a lookup table; extended colors (256-indexed and RGB) carry their own
components.

.. testsetup:: *

    from easysgr.color import *

>>> color_codes(Color.RED)
(31,)
>>> color_codes(Color.BRIGHT_BLUE, bg=True)
(104,)
>>> color_codes(ColorRGB(255, 51, 0))
(38, 2, 255, 51, 0)

"""
from __future__ import annotations

import re
import typing as t
from dataclasses import dataclass

from .ansi import IntCodes
from .common import ArgTypeError, ExtendedEnum


class ColorSlot(str, ExtendedEnum):
    """
    Color slots of a style. The values are the names of corresponding
    `Style` fields.
    """

    FOREGROUND = "fg"
    BACKGROUND = "bg"

    def __str__(self) -> str:
        return self.value


class Color(str, ExtendedEnum):
    """
    16 basic colors: 8 standard and 8 bright (high intensity) ones.
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"

    def __str__(self) -> str:
        return self.value


# (foreground, background)
_COLOR_CODES: t.Dict[Color, t.Tuple[int, int]] = {
    Color.BLACK: (IntCodes.BLACK, IntCodes.BG_BLACK),
    Color.RED: (IntCodes.RED, IntCodes.BG_RED),
    Color.GREEN: (IntCodes.GREEN, IntCodes.BG_GREEN),
    Color.YELLOW: (IntCodes.YELLOW, IntCodes.BG_YELLOW),
    Color.BLUE: (IntCodes.BLUE, IntCodes.BG_BLUE),
    Color.MAGENTA: (IntCodes.MAGENTA, IntCodes.BG_MAGENTA),
    Color.CYAN: (IntCodes.CYAN, IntCodes.BG_CYAN),
    Color.WHITE: (IntCodes.WHITE, IntCodes.BG_WHITE),
    Color.BRIGHT_BLACK: (IntCodes.BRIGHT_BLACK, IntCodes.BG_BRIGHT_BLACK),
    Color.BRIGHT_RED: (IntCodes.BRIGHT_RED, IntCodes.BG_BRIGHT_RED),
    Color.BRIGHT_GREEN: (IntCodes.BRIGHT_GREEN, IntCodes.BG_BRIGHT_GREEN),
    Color.BRIGHT_YELLOW: (IntCodes.BRIGHT_YELLOW, IntCodes.BG_BRIGHT_YELLOW),
    Color.BRIGHT_BLUE: (IntCodes.BRIGHT_BLUE, IntCodes.BG_BRIGHT_BLUE),
    Color.BRIGHT_MAGENTA: (IntCodes.BRIGHT_MAGENTA, IntCodes.BG_BRIGHT_MAGENTA),
    Color.BRIGHT_CYAN: (IntCodes.BRIGHT_CYAN, IntCodes.BG_BRIGHT_CYAN),
    Color.BRIGHT_WHITE: (IntCodes.BRIGHT_WHITE, IntCodes.BG_BRIGHT_WHITE),
}


def _validate_extended_color(value: int):
    if not isinstance(value, int) or value < 0 or value > 255:
        raise ValueError(f"Invalid color value: expected range [0-255], got: {value}")


@dataclass(frozen=True)
class ColorIndexed256:
    """
    Color from the xterm 256-color palette, rendered as :kbd:`38;5;n`
    (or :kbd:`48;5;n` for background).
    """

    index: int

    def __post_init__(self):
        _validate_extended_color(self.index)

    def __str__(self) -> str:
        return f"X{self.index}"


@dataclass(frozen=True)
class ColorRGB:
    """
    True Color (16M) value, rendered as :kbd:`38;2;r;g;b`. Valid values for
    *r*, *g* and *b* are in range [0; 255].
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        [_validate_extended_color(c) for c in (self.r, self.g, self.b)]

    @classmethod
    def from_hex(cls, value: str | int) -> ColorRGB:
        """
        Create a color from ``#RRGGBB``, ``#RGB`` (short form) or an *int* in
        [0; 0xFFFFFF] range.

        >>> ColorRGB.from_hex('#ff3300')
        ColorRGB(r=255, g=51, b=0)
        >>> ColorRGB.from_hex('#666')
        ColorRGB(r=102, g=102, b=102)
        """
        if isinstance(value, int):
            if value < 0 or value > 0xFFFFFF:
                raise ValueError(f"Invalid RGB value: expected range [0-0xFFFFFF], got: {value:#x}")
            return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

        match = _HEX_REGEX.fullmatch(value.strip())
        if not match:
            raise ValueError(f"Invalid RGB hex string: {value!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        return cls.from_hex(int(digits, 16))

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


ColorType = t.Union[Color, ColorIndexed256, ColorRGB]

_HEX_REGEX = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")
_NAME_SPLIT_REGEX = re.compile(r"[\W_]+|(?<=[a-z])(?=[A-Z])")


def color_codes(color: ColorType, bg: bool = False) -> t.Tuple[int, ...]:
    """
    Return SGR params that set foreground (or background) to ``color``.

    :param color: Color to set.
    :param bg:    Set to *True* to get background color codes.
    """
    if isinstance(color, Color):
        return (_COLOR_CODES[color][1 if bg else 0],)

    key_code = IntCodes.BG_COLOR_EXTENDED if bg else IntCodes.COLOR_EXTENDED
    if isinstance(color, ColorIndexed256):
        return key_code, IntCodes.EXTENDED_MODE_256, color.index
    if isinstance(color, ColorRGB):
        return key_code, IntCodes.EXTENDED_MODE_RGB, color.r, color.g, color.b
    raise ArgTypeError(type(color), "color", fn=color_codes)


def default_color_code(bg: bool = False) -> int:
    """
    Return the code resetting the slot to terminal default color. It's the
    same for every color.
    """
    return IntCodes.BG_COLOR_OFF if bg else IntCodes.COLOR_OFF


def resolve_color(value: str | int | ColorType) -> ColorType:
    """
    Make a color out of a color descriptor:

        - `Color`, `ColorIndexed256` or `ColorRGB` instance is returned as is;
        - *str* starting with a "#" is parsed as RGB hex value, see
          `ColorRGB.from_hex()`;
        - *str* of digits or *int* is a 256-color palette index;
        - other *str* is treated as a color name, case-insensitive, with
          words separated by spaces, dashes, underscores or case changes.

    >>> resolve_color('bright-red')
    <Color.BRIGHT_RED: 'bright_red'>
    >>> resolve_color(208)
    ColorIndexed256(index=208)

    :raises LookupError: if there is no color with the specified name.
    """
    if isinstance(value, (Color, ColorIndexed256, ColorRGB)):
        return value
    if isinstance(value, bool):
        raise ArgTypeError(type(value), "value", fn=resolve_color)
    if isinstance(value, int):
        return ColorIndexed256(value)
    if isinstance(value, str):
        if value.strip().startswith("#"):
            return ColorRGB.from_hex(value)
        if value.strip().isdigit():
            return ColorIndexed256(int(value))
        tokens = [tok for tok in _NAME_SPLIT_REGEX.split(value.strip()) if tok]
        return Color.resolve("_".join(tokens).lower())
    raise ArgTypeError(type(value), "value", fn=resolve_color)
