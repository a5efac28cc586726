# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
"""
Module contains definitions for low-level SGR escape sequences: integer code
registry, emphasis attribute catalog and `SequenceSGR` -- the reduced form of
a set of intentions, ready to be assembled into actual bytes.

.. testsetup:: *

    from easysgr.ansi import SequenceSGR, IntCodes, Attribute, NOOP_SEQ

>>> SequenceSGR(IntCodes.BOLD, IntCodes.RED)
SGR[1;31]
>>> Attribute.BOLD.apply_code, Attribute.BOLD.clear_code
(1, 22)

"""
from __future__ import annotations

import typing as t

from .common import ArgTypeError, ExtendedEnum, Registry

ESCAPE = "\x1b"
INTRODUCER = "["
SEPARATOR = ";"
TERMINATOR = "m"


class IntCodes(Registry[int]):
    """
    SGR param integer codes used by the library.
    """

    RESET = 0  # hard reset code
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    INVERSE = 7
    HIDDEN = 8
    STRIKETHROUGH = 9
    BOLD_DIM_OFF = 22  # there is no separate sequence for disabling either
    ITALIC_OFF = 23    # of BOLD or DIM while keeping the other
    UNDERLINE_OFF = 24
    BLINK_OFF = 25
    INVERSE_OFF = 27
    HIDDEN_OFF = 28
    STRIKETHROUGH_OFF = 29

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    COLOR_EXTENDED = 38
    COLOR_OFF = 39

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47
    BG_COLOR_EXTENDED = 48
    BG_COLOR_OFF = 49

    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    BG_BRIGHT_BLACK = 100
    BG_BRIGHT_RED = 101
    BG_BRIGHT_GREEN = 102
    BG_BRIGHT_YELLOW = 103
    BG_BRIGHT_BLUE = 104
    BG_BRIGHT_MAGENTA = 105
    BG_BRIGHT_CYAN = 106
    BG_BRIGHT_WHITE = 107

    # -- EXTENDED modifiers -------------------------------------------------------

    EXTENDED_MODE_256 = 5
    EXTENDED_MODE_RGB = 2


class Attribute(str, ExtendedEnum):
    """
    Emphasis attributes. Declaration order is the order in which the codes
    are emitted.
    """

    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    INVERSE = "inverse"
    HIDDEN = "hidden"
    STRIKETHROUGH = "strikethrough"

    @property
    def apply_code(self) -> int:
        return _ATTRIBUTE_CODES[self][0]

    @property
    def clear_code(self) -> int:
        return _ATTRIBUTE_CODES[self][1]

    def __str__(self) -> str:
        return self.value


_ATTRIBUTE_CODES: t.Dict[Attribute, t.Tuple[int, int]] = {
    Attribute.BOLD: (IntCodes.BOLD, IntCodes.BOLD_DIM_OFF),
    Attribute.DIM: (IntCodes.DIM, IntCodes.BOLD_DIM_OFF),
    Attribute.ITALIC: (IntCodes.ITALIC, IntCodes.ITALIC_OFF),
    Attribute.UNDERLINE: (IntCodes.UNDERLINE, IntCodes.UNDERLINE_OFF),
    Attribute.BLINK: (IntCodes.BLINK, IntCodes.BLINK_OFF),
    Attribute.INVERSE: (IntCodes.INVERSE, IntCodes.INVERSE_OFF),
    Attribute.HIDDEN: (IntCodes.HIDDEN, IntCodes.HIDDEN_OFF),
    Attribute.STRIKETHROUGH: (IntCodes.STRIKETHROUGH, IntCodes.STRIKETHROUGH_OFF),
}


class SequenceSGR:
    """
    Class representing SGR-type escape sequence with varying amount of parameters.

    `SequenceSGR` with zero params was specifically implemented to
    translate into empty string and not into :kbd:`\\e[m`, which would have
    made sense, but also would be very entangling, as this sequence is
    equivalent of :kbd:`\\e[0m` -- hard reset sequence. The empty-string-sequence
    is predefined as `NOOP_SEQ`.

    It's possible to add of one SGR sequence to another:

    >>> SequenceSGR(31) + SequenceSGR(1) == SequenceSGR(31, 1)
    True

    """

    def __init__(self, *args: str | int | SequenceSGR):
        """
        Create new `SequenceSGR` with specified ``args`` as params.

        Resulting sequence param order is same as an argument order.

        Each sequence param can be specified as:
          - string key (name of any constant defined in `IntCodes`, case-insensitive)
          - integer param value (``IntCodes`` values)
          - existing ``SequenceSGR`` instance (params will be extracted).

        >>> SequenceSGR('yellow', 'bold')
        SGR[33;1]
        >>> SequenceSGR(91, 7)
        SGR[91;7]
        """
        result: t.List[int] = []

        for arg in args:
            if isinstance(arg, SequenceSGR):
                result.extend(arg.params)
            elif isinstance(arg, str):
                result.append(IntCodes.resolve(arg))
            elif isinstance(arg, int):
                if arg < 0:
                    raise ValueError(f"SGR param cannot be negative: {arg}")
                result.append(arg)
            else:
                raise ArgTypeError(type(arg), "args")

        self._params: t.Tuple[int, ...] = tuple(result)

    def assemble(self) -> str:
        """
        Build up actual byte sequence and return as an ASCII-encoded string.
        """
        if len(self._params) == 0:  # NOOP
            return ""
        return ESCAPE + INTRODUCER + self.assemble_partial() + TERMINATOR

    def assemble_partial(self) -> str:
        """
        Return the params joined with a separator, without the escape
        introducer and the terminator.

        >>> SequenceSGR(1, 31).assemble_partial()
        '1;31'
        """
        return SEPARATOR.join(str(param) for param in self._params)

    @property
    def params(self) -> t.List[int]:
        """ Return internal params as array. """
        return list(self._params)

    def __str__(self) -> str:
        return self.assemble()

    def __bool__(self) -> bool:
        return len(self._params) > 0

    def __iter__(self) -> t.Iterator[int]:
        return iter(self._params)

    def __hash__(self) -> int:
        return hash(self._params)

    def __add__(self, other: SequenceSGR) -> SequenceSGR:
        self._ensure_sequence(other)
        return SequenceSGR(self, other)

    def __radd__(self, other: SequenceSGR) -> SequenceSGR:
        return other.__add__(self)

    def __eq__(self, other: SequenceSGR):
        if type(self) != type(other):
            return False
        return self._params == other._params

    def __repr__(self):
        params = self.assemble_partial()
        if len(self._params) == 0:
            params = "~"
        return f"SGR[{params}]"

    @staticmethod
    def _ensure_sequence(subject: t.Any):
        if not isinstance(subject, SequenceSGR):
            raise TypeError(f"Expected SequenceSGR, got {type(subject)}")


NOOP_SEQ = SequenceSGR()
"""
Special sequence in case you *have to* provide one or another SGR, but do 
not want any control sequences to be actually included in the output. 
``NOOP_SEQ.assemble()`` returns empty string, ``NOOP_SEQ.params`` 
returns empty list.

>>> NOOP_SEQ.assemble()
''
>>> NOOP_SEQ.params
[]
"""

RESET_SEQ = SequenceSGR(IntCodes.RESET)
"""
Hard reset sequence, :kbd:`\\e[0m`.
"""
