# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
"""
"Front-end" module of the library: fluent builder of styled strings.

.. testsetup:: *

    from easysgr import StyledText, Color

>>> StyledText("Hi").bold().color(Color.RED)
<StyledText[bold,fg=31](2, "Hi")>

"""
from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass

from .ansi import Attribute
from .color import ColorType
from .common import ArgTypeError
from .style import NOOP_STYLE, SlotType, Style, make_style
from .intention import Intention


@dataclass(frozen=True)
class StyledText:
    """
    Text payload with a set of intentions to apply to it, and raw strings to
    put before and after the payload (custom sequences, for example).

    Every configuration method returns a new instance with one slot
    updated, and leaves all the other ones as they are. Thus, chained calls
    only override the slots they touch explicitly:

        >>> StyledText("text").italic().color("red").color("blue")
        <StyledText[italic,fg=34](4, "text")>

    :param text:    Payload string.
    :param style:   Intentions to apply.
    :param prefix:  String written verbatim right after the SGR sequence.
    :param suffix:  String written verbatim right after the payload.
    """

    text: str = ""
    style: Style = NOOP_STYLE
    prefix: str = ""
    suffix: str = ""

    def __post_init__(self):
        if not isinstance(self.text, str):
            object.__setattr__(self, "text", str(self.text))
        if not isinstance(self.style, Style):
            raise ArgTypeError(type(self.style), "style")

    def _with_style(self, style: Style) -> StyledText:
        return dataclasses.replace(self, style=style)

    def set(self, slot: SlotType | str, intention: Intention) -> StyledText:
        return self._with_style(self.style.set(slot, intention))

    def apply(self, attribute: Attribute | str) -> StyledText:
        return self._with_style(self.style.apply(attribute))

    def clear(self, attribute: Attribute | str) -> StyledText:
        return self._with_style(self.style.clear(attribute))

    def bold(self) -> StyledText:
        return self.apply(Attribute.BOLD)

    def dim(self) -> StyledText:
        return self.apply(Attribute.DIM)

    def italic(self) -> StyledText:
        return self.apply(Attribute.ITALIC)

    def underline(self) -> StyledText:
        return self.apply(Attribute.UNDERLINE)

    def blink(self) -> StyledText:
        return self.apply(Attribute.BLINK)

    def inverse(self) -> StyledText:
        return self.apply(Attribute.INVERSE)

    def hidden(self) -> StyledText:
        return self.apply(Attribute.HIDDEN)

    def strikethrough(self) -> StyledText:
        return self.apply(Attribute.STRIKETHROUGH)

    def color(self, color: str | int | ColorType) -> StyledText:
        """ Set foreground color. """
        return self._with_style(self.style.with_fg(color))

    def background(self, color: str | int | ColorType) -> StyledText:
        return self._with_style(self.style.with_bg(color))

    def default_color(self) -> StyledText:
        """ Reset foreground color to terminal default. """
        return self._with_style(self.style.clear_fg())

    def default_background(self) -> StyledText:
        return self._with_style(self.style.clear_bg())

    def with_style(self, fmt: Style | Attribute | str | int | ColorType) -> StyledText:
        """
        Merge specified style into the current one; see `Style.merge()`.
        """
        return self._with_style(self.style.merge(make_style(fmt)))

    def with_text(self, text: str) -> StyledText:
        return dataclasses.replace(self, text=text)

    def with_prefix(self, prefix: str) -> StyledText:
        return dataclasses.replace(self, prefix=prefix)

    def with_suffix(self, suffix: str) -> StyledText:
        return dataclasses.replace(self, suffix=suffix)

    def merge(self, override: StyledText) -> StyledText:
        """
        Merge ``override`` into current instance. Intentions are merged with
        `Style.merge()` rules; strings of ``override`` replace the current ones
        unless they are empty.
        """
        if not isinstance(override, StyledText):
            raise ArgTypeError(type(override), "override", fn=StyledText.merge)
        return StyledText(
            text=override.text or self.text,
            style=self.style.merge(override.style),
            prefix=override.prefix or self.prefix,
            suffix=override.suffix or self.suffix,
        )

    def __str__(self) -> str:
        from .writer import render

        return render(self)

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        max_sl = 9
        sample = self.text[:max_sl] + ("‥" * (len(self.text) > max_sl))
        return f'<{self.__class__.__name__}[{self.style.repr_attrs()}]({len(self.text)}, "{sample}")>'


class ResetMarker:
    """
    Special marker meaning "emit hard reset code and nothing else". It is not
    equivalent to a `StyledText` with all the slots cleared, as the latter
    results in a sequence of separate clear codes instead of one reset code.
    """

    _instance: ResetMarker = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "RESET"


RESET = ResetMarker()


def merge(base: StyledText, *overrides: StyledText) -> StyledText:
    """
    Merge ``overrides`` into ``base`` one by one; see `StyledText.merge()`.
    """
    return functools.reduce(lambda result, override: result.merge(override), overrides, base)
