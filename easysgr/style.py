# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
"""
Intention sets and the merge & reduction rules.
"""
from __future__ import annotations

import dataclasses
import functools
import itertools
import typing as t
from dataclasses import dataclass

from .ansi import Attribute, SequenceSGR
from .color import ColorSlot, ColorType, color_codes, default_color_code, resolve_color
from .common import ArgTypeError
from .intention import Intention, NOOP_INTENTION

SlotType = t.Union[Attribute, ColorSlot]

SLOTS: t.Tuple[SlotType, ...] = (*Attribute, *ColorSlot)
""" All the style slots in the order of code emission. """


def _resolve_slot(slot: SlotType | str) -> SlotType:
    if isinstance(slot, (Attribute, ColorSlot)):
        return slot
    if isinstance(slot, str):
        try:
            return Attribute.resolve(slot)
        except LookupError:
            return ColorSlot.resolve(slot)
    raise ArgTypeError(type(slot), "slot", fn=_resolve_slot)


@dataclass(frozen=True)
class Style:
    """
    Set of intentions, one per emphasis attribute plus foreground and
    background color slots. Immutable; all the setters return a new
    instance.

        >>> Style.of(Attribute.BOLD, fg='red')
        <Style[bold,fg=31]>
        >>> Style().clear(Attribute.ITALIC).with_bg(208)
        <Style[-italic,bg=48;5;208]>

    Merging works this way (see `merge()`):

    .. code-block ::
        :caption: Merging intentions

                    BASE(SELF)  OVERRIDE    RESULT
                     +-------+   +-------+   +-------+
            ATTR-1   | Apply ==Ø | Clear --->| Clear |  OVERRIDE val is in priority
            ATTR-2   | Unchg |   | Apply --->| Apply |  OVERRIDE val is in priority
            ATTR-3   | Apply ====| Unchg |==>| Apply |  no OVERRIDE val, keeping BASE val
            ATTR-4   | Unchg |   | Unchg |   | Unchg |  no vals, keeping unchanged
                     +-------+   +-------+   +-------+

    """

    bold: Intention = NOOP_INTENTION
    dim: Intention = NOOP_INTENTION
    italic: Intention = NOOP_INTENTION
    underline: Intention = NOOP_INTENTION
    blink: Intention = NOOP_INTENTION
    inverse: Intention = NOOP_INTENTION
    hidden: Intention = NOOP_INTENTION
    strikethrough: Intention = NOOP_INTENTION
    fg: Intention = NOOP_INTENTION
    bg: Intention = NOOP_INTENTION

    @classmethod
    def of(
        cls,
        *attributes: Attribute | str,
        fg: str | int | ColorType = None,
        bg: str | int | ColorType = None,
    ) -> Style:
        """
        Shortcut constructor: apply all the ``attributes`` and set the colors,
        if specified.
        """
        style = functools.reduce(lambda s, a: s.apply(a), attributes, cls())
        if fg is not None:
            style = style.with_fg(fg)
        if bg is not None:
            style = style.with_bg(bg)
        return style

    def get(self, slot: SlotType | str) -> Intention:
        return getattr(self, _resolve_slot(slot).value)

    def set(self, slot: SlotType | str, intention: Intention) -> Style:
        """
        Return a copy of the style with the intention for ``slot`` replaced.
        """
        if not isinstance(intention, Intention):
            raise ArgTypeError(type(intention), "intention", fn=Style.set)
        return dataclasses.replace(self, **{_resolve_slot(slot).value: intention})

    def apply(self, attribute: Attribute | str) -> Style:
        attribute = Attribute.resolve(attribute)
        return self.set(attribute, Intention.apply(attribute.apply_code))

    def clear(self, attribute: Attribute | str) -> Style:
        attribute = Attribute.resolve(attribute)
        return self.set(attribute, Intention.clear(attribute.clear_code))

    def unchanged(self, slot: SlotType | str) -> Style:
        return self.set(slot, NOOP_INTENTION)

    def with_fg(self, color: str | int | ColorType) -> Style:
        return self.set(ColorSlot.FOREGROUND, Intention.apply(*color_codes(resolve_color(color))))

    def with_bg(self, color: str | int | ColorType) -> Style:
        return self.set(ColorSlot.BACKGROUND, Intention.apply(*color_codes(resolve_color(color), True)))

    def clear_fg(self) -> Style:
        return self.set(ColorSlot.FOREGROUND, Intention.clear(default_color_code()))

    def clear_bg(self) -> Style:
        return self.set(ColorSlot.BACKGROUND, Intention.clear(default_color_code(True)))

    def merge(self, override: Style) -> Style:
        """
        Merge current style with specified ``override`` style: for every slot
        ``override`` intention is in priority, unless it is *UNCHANGED*, in which
        case the value of ``self`` is kept. The operation is associative and
        `NOOP_STYLE` is its identity, but it is not commutative.

        :param override: Style to merge the intentions with.
        :return: New style.
        """
        if not isinstance(override, Style):
            raise ArgTypeError(type(override), "override", fn=Style.merge)
        return dataclasses.replace(
            self, **{slot.value: self.get(slot).merge(override.get(slot)) for slot in SLOTS}
        )

    def closing(self) -> Style:
        """
        Compose the style that terminates the attributes applied by this one
        while keeping the others (*soft* reset): every *APPLY* becomes
        corresponding *CLEAR*, everything else becomes *UNCHANGED*.

        >>> Style.of('bold', 'underline', fg='blue').closing()
        <Style[-bold,-underline,-fg]>
        """
        result = NOOP_STYLE
        for attribute in Attribute:
            if self.get(attribute).is_apply:
                result = result.clear(attribute)
        if self.fg.is_apply:
            result = result.clear_fg()
        if self.bg.is_apply:
            result = result.clear_bg()
        return result

    def reduce(self) -> SequenceSGR:
        """
        Convert the intentions into a single SGR sequence. Codes are emitted in
        the fixed slot order (emphasis attributes, foreground, background)
        regardless of the order the intentions were set in; *UNCHANGED* slots
        contribute nothing, and a code group that was already emitted is not
        repeated (e.g. clearing both bold and dim yields one `22`).

        >>> Style.of(fg='red').apply('bold').reduce()
        SGR[1;31]
        >>> Style().clear('bold').clear('dim').reduce()
        SGR[22]
        """
        emitted: t.List[t.Tuple[int, ...]] = []
        for slot in SLOTS:
            intention = self.get(slot)
            if intention.is_unchanged or intention.codes in emitted:
                continue
            emitted.append(intention.codes)
        return SequenceSGR(*itertools.chain.from_iterable(emitted))

    def __bool__(self) -> bool:
        return any(self.get(slot) for slot in SLOTS)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}[{self.repr_attrs()}]>"

    def repr_attrs(self) -> str:
        props_set = []
        for slot in SLOTS:
            intention = self.get(slot)
            if intention.is_clear:
                props_set.append(f"-{slot}")
            elif intention.is_apply and isinstance(slot, ColorSlot):
                props_set.append(f"{slot}=" + ";".join(str(c) for c in intention.codes))
            elif intention.is_apply:
                props_set.append(f"{slot}")
        return ",".join(props_set) or "NOP"


NOOP_STYLE = Style()
""" Style that changes nothing; identity element of `merge_styles()`. """


class Styles:
    """
    Some ready-to-use styles.
    """

    WARNING = Style.of(fg="yellow")
    WARNING_LABEL = Style.of("bold", fg="yellow")
    ERROR = Style.of(fg="red")
    ERROR_LABEL = Style.of("bold", fg="red")
    ACCENT = Style.of(fg="bright_white")


def make_style(fmt: Style | Attribute | str | int | ColorType = None) -> Style:
    """
    General `Style` constructor. Accepts a variety of argument types:

        - `Style`: existing style instance, returned as is;
        - `Attribute` or attribute name: style with this attribute applied;
        - color or color descriptor (see `resolve_color()`): style with the
          only slot set being `fg`;
        - *None*: `NOOP_STYLE`.
    """
    if fmt is None:
        return NOOP_STYLE
    if isinstance(fmt, Style):
        return fmt
    if isinstance(fmt, Attribute):
        return NOOP_STYLE.apply(fmt)
    if isinstance(fmt, str):
        try:
            return NOOP_STYLE.apply(Attribute.resolve(fmt))
        except LookupError:
            return NOOP_STYLE.with_fg(fmt)
    return NOOP_STYLE.with_fg(fmt)


def merge_styles(base: Style = NOOP_STYLE, *overrides: Style) -> Style:
    """
    Merge ``overrides`` into ``base`` one by one, in the order they are
    iterated. The later a style is in the list, the higher its priority.

    >>> merge_styles(Style.of('italic', fg='red'), Style.of(fg='blue'))
    <Style[italic,fg=34]>
    """
    return functools.reduce(lambda result, override: result.merge(override), overrides, base)
