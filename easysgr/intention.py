# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
from __future__ import annotations

import typing as t
from dataclasses import dataclass

from .common import ExtendedEnum, LogicError


class Intent(str, ExtendedEnum):
    UNCHANGED = "unchanged"
    """ Leave the attribute as it is in the terminal. """
    APPLY = "apply"
    """ Turn the attribute on. """
    CLEAR = "clear"
    """ Turn the attribute off with its dedicated code. """


@dataclass(frozen=True)
class Intention:
    """
    Instruction for one attribute: leave as is, turn on or turn off, along
    with the SGR params to emit. *UNCHANGED* carries no params, the other two
    always carry at least one.

    >>> Intention.apply(1)
    <Apply[1]>
    >>> Intention.apply(1).merge(Intention.clear(22))
    <Clear[22]>
    """

    intent: Intent = Intent.UNCHANGED
    codes: t.Tuple[int, ...] = ()

    def __post_init__(self):
        if self.intent is Intent.UNCHANGED and self.codes:
            raise LogicError(f"Unchanged intention cannot carry codes: {self.codes}")
        if self.intent is not Intent.UNCHANGED and not self.codes:
            raise LogicError(f"{self.intent.name} intention requires at least one code")

    @classmethod
    def apply(cls, *codes: int) -> Intention:
        return cls(Intent.APPLY, tuple(codes))

    @classmethod
    def clear(cls, *codes: int) -> Intention:
        return cls(Intent.CLEAR, tuple(codes))

    @property
    def is_unchanged(self) -> bool:
        return self.intent is Intent.UNCHANGED

    @property
    def is_apply(self) -> bool:
        return self.intent is Intent.APPLY

    @property
    def is_clear(self) -> bool:
        return self.intent is Intent.CLEAR

    def merge(self, override: Intention) -> Intention:
        """
        Return ``override`` unless it is *UNCHANGED*, in which case keep self.
        """
        if override.is_unchanged:
            return self
        return override

    def __bool__(self) -> bool:
        return not self.is_unchanged

    def __repr__(self) -> str:
        if self.is_unchanged:
            return "<Unchanged>"
        params = ";".join(str(c) for c in self.codes)
        return f"<{self.intent.name.capitalize()}[{params}]>"


NOOP_INTENTION = Intention()
""" Intention that changes nothing. """
