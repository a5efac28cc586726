# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
from __future__ import annotations

import enum
import inspect
import logging
import typing as t

logger = logging.getLogger(__package__)
logger.addHandler(logging.NullHandler())

T = t.TypeVar("T")

LOG_FORMAT = "[%(levelname)5.5s][%(name)s.%(module)s] %(message)s"


class ExtendedEnum(enum.Enum):
    @classmethod
    def list(cls):
        return list(map(lambda c: c.value, cls))

    @classmethod
    def dict(cls):
        return dict(map(lambda c: (c, c.value), cls))

    @classmethod
    def resolve(cls, value: str | ExtendedEnum):
        """
        Find the member by its value or by its name, case-insensitive.

        :raises LookupError: if nothing matches.
        """
        if isinstance(value, cls):
            return value
        for k, v in cls.dict().items():
            if v == value:
                return k
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise LookupError(f"Invalid {cls.__name__} value: {value!r}") from None


class Registry(t.Generic[T]):
    """
    Collection of named constants with case-insensitive lookup by name.
    """

    @classmethod
    def resolve(cls, name: str) -> T:
        key = name.upper()
        if not key.startswith("_") and hasattr(cls, key):
            return getattr(cls, key)
        raise LookupError(f"Name '{name}' is not registered in {cls.__name__}")

    @classmethod
    def names(cls) -> t.List[str]:
        return [k for k in vars(cls) if k.isupper() and not k.startswith("_")]


class LogicError(Exception):
    pass


class ArgTypeError(TypeError):
    """ """

    def __init__(self, actual_type: t.Type, arg_name: str = None, fn: t.Callable = None):
        arg_name_str = f'"{arg_name}"' if arg_name else "argument"

        expected_type = None
        if fn is not None:
            signature = inspect.signature(fn)
            param_desc = signature.parameters.get(arg_name, None)
            if param_desc and param_desc.annotation is not inspect.Parameter.empty:
                expected_type = param_desc.annotation

        if expected_type is not None:
            msg = (
                f"Expected {arg_name_str} type: <{expected_type}>, "
                f"got: <{actual_type.__qualname__}>"
            )
        else:
            msg = f"Unexpected {arg_name_str} type: <{actual_type.__qualname__}>"

        super().__init__(msg)
