# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
import typing as t
from argparse import Namespace

from .common import ExtendedEnum, logger


class FormatMode(str, ExtendedEnum):
    """
    Determines whether SGR sequences are allowed in the output.
    """

    ALWAYS = "always"
    """ Emit all the sequences unconditionally. """
    NEVER = "never"
    """ Discard all the sequences, keep the text. """
    AUTO = "auto"
    """
    Emit the sequences only if the sink is a terminal and ``TERM``
    environment variable is not set to ``dumb``.
    """

    def __str__(self) -> str:
        return self.value


class Settings(Namespace):
    def __init__(self, **kwargs: t.Any):
        self.format_mode: FormatMode = FormatMode.ALWAYS
        self.version: bool = False
        self.debug: int = 0

        # command line options
        self.text: t.List[str] = []
        self.bold: bool = False
        self.dim: bool = False
        self.italic: bool = False
        self.underline: bool = False
        self.blink: bool = False
        self.inverse: bool = False
        self.hidden: bool = False
        self.strikethrough: bool = False
        self.clear: t.List[str] = []
        self.fg: str | None = None
        self.bg: str | None = None
        self.default_fg: bool = False
        self.default_bg: bool = False
        self.prefix: str = ""
        self.suffix: str = ""
        self.reset: bool = False
        self.partial: bool = False
        self.no_newline: bool = False

        super().__init__(**kwargs)

    @property
    def effective_format_mode(self) -> FormatMode:
        return FormatMode.resolve(self.format_mode)

    @property
    def debug_logging(self) -> bool:
        return self.debug >= 1


class SettingsManager:
    app_settings: Settings

    ENV_FORMAT = "EASYSGR_FORMAT"
    ENV_NO_COLOR = "NO_COLOR"
    ENV_FORCE_COLOR = "FORCE_COLOR"

    @staticmethod
    def init(**kwargs: t.Any):
        SettingsManager.app_settings = Settings(**kwargs)

    @staticmethod
    def init_from_env(environ: t.Mapping[str, str] = None, **kwargs: t.Any):
        """
        Same as `init()`, but the format mode is determined by environment
        variables (in order of increasing priority): ``NO_COLOR``,
        ``FORCE_COLOR`` and ``EASYSGR_FORMAT``. Explicit ``kwargs`` override
        the environment.
        """
        if environ is None:
            environ = os.environ

        format_mode = None
        if environ.get(SettingsManager.ENV_NO_COLOR):
            format_mode = FormatMode.NEVER
        if environ.get(SettingsManager.ENV_FORCE_COLOR):
            format_mode = FormatMode.ALWAYS
        env_value = environ.get(SettingsManager.ENV_FORMAT)
        if env_value:
            try:
                format_mode = FormatMode.resolve(env_value.strip().lower())
            except LookupError:
                logger.warning(f"Invalid {SettingsManager.ENV_FORMAT} value ignored: {env_value!r}")

        if format_mode is not None:
            kwargs.setdefault("format_mode", format_mode)
        SettingsManager.init(**kwargs)


SettingsManager.init()
