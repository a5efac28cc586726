# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import sys
import traceback
import typing as t

from ._version import __version__
from .ansi import Attribute
from .arghelp import AppArgumentParser
from .common import LOG_FORMAT, logger
from .settings import Settings, SettingsManager
from .style import Styles
from .text import RESET, StyledText
from .sink import StreamSink
from .writer import SgrWriter, wrap


# noinspection PyMethodMayBeStatic
class App:
    def __init__(self, stdout: t.IO = None, stderr: t.IO = None):
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._log_handler: logging.Handler | None = None

    def run(self, argv: t.List[str] = None) -> int:
        self._setup_logging()
        try:
            self._parse_args(argv)  # help processing is handled by argparse
            if SettingsManager.app_settings.debug_logging:
                logger.setLevel(logging.DEBUG)
            self._print()
        except Exception as e:
            self._on_exception(e)
            return 1
        finally:
            self._teardown_logging()
        return 0

    def make_text(self, settings: Settings) -> StyledText:
        text = StyledText(" ".join(settings.text), prefix=settings.prefix, suffix=settings.suffix)
        for attribute in Attribute:
            if getattr(settings, attribute.value):
                text = text.apply(attribute)
        for attribute in settings.clear:
            text = text.clear(attribute)
        if settings.fg is not None:
            text = text.color(settings.fg)
        if settings.default_fg:
            text = text.default_color()
        if settings.bg is not None:
            text = text.background(settings.bg)
        if settings.default_bg:
            text = text.default_background()
        return text

    def _parse_args(self, argv: t.List[str] | None):
        SettingsManager.init_from_env()
        AppArgumentParser().parse_args(argv, namespace=SettingsManager.app_settings)

    def _setup_logging(self):
        # warnings are shown regardless of --debug
        handler = logging.StreamHandler(self._stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self._log_handler = handler
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)

    def _teardown_logging(self):
        if self._log_handler is None:
            return
        logger.removeHandler(self._log_handler)
        logger.setLevel(logging.NOTSET)
        self._log_handler = None

    def _print(self):
        app_settings = SettingsManager.app_settings
        writer = SgrWriter(StreamSink(self._stdout, flush=True))

        if app_settings.version:
            writer.write(__version__ + "\n")
            return

        text = self.make_text(app_settings)
        logger.debug(f"Rendering {text!r}")

        if app_settings.partial:
            writer.partial(text)
        else:
            writer.render(text, *([RESET] if app_settings.reset else []))
        if not app_settings.no_newline:
            writer.write("\n")

    def _on_exception(self, e: Exception):
        error_writer = SgrWriter(StreamSink(self._stderr, flush=True))
        label = wrap("ERROR: ", Styles.ERROR_LABEL) if error_writer.is_format_allowed else "ERROR: "

        if SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error_writer.write('\n'.join(tb_lines[:-1]) + '\n')

        error_writer.write(f"{label}{e.__class__.__name__}: {e!s}\n")


def main():
    sys.exit(App().run())
