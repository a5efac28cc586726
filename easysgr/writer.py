# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
"""
Render layer. `SgrWriter` turns styled texts and other renderable items into
strings and hands them over to a sink; the logic is the same for every sink
type, so the output for the same input is identical regardless of where it
goes to.

.. testsetup:: *

    from easysgr import StyledText, RESET, render

>>> render(StyledText("Hi").bold().color("red"), RESET)
'\\x1b[1;31mHi\\x1b[0m'

"""
from __future__ import annotations

import os
import typing as t

from .ansi import Attribute, NOOP_SEQ, RESET_SEQ, SequenceSGR
from .color import Color, ColorIndexed256, ColorRGB, ColorType
from .common import ArgTypeError, logger
from .settings import FormatMode, SettingsManager
from .sink import BufferSink, ISink, StreamSink
from .style import Style, make_style
from .text import ResetMarker, StyledText

ItemType = t.Union[StyledText, ResetMarker, Style, Attribute, ColorType]
""" Anything that can be rendered into a sequence. """


class SgrWriter:
    """
    Writer of SGR sequences and styled texts into a sink.

    Output of `render()` for a `StyledText` consists of (in this order):
    the reduced SGR sequence of its intentions (omitted entirely when there
    is nothing to change), the prefix, the payload and the suffix. Each
    method call assembles its output completely and then makes exactly
    one write to the sink. Sink errors are propagated as is.

    >>> sink = BufferSink()
    >>> writer = SgrWriter(sink, FormatMode.ALWAYS)
    >>> writer.render(StyledText("text").underline())
    >>> writer.reset()
    >>> sink.getvalue()
    '\\x1b[4mtext\\x1b[0m'

    :param sink:        Output destination.
    :param format_mode: Whether to emit the sequences. If omitted, the global
                        setting is used (see `SettingsManager`).
    """

    def __init__(self, sink: ISink, format_mode: FormatMode | str = None):
        if not isinstance(sink, ISink):
            raise ArgTypeError(type(sink), "sink", fn=SgrWriter.__init__)
        if format_mode is None:
            format_mode = SettingsManager.app_settings.effective_format_mode

        self._sink: ISink = sink
        self._format_mode: FormatMode = FormatMode.resolve(format_mode)
        self._format_allowed: bool = self._determine_format_allowed(self._format_mode)

        logger.debug(
            f"Instantiated {self.__class__.__qualname__}"
            f"[{self._sink!r}, format allowed: {self._format_allowed} "
            f"<- {self._format_mode.name}]"
        )

    @property
    def sink(self) -> ISink:
        return self._sink

    @property
    def format_mode(self) -> FormatMode:
        return self._format_mode

    @property
    def is_format_allowed(self) -> bool:
        return self._format_allowed

    def write(self, s: str):
        """ Write the string as is. """
        self._sink.write(s)

    def render(self, *items: ItemType | str):
        """
        Write the items one after another:

            - `StyledText` -- opening sequence, prefix, payload, suffix;
            - `RESET` -- hard reset sequence and nothing else;
            - `Style`, `Attribute` or color -- its sequence alone;
            - *str* -- as is.
        """
        self._sink.write("".join(self.assemble(item) for item in items))

    def reset(self):
        """ Write hard reset sequence :kbd:`\\e[0m`. """
        self._sink.write(self._assemble_seq(RESET_SEQ))

    def place(self, item: ItemType):
        """ Write opening sequence of the item, without any text. """
        self._sink.write(self._assemble_seq(self._reduce(item)))

    def clean(self, item: ItemType):
        """
        Write the sequence reversing the effects of `place()` for the same
        item (see `Style.closing()`).
        """
        self._sink.write(self._assemble_seq(self._reduce(item, closing=True)))

    def wrap(self, item: StyledText):
        """
        Write the styled text enclosed in its opening sequence and the closing
        one, so that the style does not leak into the subsequent output.
        """
        self._sink.write(
            self.assemble(item) + self._assemble_seq(self._reduce(item, closing=True))
        )

    def partial(self, item: ItemType):
        """
        Write SGR params of the item separated with ';', but without escape
        introducer and terminator.
        """
        if self._format_allowed:
            self._sink.write(self._reduce(item).assemble_partial())

    def assemble(self, item: ItemType | str) -> str:
        """
        Return what `render()` would write for the item.
        """
        if isinstance(item, StyledText):
            return self._assemble_seq(item.style.reduce()) + item.prefix + item.text + item.suffix
        if isinstance(item, (Attribute, Color)) or not isinstance(item, str):
            return self._assemble_seq(self._reduce(item))
        return item

    def _reduce(self, item: ItemType, closing: bool = False) -> SequenceSGR:
        if isinstance(item, ResetMarker):
            return NOOP_SEQ if closing else RESET_SEQ
        if isinstance(item, StyledText):
            style = item.style
        elif isinstance(item, (Style, Attribute, Color, ColorIndexed256, ColorRGB)):
            style = make_style(item)
        else:
            raise ArgTypeError(type(item), "item", fn=SgrWriter._reduce)
        if closing:
            style = style.closing()
        return style.reduce()

    def _assemble_seq(self, seq: SequenceSGR) -> str:
        if not self._format_allowed:
            return ""
        return seq.assemble()

    def _determine_format_allowed(self, format_mode: FormatMode) -> bool:
        if format_mode is FormatMode.ALWAYS:
            return True
        if format_mode is FormatMode.NEVER:
            return False

        isatty = self._sink.isatty()
        term = os.environ.get("TERM", None)

        logger.debug(f"{self._sink!r} is a terminal: {isatty}")
        logger.debug(f"Environment: TERM='{term}'")

        return isatty and term != "dumb"

    def __repr__(self):
        return f"{self.__class__.__qualname__}[{self._sink!r}, {self._format_mode.name}]"


def render(*items: ItemType | str, format_mode: FormatMode | str = None) -> str:
    """
    Render the items into a string. See `SgrWriter.render()`.
    """
    sink = BufferSink()
    SgrWriter(sink, format_mode).render(*items)
    return sink.getvalue()


def echo(
    *items: ItemType | str,
    file: t.IO = None,
    nl: bool = True,
    flush: bool = True,
    format_mode: FormatMode | str = None,
):
    """
    Render the items into a stream, ``sys.stdout`` by default. The whole
    output including the line break is written at once.

    :param items:       Items to render, see `SgrWriter.render()`.
    :param file:        Binary or text stream to write to.
    :param nl:          Append a line break.
    :param flush:       Flush the stream afterwards.
    :param format_mode: See `SgrWriter`.
    """
    writer = SgrWriter(StreamSink(file, flush=flush), format_mode)
    end = "\n" if nl else ""
    writer.write("".join(writer.assemble(item) for item in items) + end)


def wrap(text: str, fmt: Style | Attribute | str | int | ColorType = None) -> str:
    """
    Apply ``fmt`` to the ``text`` and terminate it right after.

    >>> wrap('Warning', Style.of('bold', fg='yellow'))
    '\\x1b[1;33mWarning\\x1b[22;39m'
    """
    sink = BufferSink()
    SgrWriter(sink).wrap(StyledText(text, make_style(fmt)))
    return sink.getvalue()
