# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
from .ansi import IntCodes, Attribute, SequenceSGR, NOOP_SEQ, RESET_SEQ
from .color import Color, ColorSlot, ColorIndexed256, ColorRGB, resolve_color, color_codes
from .common import LogicError, ArgTypeError
from .intention import Intent, Intention, NOOP_INTENTION
from .style import Style, Styles, NOOP_STYLE, make_style, merge_styles
from .text import StyledText, ResetMarker, RESET, merge
from .sink import ISink, BufferSink, StreamSink
from .settings import FormatMode, Settings, SettingsManager
from .writer import SgrWriter, render, echo, wrap
from ._version import __version__
