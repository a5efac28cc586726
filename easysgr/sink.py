# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
"""
Output destinations. The writer depends on nothing but `ISink.write()`, so
anything capable of accepting a string can be used as a sink.
"""
from __future__ import annotations

import io
import sys
import typing as t
from abc import ABCMeta, abstractmethod


class ISink(metaclass=ABCMeta):
    """Sink interface."""

    @abstractmethod
    def write(self, s: str) -> None:
        """
        Write the string to the destination. Errors of the underlying
        destination are propagated as is.
        """

    def isatty(self) -> bool:
        """
        :return: *True* if the destination is a terminal emulator. Used for
                 automatic format mode detection.
        """
        return False

    def __repr__(self):
        return self.__class__.__qualname__ + "[]"


class BufferSink(ISink):
    """
    In-memory growable text buffer. Writing to it never fails.

    >>> sink = BufferSink()
    >>> sink.write('\x1b[1m')
    >>> sink.write('text')
    >>> sink.getvalue()
    '\\x1b[1mtext'
    """

    def __init__(self):
        self._buf = ""

    def write(self, s: str) -> None:
        self._buf += s

    def getvalue(self) -> str:
        return self._buf

    def clear(self):
        self._buf = ""

    def __len__(self) -> int:
        return len(self._buf)

    def __repr__(self):
        return f"{self.__class__.__qualname__}[{len(self._buf)}]"


class StreamSink(ISink):
    """
    Streaming sink on top of a file-like object. Binary streams (`io.RawIOBase`
    and `io.BufferedIOBase` descendants) get the strings encoded, anything
    else is considered a text stream and gets them as is. Any error raised by the
    stream is propagated to the caller, and the data that was written before
    the failure stays written.

    :param stream:   Output stream; defaults to the binary buffer of
                     ``sys.stdout``.
    :param encoding: Encoding for binary streams.
    :param flush:    Flush the stream after each write.
    """

    def __init__(self, stream: t.IO = None, encoding: str = "utf-8", flush: bool = False):
        if stream is None:
            stream = getattr(sys.stdout, "buffer", sys.stdout)
        self._stream: t.IO = stream
        self._encoding = encoding
        self._flush = flush
        self._binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))

    @property
    def stream(self) -> t.IO:
        return self._stream

    def write(self, s: str) -> None:
        if self._binary:
            self._stream.write(s.encode(self._encoding))
        else:
            self._stream.write(s)
        if self._flush:
            self._stream.flush()

    def isatty(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def __repr__(self):
        name = getattr(self._stream, "name", self._stream.__class__.__qualname__)
        return f"{self.__class__.__qualname__}[{name}]"
