"""
Exceptions raised while reading an ID3v2 block.

There are two families.  A StructuralError means the bytes do not have
the shape of an ID3v2 block (missing marker, short reads); it is always
fatal.  A ContentError means the shape is fine but something inside it
is odd (an unknown frame id or text encoding); those are only raised
when strict content checking is requested, and are otherwise tolerated.

Errors raised by the underlying stream (IOError / OSError) are never
wrapped.
"""


class Error(Exception):
    """Base class for all errors raised by id3scan."""


class StructuralError(Error):
    """The data does not have the structure of an ID3v2 block."""


class MarkerNotFoundError(StructuralError):
    """The stream does not start with an ID3 marker."""


class InvalidBlockError(StructuralError):
    """A 10-byte header carries neither the header nor footer marker."""


class TruncatedError(StructuralError):
    """The stream ended in the middle of a fixed-size structure.

    Attributes:
      expected: The number of bytes that were needed.
      got: The number of bytes that were actually available.
    """

    what = "data"

    def __init__(self, expected, got):
        StructuralError.__init__(
            self, "Truncated %s: expected %d bytes, got %d" % (
                self.what, expected, got))
        self.expected = expected
        self.got = got


class TruncatedHeaderError(TruncatedError):
    what = "header"


class TruncatedFrameHeaderError(TruncatedError):
    what = "frame header"


class TruncatedPayloadError(TruncatedError):
    what = "frame payload"


class TruncatedFooterError(TruncatedError):
    what = "footer"


class ContentError(Error):
    """Well-formed data with unexpected content (strict mode only)."""
