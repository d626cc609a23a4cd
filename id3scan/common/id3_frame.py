"""
Code related to the frames inside an ID3v2 block.

Each frame is a 10-byte header (4-byte id, synchsafe size, 2 flag
bytes) followed by the payload.  Only text payloads are decoded; any
other payload comes back as its raw bytes, one character per byte.
"""

import re
import struct
import mutagen.id3

from id3scan.common import byte_stream
from id3scan.common import errors
from id3scan.common import synchsafe

# Text encoding indicators, from http://id3.org/id3v2.4.0-structure
# section 4.
LATIN1 = 0
UTF16 = 1
UTF16BE = 2
UTF8 = 3

_KNOWN_ENCODINGS = (LATIN1, UTF16, UTF16BE, UTF8)

_FRAME_ID_RE = re.compile(r"^[A-Z0-9]{4}$")

_FRAME_HEADER_FORMAT = ">4s4s2s"


def _raw_text(data):
    # Maps every byte to exactly one character, so this never fails.
    return data.decode("latin-1")


class Frame(object):
    """A single ID3v2 frame.

    Attributes:
      frame_id: The 4-character frame id, e.g. "TIT2"
      size: The size of the payload in bytes
      flags: The two raw flag bytes
      data: The payload, or None if it has not been read yet
    """

    def __init__(self, frame_id, size, flags=b"\0\0"):
        self.frame_id = frame_id
        self.size = size
        self.flags = flags
        self.data = None

    def encoding(self):
        """Returns the text encoding indicator, or None if there is none."""
        if not self.data:
            return None
        return bytearray(self.data)[0]

    def read_data(self, stream):
        """Read exactly self.size bytes of payload from a stream.

        Raises:
          TruncatedPayloadError: if the stream ends first
        """
        data = byte_stream.read_fully(stream, self.size)
        if len(data) < self.size:
            raise errors.TruncatedPayloadError(self.size, len(data))
        self.data = data

    def decoded(self, decode_utf16=False):
        """Decode the payload as text.

        The encoding indicator and the trailing terminator are stripped
        for the encodings we understand.  Anything else is returned
        byte-for-byte, indicator included.

        Args:
          decode_utf16: If True, decode UTF-16 payloads.  Otherwise they
            are returned raw like any other unrecognized payload.

        Returns:
          A unicode string.
        """
        if not self.data:
            return u""
        encoding = self.encoding()
        if encoding == LATIN1:
            return self.data[1:-1].decode("latin-1")
        elif encoding == UTF8:
            return self.data[1:-1].decode("utf-8", "replace")
        elif encoding in (UTF16, UTF16BE) and decode_utf16:
            return _decode_utf16(self.data[1:], encoding)
        return _raw_text(self.data)

    def __str__(self):
        return "%s:%s" % (self.frame_id, self.decoded())


def _decode_utf16(text, encoding):
    # Drop the two-byte terminator, if there is one.
    if len(text) >= 2 and text[-2:] == b"\0\0":
        text = text[:-2]
    if encoding == UTF16:
        return text.decode("utf-16", "replace")
    return text.decode("utf-16-be", "replace")


def is_valid_frame_id(frame_id):
    """Returns True if frame_id looks like a real ID3v2.3/2.4 frame id."""
    return bool(_FRAME_ID_RE.match(frame_id))


def is_known_encoding(encoding):
    return encoding in _KNOWN_ENCODINGS


def parse_header(raw):
    """Parse a 10-byte frame header.

    The frame id is not checked; any 4 bytes are accepted.

    Args:
      raw: A bytes object holding the frame header

    Returns:
      A Frame object whose payload has not been read yet.

    Raises:
      TruncatedFrameHeaderError: if raw is shorter than 10 bytes
    """
    if len(raw) < synchsafe.FRAME_HEADER_SIZE:
        raise errors.TruncatedFrameHeaderError(synchsafe.FRAME_HEADER_SIZE,
                                               len(raw))
    frame_id, raw_size, flags = struct.unpack_from(_FRAME_HEADER_FORMAT, raw)
    return Frame(_raw_text(frame_id), synchsafe.decode(raw_size), flags)


def create_test_frame(frame_id, payload, flags=b"\0\0"):
    """Construct an encoded frame around a raw payload.

    This should only be used for testing.
    """
    assert len(frame_id) == 4
    size_str = mutagen.id3.BitPaddedInt.to_str(len(payload), width=4)
    return b"".join([frame_id, size_str, flags, payload])


def create_text_frame(frame_id, value, encoding=UTF8):
    """Construct a null-terminated text frame.

    This should only be used for testing.

    Args:
      frame_id: A 4-byte frame id, e.g. b"TIT2"
      value: A unicode string
      encoding: LATIN1 or UTF8
    """
    codec = {LATIN1: "latin-1", UTF8: "utf-8"}[encoding]
    payload = b"".join([bytes(bytearray([encoding])),
                        value.encode(codec),
                        b"\0",  # The string must be null-terminated
                        ])
    return create_test_frame(frame_id, payload)
