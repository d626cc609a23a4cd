"""
Code related to the 10-byte header at the front of an ID3v2 block.

The same layout is used for the optional footer at the end of an
ID3v2.4 block, except that the marker is reversed ("3DI").
"""

import collections
import struct
import mutagen.id3

from id3scan.common import errors
from id3scan.common import synchsafe

HEADER_MARKER = b"ID3"
FOOTER_MARKER = b"3DI"

# Flag bits, from http://id3.org/id3v2.4.0-structure section 3.1
_UNSYNCHRONISATION = 1 << 7
_EXTENDED_HEADER = 1 << 6
_EXPERIMENTAL = 1 << 5
_FOOTER_PRESENT = 1 << 4

_HEADER_FORMAT = ">3sBBB4s"


class ID3Header(collections.namedtuple(
        "ID3Header", ["marker", "version", "flags", "size"])):
    """The decoded contents of an ID3v2 header (or footer).

    Attributes:
      marker: b"ID3" for a header, b"3DI" for a footer
      version: A (major, revision) pair of ints
      flags: The raw flags byte, as an int
      size: The size of everything after the header, excluding any
        footer, in bytes
    """

    __slots__ = ()

    def has_extended_header(self):
        return bool(self.flags & _EXTENDED_HEADER)

    def unsynchronisation(self):
        return bool(self.flags & _UNSYNCHRONISATION)

    def experimental(self):
        return bool(self.flags & _EXPERIMENTAL)

    def has_footer(self):
        return bool(self.flags & _FOOTER_PRESENT)

    def is_footer(self):
        return self.marker == FOOTER_MARKER

    def version_string(self):
        return "2.%d.%d" % self.version


def parse(raw):
    """Parse a 10-byte ID3v2 header.

    Args:
      raw: A bytes object holding the header.

    Returns:
      An ID3Header object.

    Raises:
      TruncatedHeaderError: if raw is shorter than 10 bytes
      InvalidBlockError: if raw does not start with "ID3" or "3DI"
    """
    if len(raw) < synchsafe.HEADER_SIZE:
        raise errors.TruncatedHeaderError(synchsafe.HEADER_SIZE, len(raw))
    marker, vmaj, vrev, flags, raw_size = struct.unpack_from(
        _HEADER_FORMAT, raw)
    if marker not in (HEADER_MARKER, FOOTER_MARKER):
        raise errors.InvalidBlockError("Not an ID3 block: %r" % marker)
    return ID3Header(marker=marker,
                     version=(vmaj, vrev),
                     flags=flags,
                     size=synchsafe.decode(raw_size))


def create_test_header(size, flags=0, marker=HEADER_MARKER, version=(4, 0)):
    """Construct a test ID3 header for a block of a given size.

    This should only be used for testing.

    Args:
      size: The size to encode into the header
      flags: The flags byte
      marker: The 3-byte marker
      version: A (major, revision) pair

    Returns:
      A 10-byte string containing the encoded header.
    """
    encoded_size = mutagen.id3.BitPaddedInt.to_str(size, width=4)
    return struct.pack(_HEADER_FORMAT, marker, version[0], version[1],
                       flags, encoded_size)


def create_test_block(frames, flags=0, extended_header=None, footer=None):
    """Construct a complete ID3v2.4 block around a sequence of frames.

    This should only be used for testing.

    Args:
      frames: A sequence of encoded frames (see
        id3_frame.create_test_frame)
      flags: Extra header flag bits.  The extended header and footer
        bits are set automatically.
      extended_header: If not None, the body of an extended header; a
        synchsafe size field covering it is prepended.
      footer: If not None, the 10 bytes to append as a footer.  Pass
        True to append a correctly-formed footer.

    Returns:
      A string containing the encoded block.
    """
    body = [b"".join(frames)]
    if extended_header is not None:
        flags |= _EXTENDED_HEADER
        ext_size = len(extended_header) + synchsafe.EXTENDED_SIZE_FIELD
        body.insert(0, mutagen.id3.BitPaddedInt.to_str(ext_size, width=4)
                    + extended_header)
    if footer is not None:
        flags |= _FOOTER_PRESENT
    body = b"".join(body)
    parts = [create_test_header(len(body), flags=flags), body]
    if footer is True:
        parts.append(create_test_header(len(body), flags=flags,
                                        marker=FOOTER_MARKER))
    elif footer is not None:
        parts.append(footer)
    return b"".join(parts)
