"""
Synchsafe integers, as used for the sizes in ID3v2 headers.

Only the low 7 bits of each byte are meant to carry data, so that a size
field can never contain something that looks like an MPEG frame sync.
See http://id3.org/id3v2.4.0-structure, section 6.2.
"""

# Every fixed-size structure in an ID3v2 block is 10 bytes long.
HEADER_SIZE = 10
FRAME_HEADER_SIZE = 10
FOOTER_SIZE = 10

# The length of the size field at the front of an extended header.
EXTENDED_SIZE_FIELD = 4

# Four bytes of seven bits each.
MAX_SIZE = (1 << 28) - 1


def decode(raw_bytes):
    """Convert a big-endian synchsafe byte sequence into an int.

    The high bit of each byte is not checked or masked; a malformed
    byte just spills into the neighbouring 7-bit group.

    Args:
      raw_bytes: A bytes object of any length.  The first byte holds
        the most significant group.

    Returns:
      A non-negative integer.  An empty or all-zero sequence is 0.
    """
    value = 0
    for i, b in enumerate(reversed(bytearray(raw_bytes))):
        value |= b << (i * 7)
    return value
