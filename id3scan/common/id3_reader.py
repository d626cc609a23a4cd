"""
Read the frames of an ID3v2 block from a stream.

The reader is deliberately lenient about content: it will parse pretty
much anything that has the structure of an ID3v2 block.  Unknown frame
ids, unknown text encodings and frames whose payload runs past the end
of the block are all accepted (and logged at DEBUG level).  Short reads
are never accepted; they raise one of the errors.Truncated* exceptions.

The reader only reads forward and never closes the stream it is given.
"""

import logging

from id3scan.common import byte_stream
from id3scan.common import errors
from id3scan.common import id3_frame
from id3scan.common import id3_header
from id3scan.common import synchsafe


class FrameRegion(object):
    """A cursor over the frame region of an ID3v2 block.

    Frame headers are read through the region and can never go past
    its end.  Frame payloads are read straight from the stream and only
    accounted for afterwards with consume(), so an oversized payload is
    allowed to run past the end of the block.

    Attributes:
      remaining: The number of bytes left in the region.
    """

    def __init__(self, size):
        self.remaining = size

    def read(self, stream, size):
        """Read up to size bytes, stopping at the end of the region."""
        data = byte_stream.read_fully(stream, min(size, self.remaining))
        self.remaining -= len(data)
        return data

    def skip(self, stream, size):
        """Skip up to size bytes, stopping at the end of the region.

        Returns:
          The number of bytes actually skipped.
        """
        skipped = byte_stream.skip(stream, min(size, self.remaining))
        self.remaining -= skipped
        return skipped

    def consume(self, size):
        """Account for size bytes that were read outside of the region."""
        self.remaining = max(0, self.remaining - size)

    def exhausted(self):
        return self.remaining == 0


def _read_header(stream):
    # Check the marker before reading the rest, so that we bail out
    # early on things that are not ID3 at all.
    prefix = byte_stream.read_fully(stream, len(id3_header.HEADER_MARKER))
    if prefix != id3_header.HEADER_MARKER:
        raise errors.MarkerNotFoundError(
            "ID3 header not found (got %r)" % prefix)
    rest = byte_stream.read_fully(stream,
                                  synchsafe.HEADER_SIZE - len(prefix))
    return id3_header.parse(prefix + rest)


def _skip_extended_header(stream, region):
    raw_size = region.read(stream, synchsafe.EXTENDED_SIZE_FIELD)
    if len(raw_size) < synchsafe.EXTENDED_SIZE_FIELD:
        raise errors.TruncatedHeaderError(synchsafe.EXTENDED_SIZE_FIELD,
                                          len(raw_size))
    extended_size = synchsafe.decode(raw_size)
    # The size includes the size field we have already read.
    to_skip = max(0, extended_size - synchsafe.EXTENDED_SIZE_FIELD)
    skipped = region.skip(stream, to_skip)
    if skipped < to_skip:
        raise errors.TruncatedHeaderError(extended_size,
                                          skipped + len(raw_size))
    logging.debug("Skipped %d-byte extended header", extended_size)


def _check_content(frame, region, strict):
    """Apply the content policy to a frame whose payload was just read.

    Args:
      frame: An id3_frame.Frame
      region: The FrameRegion, before the payload is consumed from it
      strict: If True, raise ContentError on problems.  Otherwise they
        are only logged.
    """
    problems = []
    if not id3_frame.is_valid_frame_id(frame.frame_id):
        problems.append("unknown frame id %r" % frame.frame_id)
    if (frame.frame_id.startswith("T")
        and frame.data
        and not id3_frame.is_known_encoding(frame.encoding())):
        problems.append("unknown text encoding %d" % frame.encoding())
    if frame.size > region.remaining:
        problems.append("payload runs %d bytes past the end of the block"
                        % (frame.size - region.remaining))
    for msg in problems:
        if strict:
            raise errors.ContentError("Frame %r: %s" % (frame.frame_id, msg))
        logging.debug("Tolerating frame %r: %s", frame.frame_id, msg)


def read_frames(stream, decode_utf16=False, strict_content=False):
    """Iterate over the frames of an ID3v2 block.

    Args:
      stream: A file-like object opened in binary mode, positioned at
        the start of an ID3v2 block
      decode_utf16: If True, decode frames that use one of the UTF-16
        encodings.  Otherwise their raw payload is returned.
      strict_content: If True, raise errors.ContentError on unknown frame
        ids, unknown text encodings and oversized frames.

    Yields:
      (frame_id, text) pairs, in the order they appear in the stream.

    Raises:
      errors.StructuralError: on a missing marker or a short read
      errors.ContentError: only if strict_content is True
    """
    header = _read_header(stream)
    logging.debug("Found ID3v%s block, %d bytes, flags=0x%02x",
                  header.version_string(), header.size, header.flags)

    region = FrameRegion(header.size)
    if header.has_extended_header():
        _skip_extended_header(stream, region)

    while True:
        raw = region.read(stream, synchsafe.FRAME_HEADER_SIZE)
        # Running out exactly on a frame boundary is the normal way
        # for the loop to end.
        if not raw:
            break
        frame = id3_frame.parse_header(raw)
        frame.read_data(stream)
        _check_content(frame, region, strict_content)
        region.consume(frame.size)
        yield frame.frame_id, frame.decoded(decode_utf16=decode_utf16)

    if header.has_footer():
        # The footer just mirrors the header, so we do not look at it.
        footer = byte_stream.read_fully(stream, synchsafe.FOOTER_SIZE)
        if len(footer) < synchsafe.FOOTER_SIZE:
            raise errors.TruncatedFooterError(synchsafe.FOOTER_SIZE,
                                              len(footer))


def parse(stream, decode_utf16=False, strict_content=False):
    """Read an ID3v2 block into a dict.

    Args:
      stream: A file-like object opened in binary mode, positioned at
        the start of an ID3v2 block.  It is not closed.
      decode_utf16, strict_content: See read_frames.

    Returns:
      A dict mapping frame ids to decoded text.  If a frame id appears
      more than once, the last frame wins.
    """
    return dict(read_frames(stream, decode_utf16=decode_utf16,
                            strict_content=strict_content))


def parse_file(path, **kwargs):
    """Read the ID3v2 block at the start of a file.

    Keyword arguments are passed on to parse.
    """
    with open(path, "rb") as fh:
        return parse(fh, **kwargs)
