"""Helpers for reading from file-like objects that may return short reads."""

# Large skips are done in chunks of this size.
_READ_SIZE = 4 << 10  # 4k


def read_fully(stream, size):
    """Read up to size bytes, retrying on short reads.

    Args:
      stream: A file-like object opened in binary mode
      size: The number of bytes wanted

    Returns:
      A bytes object.  It is shorter than size only if the stream hit
      end-of-file.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def skip(stream, size):
    """Read and throw away up to size bytes.

    Returns:
      The number of bytes actually skipped.
    """
    skipped = 0
    while skipped < size:
        chunk = read_fully(stream, min(_READ_SIZE, size - skipped))
        if not chunk:
            break
        skipped += len(chunk)
    return skipped
