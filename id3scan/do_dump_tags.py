#!/usr/bin/env python
"""
Print the text frames of the ID3v2 block at the start of each file.

Usage:

    do_dump_tags [--utf16] [--strict] [-v] FILE [FILE ...]

Flags:
 --utf16 = decode frames that use the UTF-16 text encodings
 --strict = fail on unknown frame ids, unknown text encodings and frames
            that run past the end of the block
 -v = log what the parser is tolerating

Defaults for --utf16, --strict and the log level come from settings.py.
"""

import argparse
import logging
import sys

from id3scan.common import conf
from id3scan.common import errors
from id3scan.common import id3_reader
from id3scan.common.printing import cprint


def dump_file(path, decode_utf16=False, strict_content=False):
    """Print the frames of one file, sorted by frame id."""
    tags = id3_reader.parse_file(path, decode_utf16=decode_utf16,
                                 strict_content=strict_content)
    cprint(path)
    for frame_id in sorted(tags):
        cprint("  %s: %s" % (frame_id, tags[frame_id]))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the ID3v2 text frames of audio files.")
    parser.add_argument("paths", metavar="FILE", nargs="+")
    parser.add_argument("--utf16", action="store_true",
                        default=conf.ID3_DECODE_UTF16,
                        help="Decode UTF-16 text frames")
    parser.add_argument("--strict", action="store_true",
                        default=conf.ID3_STRICT_CONTENT,
                        help="Fail on odd frame content")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at DEBUG level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else conf.LOG_LEVEL,
        format="%(levelname)s %(message)s")

    failed = 0
    for path in args.paths:
        try:
            dump_file(path, decode_utf16=args.utf16,
                      strict_content=args.strict)
        except (errors.Error, IOError) as ex:
            logging.error("Skipping file %s: %s", path, ex)
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
