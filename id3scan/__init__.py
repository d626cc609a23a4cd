"""Read the text frames of an ID3v2 block into a dict."""

from id3scan.common.id3_reader import parse, parse_file, read_frames

__version__ = '1.0'
