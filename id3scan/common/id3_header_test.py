#!/usr/bin/env python

import unittest

from id3scan.common import errors
from id3scan.common import id3_header


class ID3HeaderTest(unittest.TestCase):

    # vmaj = 4, vrev = 0, flags = 0
    prefix = b"ID3\x04\x00\x00"

    size_test_cases = ((b"\x00\x00\x00\x00", 0),
                       (b"\x00\x00\x00\x01", 1),
                       (b"\x00\x00\x01\x00", 1<<7),
                       (b"\x00\x01\x00\x00", 1<<14),
                       (b"\x01\x00\x00\x00", 1<<21),
                       )

    def test_test_header(self):
        for raw_size, cooked_size in self.size_test_cases:
            self.assertEqual(self.prefix + raw_size,
                             id3_header.create_test_header(cooked_size))

    def test_parse(self):
        for raw_size, cooked_size in self.size_test_cases:
            hdr = id3_header.parse(self.prefix + raw_size)
            self.assertEqual(b"ID3", hdr.marker)
            self.assertEqual((4, 0), hdr.version)
            self.assertEqual(0, hdr.flags)
            self.assertEqual(cooked_size, hdr.size)
            self.assertFalse(hdr.is_footer())

    def test_version_string(self):
        hdr = id3_header.parse(b"ID3\x03\x01\x00\x00\x00\x00\x00")
        self.assertEqual("2.3.1", hdr.version_string())

    def test_flags(self):
        hdr = id3_header.parse(self.prefix + b"\0\0\0\0")
        self.assertFalse(hdr.unsynchronisation())
        self.assertFalse(hdr.has_extended_header())
        self.assertFalse(hdr.experimental())
        self.assertFalse(hdr.has_footer())

        checks = ((0x80, "unsynchronisation"),
                  (0x40, "has_extended_header"),
                  (0x20, "experimental"),
                  (0x10, "has_footer"))
        for flags, name in checks:
            hdr = id3_header.parse(
                id3_header.create_test_header(0, flags=flags))
            for _, other in checks:
                self.assertEqual(other == name, getattr(hdr, other)())

        hdr = id3_header.parse(id3_header.create_test_header(0, flags=0xf0))
        self.assertTrue(hdr.unsynchronisation())
        self.assertTrue(hdr.has_extended_header())
        self.assertTrue(hdr.experimental())
        self.assertTrue(hdr.has_footer())

    def test_footer(self):
        raw = id3_header.create_test_header(
            100, marker=id3_header.FOOTER_MARKER)
        hdr = id3_header.parse(raw)
        self.assertTrue(hdr.is_footer())
        self.assertEqual(100, hdr.size)

    def test_immutable(self):
        hdr = id3_header.parse(self.prefix + b"\0\0\0\0")
        self.assertRaises(AttributeError, setattr, hdr, "size", 5)

    def test_parse_errors(self):
        self.assertRaises(errors.InvalidBlockError,
                          id3_header.parse, b"1234567890")
        self.assertRaises(errors.InvalidBlockError,
                          id3_header.parse, b"TAG\x04\x00\x00\x00\x00\x00\x00")
        try:
            id3_header.parse(b"ID3\x04")
            self.fail("Expected TruncatedHeaderError")
        except errors.TruncatedHeaderError as ex:
            self.assertEqual(10, ex.expected)
            self.assertEqual(4, ex.got)

    def test_create_test_block(self):
        block = id3_header.create_test_block([b"x" * 5])
        hdr = id3_header.parse(block)
        self.assertEqual(5, hdr.size)
        self.assertEqual(15, len(block))

        block = id3_header.create_test_block(
            [b"x" * 5], extended_header=b"\0\0", footer=True)
        hdr = id3_header.parse(block)
        self.assertTrue(hdr.has_extended_header())
        self.assertTrue(hdr.has_footer())
        # 4 size bytes + 2 extended header bytes + 5 frame bytes.
        self.assertEqual(11, hdr.size)
        footer = id3_header.parse(block[-10:])
        self.assertTrue(footer.is_footer())
        self.assertEqual(11, footer.size)


if __name__ == "__main__":
    unittest.main()
