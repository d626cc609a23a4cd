import os
import tempfile
import unittest

from id3scan import do_dump_tags
from id3scan.common import id3_frame
from id3scan.common import id3_header
from id3scan.common.printing import cprint


class DumpTagsTest(unittest.TestCase):

    def setUp(self):
        self.paths = []
        self.output = []

    def tearDown(self):
        for path in self.paths:
            os.unlink(path)

    def _write_file(self, data):
        fd, path = tempfile.mkstemp(suffix=".mp3")
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        self.paths.append(path)
        return path

    def _main(self, argv):
        def write(msg, **kwargs):
            self.output.append(msg)
        with cprint.use_write_function(write):
            return do_dump_tags.main(argv)

    def test_dump(self):
        path = self._write_file(id3_header.create_test_block(
            [id3_frame.create_text_frame(b"TPE1", u"Artist"),
             id3_frame.create_text_frame(b"TIT2", u"Title")]))
        self.assertEqual(0, self._main([path]))
        self.assertEqual([path, u"  TIT2: Title", u"  TPE1: Artist"],
                         self.output)

    def test_utf16_flag(self):
        path = self._write_file(id3_header.create_test_block(
            [id3_frame.create_test_frame(
                b"TIT2", b"\x01\xff\xfeH\x00i\x00\x00\x00")]))
        self.assertEqual(0, self._main(["--utf16", path]))
        self.assertEqual([path, u"  TIT2: Hi"], self.output)

    def test_strict_flag(self):
        path = self._write_file(id3_header.create_test_block(
            [id3_frame.create_text_frame(b"tit2", u"Title")]))
        self.assertEqual(0, self._main([path]))
        self.assertEqual(1, self._main(["--strict", path]))

    def test_bad_files(self):
        good = self._write_file(id3_header.create_test_block(
            [id3_frame.create_text_frame(b"TIT2", u"Title")]))
        not_id3 = self._write_file(b"RIFF\x00\x00\x00\x00WAVE")
        missing = os.path.join(tempfile.gettempdir(), "no-such-file.mp3")
        self.assertEqual(1, self._main([not_id3, good, missing]))
        # The good file is still dumped.
        self.assertEqual([good, u"  TIT2: Title"], self.output)


if __name__ == "__main__":
    unittest.main()
