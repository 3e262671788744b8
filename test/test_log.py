import io
from contextlib import redirect_stderr
from unittest import TestCase

from tagpages import TagPageConfig, generate_tag_pages, log


class LogTest(TestCase):
    def tearDown(self):
        log.set_quiet(False)

    def test_skip_reported(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            generate_tag_pages([], TagPageConfig(), set())
        self.assertEqual(stderr.getvalue(),
                         "Skipping tag pages: Layout 'tag_index' is not registered\n")

    def test_quiet(self):
        log.set_quiet(True)
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            log.info("hidden")
            log.log("shown")
        self.assertEqual(stderr.getvalue(), "shown\n")

    def test_progress(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            self.assertEqual(list(log.progress("Tags", ["a", "b"])), ["a", "b"])
        self.assertEqual(stderr.getvalue(), "\rTags: 50% (1/2)\rTags: 100% (2/2)\n")
