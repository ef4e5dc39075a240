from __future__ import annotations

import unittest

from pwcipher.decoration import decorate, find_decoration, is_decorated, undecorate
from pwcipher.errors import MalformedDecoration


class DecorationTests(unittest.TestCase):
    def test_decorate(self):
        self.assertEqual(decorate("aaa"), "{aaa}")
        self.assertEqual(decorate(""), "{}")
        self.assertEqual(decorate(None), "{}")

    def test_undecorate_inverse(self):
        for s in ("aaa", "", "CFUju8n8eKQHj8u0HI9uQMRmKQALtoXH7lY=", "with spaces and : punctuation", "esc \\{ok\\}"):
            self.assertEqual(undecorate(decorate(s)), s)

    def test_escaped_braces_pass_through(self):
        self.assertEqual(undecorate("Comment {foo\\{inner\\}} other: }"), "foo\\{inner\\}")

    def test_prefix_and_suffix_ignored(self):
        self.assertEqual(undecorate("password: {abc=} # set by admin"), "abc=")

    def test_unescaped_open_brace_inside_region(self):
        self.assertTrue(is_decorated("{a{b}"))
        self.assertEqual(undecorate("{a{b}"), "a{b")
        self.assertEqual(undecorate("x{a{b}c}y}"), "a{b")
        self.assertEqual(undecorate("{{a}}"), "{a")

    def test_escaped_backslash_before_close(self):
        self.assertEqual(undecorate("{abc\\\\}"), "abc\\\\")

    def test_not_decorated(self):
        for s in (
            None,
            "",
            "This is a test",
            "\\{This is a test\\}",
            "{unterminated",
            "{escaped close\\}",
            "close only }",
            "} before {",
            "{trailing backslash\\",
        ):
            self.assertFalse(is_decorated(s), s)
            self.assertIsNone(find_decoration(s))

    def test_undecorate_rejects_plain(self):
        with self.assertRaises(MalformedDecoration):
            undecorate("This is a test")
        with self.assertRaises(MalformedDecoration):
            undecorate(None)

    def test_find_decoration_span(self):
        text = "key={value}"
        begin, end = find_decoration(text)
        self.assertEqual(text[begin - 1], "{")
        self.assertEqual(text[end], "}")

    def test_long_adversarial_input(self):
        text = "{" + "\\{" * 50000 + "a" * 50000
        self.assertFalse(is_decorated(text))


if __name__ == "__main__":
    unittest.main()
