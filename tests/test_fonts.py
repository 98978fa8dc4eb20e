import unittest

from meme_generator.rendering import load_font


class TestFonts(unittest.TestCase):
    def test_same_size_returns_cached_font(self):
        self.assertIs(load_font(40), load_font(40))
        self.assertEqual(load_font(40).size, 40)

    def test_explicit_missing_font_raises(self):
        with self.assertRaises(OSError):
            load_font(40, '/nonexistent/font.ttf')


if __name__ == "__main__":
    unittest.main()
