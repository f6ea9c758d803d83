import unittest

from ..hint import BROKEN_GLYPH, Feedback, Hint, glyph


class TestHint(unittest.TestCase):

    def test_glyphs(self):
        self.assertEqual(str(Hint.ABSENT_CHARACTER), "⬜️")
        self.assertEqual(str(Hint.WRONG_POSITION), "🟡")
        self.assertEqual(str(Hint.CORRECT_POSITION), "💚")

    def test_unknown_value_renders_broken(self):
        self.assertEqual(glyph(42), BROKEN_GLYPH)
        self.assertEqual(glyph(None), BROKEN_GLYPH)

    def test_glyphs_are_distinct(self):
        glyphs = {str(h) for h in Hint} | {BROKEN_GLYPH}
        self.assertEqual(len(glyphs), len(Hint) + 1)


class TestFeedback(unittest.TestCase):

    def test_str_concatenates_glyphs(self):
        fb = Feedback([Hint.CORRECT_POSITION, Hint.WRONG_POSITION, Hint.ABSENT_CHARACTER])
        self.assertEqual(str(fb), "💚🟡⬜️")

    def test_empty(self):
        self.assertEqual(str(Feedback()), "")
        self.assertFalse(Feedback().is_solved())

    def test_equal(self):
        fb = Feedback([Hint.CORRECT_POSITION, Hint.WRONG_POSITION])
        self.assertTrue(fb.equal(Feedback([Hint.CORRECT_POSITION, Hint.WRONG_POSITION])))
        self.assertFalse(fb.equal(Feedback([Hint.WRONG_POSITION, Hint.CORRECT_POSITION])))
        self.assertFalse(fb.equal(Feedback([Hint.CORRECT_POSITION])))
        self.assertEqual(fb, Feedback([2, 1]))

    def test_immutable(self):
        fb = Feedback.absent(3)
        with self.assertRaises(TypeError):
            fb[0] = Hint.CORRECT_POSITION

    def test_rejects_unknown_hint(self):
        with self.assertRaises(ValueError):
            Feedback([7])

    def test_is_solved(self):
        self.assertTrue(Feedback([Hint.CORRECT_POSITION] * 5).is_solved())
        self.assertFalse(Feedback([Hint.CORRECT_POSITION, Hint.ABSENT_CHARACTER]).is_solved())


if __name__ == '__main__':
    unittest.main()
