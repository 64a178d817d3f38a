import unittest

from gpacalc.domain.logic.grading import GRADE_LETTERS, grade_point, parse_units


class GradingTests(unittest.TestCase):
    def test_grade_points(self):
        self.assertEqual([grade_point(g) for g in GRADE_LETTERS], [5, 4, 3, 2, 1, 0])

    def test_case_insensitive(self):
        self.assertEqual(grade_point("a"), 5)
        self.assertEqual(grade_point(" c "), 3)

    def test_unknown_grade_is_zero(self):
        self.assertEqual(grade_point("S"), 0)
        self.assertEqual(grade_point(""), 0)

    def test_parse_units(self):
        self.assertEqual(parse_units("3"), 3.0)
        self.assertEqual(parse_units(" 2.5 "), 2.5)

    def test_parse_units_rejects(self):
        for text in ("", "  ", "abc", "0", "-1", "nan", "inf", "1e999"):
            with self.subTest(text=text):
                self.assertIsNone(parse_units(text))


if __name__ == "__main__":
    unittest.main()
