import unittest

from gpacalc.domain.logic.gpa import EmptyRecordsError, IncompleteRecordsError, InvalidUnitsError
from gpacalc.state.app_state import AppState


def fill(state, rows):
    state.records.set_count(len(rows))
    for i, (units, grade) in enumerate(rows):
        state.records.update(i, "units", units)
        state.records.update(i, "grade", grade)


class AppStateTests(unittest.TestCase):
    def setUp(self):
        self.state = AppState()

    def test_count_prompt_hidden_after_valid_count(self):
        self.assertTrue(self.state.choose_count("3"))
        self.assertFalse(self.state.show_count_prompt)
        self.assertEqual(len(self.state.records), 3)
        self.assertFalse(self.state.choose_count("5"))
        self.assertEqual(len(self.state.records), 3)

    def test_invalid_count_ignored(self):
        for text in ("", "0", "-1", "two", "2.5", "100000000"):
            with self.subTest(text=text):
                self.assertFalse(self.state.choose_count(text))
                self.assertTrue(self.state.show_count_prompt)
        self.assertEqual(len(self.state.records), 1)

    def test_calculate_success(self):
        fill(self.state, [("4", "A"), ("3", "B")])
        self.assertTrue(self.state.can_calculate)
        result = self.state.calculate()
        self.assertEqual(result.gpa, 4.57)
        self.assertIs(self.state.result, result)
        self.assertTrue(self.state.is_result_open)
        self.assertTrue(self.state.should_celebrate)
        self.assertFalse(self.state.loading)

    def test_calculate_no_celebration(self):
        fill(self.state, [("2", "C"), ("2", "D")])
        self.state.calculate()
        self.assertFalse(self.state.should_celebrate)

    def test_calculate_refused_when_incomplete(self):
        self.state.records.update(0, "units", "1")
        self.assertFalse(self.state.can_calculate)
        with self.assertRaises(IncompleteRecordsError):
            self.state.calculate()
        self.assertIsNone(self.state.result)
        self.assertFalse(self.state.loading)

    def test_count_then_calculate_refused(self):
        self.state.choose_count("3")
        with self.assertRaises(IncompleteRecordsError):
            self.state.calculate()

    def test_refusal_clears_previous_result(self):
        fill(self.state, [("3", "A")])
        self.state.calculate()
        self.state.records.update(0, "units", "x")
        with self.assertRaises(InvalidUnitsError):
            self.state.calculate()
        self.assertIsNone(self.state.result)

    def test_empty_list_refused(self):
        self.state.records.remove(0)
        with self.assertRaises(EmptyRecordsError):
            self.state.calculate()

    def test_dismiss(self):
        fill(self.state, [("3", "A")])
        self.state.calculate()
        self.state.dismiss_result()
        self.assertFalse(self.state.is_result_open)
        self.assertFalse(self.state.should_celebrate)


if __name__ == "__main__":
    unittest.main()
