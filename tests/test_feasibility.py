import unittest

from crossfill.data.library import Library
from crossfill.engine.feasibility import check_feasible
from crossfill.engine.grid import Grid


EXTENDED_WORDS = ["CAT", "ARE", "TEA", "CAR", "ATE", "ORE", "WED", "COW", "TED"]


class FeasibilityTests(unittest.TestCase):
    def test_fillable_square(self) -> None:
        library = Library.from_words(EXTENDED_WORDS)
        self.assertIs(check_feasible(Grid(["...", "...", "..."]), library), True)

    def test_too_few_distinct_words(self) -> None:
        library = Library.from_words(["CAT", "ARE", "TEA", "CAR", "ATE"])
        self.assertIs(check_feasible(Grid(["...", "...", "..."]), library), False)

    def test_span_without_candidates(self) -> None:
        library = Library.from_words(["CAT", "A", "B"])
        self.assertIs(check_feasible(Grid(["...."]), library), False)

    def test_prefilled_duplicate(self) -> None:
        library = Library.from_words(["CAT", "ARE", "TEA"])
        self.assertIs(check_feasible(Grid(["CAT", "ARE", "TEA"]), library), False)

    def test_seed_letters_respected(self) -> None:
        library = Library.from_words(EXTENDED_WORDS)
        self.assertIs(check_feasible(Grid(["C..", "...", "..D"]), library), True)
        self.assertIs(check_feasible(Grid(["X..", "...", "..."]), library), False)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
