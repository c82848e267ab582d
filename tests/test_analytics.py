import unittest

import numpy as np

from keytrainer.analytics.difficulty import difficulty_frame, selection_probabilities, stats_frame
from keytrainer.app.session_manager import TrainerSession
from keytrainer.stats.stats import SymbolStat


class StatsFrameTests(unittest.TestCase):
    def test_rows_in_alphabet_order(self) -> None:
        session = TrainerSession("abc")
        session.report_outcome("b", True)
        session.report_outcome("b", False)
        session.report_outcome("c", True)
        df = stats_frame(session)
        self.assertEqual(list(df.columns), ["symbol", "attempts", "errors", "error_rate_pct"])
        self.assertEqual(list(df["symbol"]), ["a", "b", "c"])
        self.assertEqual(list(df["attempts"]), [0, 2, 1])
        self.assertEqual(list(df["error_rate_pct"]), [0.0, 50.0, 100.0])


class DifficultyFrameTests(unittest.TestCase):
    def test_matches_ranked_difficulty(self) -> None:
        session = TrainerSession("abcd")
        for symbol, is_error in [("a", False), ("b", True), ("c", True), ("c", False)]:
            session.report_outcome(symbol, is_error)
        df = difficulty_frame(session, limit=2)
        self.assertEqual(list(df.columns), ["symbol", "error_rate_pct", "attempts"])
        self.assertEqual(list(df["symbol"]), ["b", "c"])
        self.assertEqual(list(df["error_rate_pct"]), [100.0, 50.0])

    def test_empty_session_gives_empty_frame(self) -> None:
        df = difficulty_frame(TrainerSession("ab"))
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), ["symbol", "error_rate_pct", "attempts"])


class SelectionProbabilityTests(unittest.TestCase):
    def test_probabilities_sum_to_one(self) -> None:
        stats = [SymbolStat("a"), SymbolStat("b", 3, 1), SymbolStat("c", 2, 2)]
        probs = selection_probabilities(stats)
        self.assertAlmostEqual(float(probs.sum()), 1.0)
        self.assertTrue(np.all(probs > 0))

    def test_max_to_min_ratio_is_eleven(self) -> None:
        probs = selection_probabilities([SymbolStat("a"), SymbolStat("b", 1, 1)])
        self.assertAlmostEqual(float(probs[1] / probs[0]), 11.0)

    def test_empty_input(self) -> None:
        self.assertEqual(selection_probabilities([]).size, 0)


if __name__ == "__main__":
    unittest.main()
