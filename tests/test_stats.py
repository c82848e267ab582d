import json
import shutil
import tempfile
import unittest
from pathlib import Path

from keytrainer.app.session_manager import TrainerSession
from keytrainer.stats.stats import SymbolStat, format_summary, write_stats


class SymbolStatTests(unittest.TestCase):
    def test_new_stat_has_zero_error_rate(self) -> None:
        stat = SymbolStat("a")
        self.assertEqual(stat.attempts, 0)
        self.assertEqual(stat.errors, 0)
        self.assertEqual(stat.error_rate(), 0)

    def test_record_attempt_counts_errors_only_when_flagged(self) -> None:
        stat = SymbolStat("a")
        stat.record_attempt(False)
        stat.record_attempt(True)
        stat.record_attempt(True)
        stat.record_attempt(False)
        self.assertEqual(stat.attempts, 4)
        self.assertEqual(stat.errors, 2)
        self.assertAlmostEqual(stat.error_rate(), 0.5)

    def test_counters_never_decrease_and_errors_bounded(self) -> None:
        stat = SymbolStat("q")
        pattern = [True, False, False, True, True, True, False, True, False, False]
        prev_attempts, prev_errors = 0, 0
        for is_error in pattern * 3:
            stat.record_attempt(is_error)
            self.assertGreaterEqual(stat.attempts, prev_attempts)
            self.assertGreaterEqual(stat.errors, prev_errors)
            self.assertLessEqual(stat.errors, stat.attempts)
            self.assertTrue(0.0 <= stat.error_rate() <= 1.0)
            prev_attempts, prev_errors = stat.attempts, stat.errors
        self.assertEqual(stat.attempts, 30)
        self.assertEqual(stat.errors, 15)

    def test_all_errors_gives_rate_one(self) -> None:
        stat = SymbolStat("z")
        for _ in range(3):
            stat.record_attempt(True)
        self.assertEqual(stat.error_rate(), 1.0)


class SummaryOutputTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = Path(tempfile.mkdtemp())

    def tearDown(self) -> None:
        shutil.rmtree(self.tmp, ignore_errors=True)

    def _session(self) -> TrainerSession:
        session = TrainerSession("abc")
        session.report_outcome("a", True)
        session.report_outcome("a", False)
        session.report_outcome("b", False)
        return session

    def test_format_summary_lists_totals_and_ranking(self) -> None:
        text = format_summary(self._session())
        self.assertIn("Total: 2/3 correct", text)
        self.assertIn("Error rate: 33.3%", text)
        self.assertIn("a: 50.0% of 2", text)
        self.assertIn("b: 0.0% of 1", text)
        self.assertNotIn("c:", text)

    def test_format_summary_without_attempts(self) -> None:
        text = format_summary(TrainerSession("ab"))
        self.assertIn("Total: 0/0 correct", text)
        self.assertNotIn("most missed", text)

    def test_write_stats_creates_json(self) -> None:
        out = self.tmp / "nested" / "stats.json"
        write_stats(self._session().summary(), str(out))
        data = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual(data["alphabet"], "abc")
        self.assertEqual(data["total_correct"], 2)
        self.assertEqual(data["total_errors"], 1)
        self.assertEqual(data["difficult"][0]["symbol"], "a")
        self.assertEqual(len(data["symbols"]), 3)


if __name__ == "__main__":
    unittest.main()
