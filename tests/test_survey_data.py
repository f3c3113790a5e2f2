import dataclasses
import unittest

from survey_report.exceptions import FieldDecodeError, StructuralParseError, SurveyReportError
from survey_report.reporting.models import Report
from survey_report.survey_data import SurveyRecord


class TestSurveyRecord(unittest.TestCase):
    def test_defaults(self):
        record = SurveyRecord()

        self.assertEqual(record.name, "")
        self.assertIsNone(record.Q410)
        self.assertEqual(record.score("Q410"), 0)

    def test_score_passes_values_through(self):
        record = SurveyRecord(Q207=5, Q311=0)

        self.assertEqual(record.score("Q207"), 5)
        self.assertEqual(record.score("Q311"), 0)

    def test_respondent_fallbacks(self):
        self.assertEqual(SurveyRecord(name="Jane", email="j@example.com").respondent, "Jane")
        self.assertEqual(SurveyRecord(email="j@example.com").respondent, "j@example.com")
        self.assertEqual(SurveyRecord().respondent, "unknown")

    def test_record_is_immutable(self):
        record = SurveyRecord(Q207=4)

        with self.assertRaises(dataclasses.FrozenInstanceError):
            record.Q207 = 5


class TestReport(unittest.TestCase):
    def test_has_data(self):
        self.assertFalse(Report(responses=0).has_data)
        self.assertTrue(Report(responses=1).has_data)

    def test_report_is_immutable(self):
        report = Report(responses=3, nps=10.0)

        with self.assertRaises(dataclasses.FrozenInstanceError):
            report.nps = 20.0

    def test_to_dict(self):
        data = Report(responses=2, overall_comments={"Jane": ["ok"]}).to_dict()

        self.assertEqual(data["responses"], 2)
        self.assertIsNone(data["nps"])
        self.assertEqual(data["overall_comments"], {"Jane": ["ok"]})


class TestExceptions(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(StructuralParseError, SurveyReportError))
        self.assertTrue(issubclass(FieldDecodeError, SurveyReportError))
        self.assertTrue(issubclass(SurveyReportError, RuntimeError))

    def test_structural_error_message(self):
        err = StructuralParseError(7, "bad line")

        self.assertEqual(err.records, [])
        self.assertIn("line 7", str(err))
        self.assertIn("bad line", str(err))

    def test_field_error_message(self):
        err = FieldDecodeError(2, "Q207", "x", "not a base-10 integer")

        self.assertIn("Q207", str(err))
        self.assertIn("record 2", str(err))


if __name__ == "__main__":
    unittest.main()
