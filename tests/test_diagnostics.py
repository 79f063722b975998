import io
import unittest
from unittest import mock

from tsimporter.diagnostics import Report, Misnested

class ReportTests(unittest.TestCase):

	def test_quiet_report_collects_notes(self):
		report = Report()
		self.assertFalse(report.sick())
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			report.duplicate_field("{X:ClassSymbol}", "width")
		self.assertTrue(report.sick())
		self.assertEqual(["Ignored a second field width in '{X:ClassSymbol}'."], report.notes)
		self.assertEqual("", stderr.getvalue())

	def test_verbose_report_speaks_up(self):
		report = Report(verbose=1)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			report.specialized_signature("{X:ClassSymbol}", "createElement")
		self.assertIn("createElement", stderr.getvalue())

	def test_complain_to_console(self):
		report = Report()
		report.note("first")
		report.note("second")
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			report.complain_to_console()
		text = stderr.getvalue()
		self.assertIn("2 declaration(s) could not be imported faithfully:", text)
		self.assertIn("  - first\n  - second\n", text)

	def test_nothing_to_complain_about(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			Report().complain_to_console()
		self.assertEqual("", stderr.getvalue())

	def test_misnested_message(self):
		self.assertEqual("Found package ns in non-package 'C'", str(Misnested("ns", "C")))

if __name__ == '__main__':
	unittest.main()
