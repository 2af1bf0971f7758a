import io
import unittest
from unittest import mock

from voicecalc.executive import VoiceCalculation, Configuration, Listener, calculate
from voicecalc.formatting import NumberFormat
from voicecalc.parsing import ParserChain, NumeralParser, OperatorParser
from voicecalc.processing import NO_PROCESSING
from voicecalc.diagnostics import Report
from voicecalc import cmdline

class UtteranceSmokeTests(unittest.TestCase):
	""" Say things; get numbers; look for no smoke. """

	def test_spoken_arithmetic(self):
		for utterance, expected in [
			("twenty one plus two times three", 27.0),
			("Twenty one plus two", 23.0),
			("what is 6 × 7?", 42.0),
			("2 + 3 * 4", 14.0),
			("10 - 3 - 2", 5.0),
			("20 / 5 / 2", 2.0),
			("ten minus three minus two", 5.0),
			("1,000 divided by 8", 125.0),
			("ninety-nine times 2", 198.0),
			("7 x 6", 42.0),
			("twelve ÷ four", 3.0),
		]:
			with self.subTest(utterance):
				self.assertEqual(expected, calculate(utterance))

	def test_configuration_is_pluggable(self):
		# Without collapsing, "twenty one" is two numbers in a row, which is no good.
		cfg = Configuration(processor=NO_PROCESSING)
		from voicecalc.syntax import NotOperation
		with self.assertRaises(NotOperation):
			calculate("twenty one plus two plus", cfg)
		# Asking the operator parser first changes nothing for these words.
		cfg = Configuration(parser=ParserChain([OperatorParser(), NumeralParser()]))
		self.assertEqual(42.0, calculate("six x seven", cfg))

	def test_session_notifications(self):
		heard = []
		class Recorder(Listener):
			def recognized(self, echo): heard.append(echo)
			def evaluated(self, result): heard.append(result)
		sut = VoiceCalculation(listener=Recorder())
		self.assertEqual("1,000,002", sut.calculate("1,000,000 plus two"))
		self.assertEqual(["1,000,000+2", "1,000,002"], heard)

	def test_number_format_is_per_session(self):
		cfg = Configuration(number_format=NumberFormat(".", ",", 2))
		sut = VoiceCalculation(cfg)
		self.assertEqual("1.234,57", sut.calculate("1234.567 plus 0"))
		self.assertEqual("1,234.567", VoiceCalculation().calculate("1234.567 plus 0"))

	def test_generous_fraction_digits(self):
		sut = VoiceCalculation(Configuration(number_format=NumberFormat(max_fraction_digits=400)))
		self.assertEqual("1,000,000,000,000,000,000", sut.calculate("1,000,000,000 times 1,000,000,000"))
		self.assertEqual("0.5", sut.calculate("one over two"))

	def test_verbose_report_explains(self):
		report = Report(verbose=1)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			VoiceCalculation(report=report).calculate("what is twenty one plus two")
		self.assertIn("Dropped", err.getvalue())
		self.assertNotIn("text=' '", err.getvalue())
		self.assertIn("Result: 23.0", err.getvalue())

class CommandLineTests(unittest.TestCase):

	def test_utterances_from_arguments(self):
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			status = cmdline.main(["twenty one plus two times three"])
		self.assertEqual(0, status)
		self.assertEqual("21+2×3\n= 27\n", out.getvalue())

	def test_utterances_from_stdin(self):
		stdin = io.StringIO("two times two\n\nnine over three\n")
		with mock.patch("sys.stdin", stdin), mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			status = cmdline.main([])
		self.assertEqual(0, status)
		self.assertEqual("2×2\n= 4\n9/3\n= 3\n", out.getvalue())

	def test_failure_sets_exit_status(self):
		with mock.patch("sys.stdout", new_callable=io.StringIO), mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			status = cmdline.main(["one plus one", "plus two"])
		self.assertEqual(1, status)
		self.assertIn("The expression should start with a number", err.getvalue())

	def test_fraction_digits(self):
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			cmdline.main(["-f", "1", "two over three"])
		self.assertTrue(out.getvalue().endswith("= 0.7\n"))

if __name__ == '__main__':
	unittest.main()
