"""
This is a calculator for arithmetic spoken (or typed) in plain English.

{0}

For example:

    voicecalc "twenty one plus two times three"

will echo what it understood, and then the answer.

    voicecalc

with no utterances reads them one per line from standard input.

    voicecalc -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="voicecalc",
	description="Calculator for arithmetic in plain English.",
)
parser.add_argument("utterance", nargs="*", help='try "what is six times seven" for example.')
parser.add_argument('-v', "--verbose", action="count", help="Explain the segments and tokens of each utterance on stderr.")
parser.add_argument('-f', "--fraction-digits", type=int, default=3, help="Round answers to this many fraction digits.")
parser.add_argument("--grouping", default=",", help="Thousands separator for answers.")
parser.add_argument("--decimal-point", default=".", help="Decimal separator for answers.")

def run(args):
	from .diagnostics import Report
	from .formatting import NumberFormat
	from .executive import Configuration, VoiceCalculation, ConsoleListener
	report = Report(verbose=args.verbose)
	number_format = NumberFormat(args.grouping, args.decimal_point, args.fraction_digits)
	calculation = VoiceCalculation(Configuration(number_format=number_format), ConsoleListener(report), report)
	utterances = args.utterance or sys.stdin
	failures = calculation.run(utterances)
	return 1 if failures else 0

def main(argv=None):
	args = parser.parse_args(argv)
	if args.fraction_digits < 0:
		parser.error("--fraction-digits cannot be negative")
	if not args.utterance and sys.stdin.isatty():
		print(__doc__.strip().format(parser.format_usage()), file=sys.stderr)
	return run(args)
