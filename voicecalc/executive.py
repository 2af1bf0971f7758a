"""
This is the overall control for a calculation:
Hear an utterance, echo back what was understood, work it out, and say the answer.

Whatever delivers utterances (a speech recognizer, a terminal, a test) is outside.
So is whatever does something with the answer; it gets told through a Listener.
"""
import sys
from typing import NamedTuple, Iterable, Optional

from .ontology import CalculationError
from .diagnostics import Report
from .front_end import Segmenter, LexicalSegmenter, tokenize
from .parsing import TokenParser, DEFAULT_PARSER
from .processing import TokenProcessor, DEFAULT_PROCESSOR
from .syntax import Expression, build
from .evaluator import evaluate
from .formatting import NumberFormat, EN_US, render

class Configuration(NamedTuple):
	""" Everything locale-bound or pluggable. Immutable, so share it freely. """
	segmenter: Segmenter = LexicalSegmenter()
	parser: TokenParser = DEFAULT_PARSER
	processor: TokenProcessor = DEFAULT_PROCESSOR
	number_format: NumberFormat = EN_US

DEFAULT = Configuration()

class Listener:
	""" Override what you care about. """
	def recognized(self, echo:str): pass
	def evaluated(self, result:str): pass
	def failed(self, utterance:str, error:CalculationError): pass

class ConsoleListener(Listener):
	def __init__(self, report:Report):
		self._report = report
	def recognized(self, echo):
		print(echo)
	def evaluated(self, result):
		print("=", result)
		sys.stdout.flush()
	def failed(self, utterance, error):
		self._report.calculation_failed(utterance, error)
		self._report.complain_to_console()
		self._report.reset()

class VoiceCalculation:
	def __init__(self, configuration:Configuration=DEFAULT, listener:Listener=None, report:Report=None):
		self.configuration = configuration
		self._listener = listener or Listener()
		self._report = report or Report(verbose=0)

	def expression(self, utterance:str) -> Expression:
		cfg = self.configuration
		tokens = tokenize(utterance, cfg.segmenter, cfg.parser, cfg.processor, self._report)
		return build(tokens)

	def calculate(self, utterance:str) -> Optional[str]:
		"""
		Returns the displayable result, or None after telling the listener what went wrong.
		Build errors stop things before the echo; a result too strange to display stops things after.
		"""
		number_format = self.configuration.number_format
		try:
			expression = self.expression(utterance)
			self._listener.recognized(render(expression, number_format))
			result = evaluate(expression)
			self._report.info("Result:", result)
			text = number_format.format(result)
		except CalculationError as ex:
			self._listener.failed(utterance, ex)
			return None
		self._listener.evaluated(text)
		return text

	def run(self, utterances:Iterable[str]) -> int:
		""" Calculate each utterance in turn. Answers the number of failures. """
		failures = 0
		for u in utterances:
			if not u.strip():
				continue
			if self.calculate(u) is None:
				failures += 1
		return failures

def calculate(utterance:str, configuration:Configuration=DEFAULT) -> float:
	""" For library use: The number itself, or the CalculationError explaining why not. """
	cfg = configuration
	return evaluate(build(tokenize(utterance, cfg.segmenter, cfg.parser, cfg.processor)))
