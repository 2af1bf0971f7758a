"""
Complaints, and the occasional word of explanation, for whoever is at the console.
"""
import sys, random
from typing import Any, Optional

from boozetools.support.failureprone import SourceText, illustration

from .ontology import CalculationError
from . import syntax, formatting

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Nuts', 'Rats',
	]

	resignations = [
		'I cannot make sense of that.',
		'I have no idea what the right answer is.',
		'Could you say that again?',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects issues for later complaint, and says a bit more when asked to be verbose. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	@property
	def issues(self): return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# The calculation session calls this:
	def calculation_failed(self, utterance:str, ex:CalculationError):
		token = getattr(ex, "token", None)
		spot = getattr(token, "spot", None)
		problem = [] if spot is None else [Annotation(utterance.lower(), spot, _CAPTIONS.get(type(ex), ""))]
		hint = _hint_for(ex)
		self.issue(Pic(ex.description, problem, [hint] if hint else []))

_CAPTIONS = {
	syntax.FirstTokenIsNotANumber: "This is not a number.",
	syntax.NotOperation: "I expected an operator here.",
	syntax.NotANumber: "I expected a number here.",
}

def _hint_for(ex:CalculationError) -> Optional[str]:
	if isinstance(ex, syntax.NoTokens):
		return "I heard no numbers or operators at all."
	if isinstance(ex, syntax.OddRemainder):
		return "Something is missing at the end: numbers and operators have to take turns."
	if isinstance(ex, syntax.NoOperations):
		return "There is only the one number. What should happen to it?"
	if isinstance(ex, formatting.InvalidResultFormatting):
		return "The result came out as %s, which I cannot say as a number." % ex.value

class Pic:
	def __init__(self, intro:str, anns:list["Annotation"], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Annotation:
	text: str
	slice: slice
	caption: str
	def __init__(self, text:str, spot:slice, caption:str=""):
		self.text, self.slice, self.caption = text, spot, caption
	def illustrate(self):
		source = SourceText(self.text)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = self.slice.stop - self.slice.start
		return illustration(single_line, col, width, prefix='    |', caption=self.caption)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
