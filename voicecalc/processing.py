"""
Token processors rewrite the raw token sequence before anyone tries to build an expression from it.
"""
from typing import Sequence, Optional

from .ontology import Token, Number

class TokenProcessor:
	def process(self, tokens:Sequence[Token]) -> list[Token]:
		raise NotImplementedError(type(self))

	def chained(self, another:"TokenProcessor") -> "Pipeline":
		return Pipeline([self, another])

class Pipeline(TokenProcessor):
	""" Apply each stage to the output of the one before. """
	stages: tuple[TokenProcessor, ...]

	def __init__(self, stages:Sequence[TokenProcessor]):
		flat = []
		for s in stages:
			if isinstance(s, Pipeline): flat.extend(s.stages)
			else: flat.append(s)
		self.stages = tuple(flat)

	def process(self, tokens):
		tokens = list(tokens)
		for s in self.stages:
			tokens = s.process(tokens)
		return tokens

	def __repr__(self): return "<Pipeline %r>" % (self.stages,)

class NoProcessing(TokenProcessor):
	def process(self, tokens): return list(tokens)

class CollapsingNumbers(TokenProcessor):
	"""
	Spelled-out numbers tend to arrive in pieces: "twenty one" is two number tokens.
	Every run of adjacent numbers becomes one number, their sum.
	Operators pass through untouched and in order.
	"""
	def process(self, tokens):
		result = []
		pending : Optional[float] = None
		first = last = None
		for t in tokens:
			if t.is_number():
				if pending is None:
					pending, first = 0.0, t
				pending += t.value
				last = t
			else:
				if pending is not None:
					result.append(_merged(pending, first, last))
				pending = None
				result.append(t)
		if pending is not None:
			result.append(_merged(pending, first, last))
		return result

def _merged(value:float, first:Number, last:Number) -> Number:
	if first is last:
		return first
	if first.spot is None or last.spot is None:
		return Number(value)
	return Number(value, slice(first.spot.start, last.spot.stop))

NO_PROCESSING = NoProcessing()
COLLAPSING_NUMBERS = CollapsingNumbers()
DEFAULT_PROCESSOR = Pipeline([COLLAPSING_NUMBERS])
