"""
Token parsers decide what, if anything, a single segment of text means.

Each parser answers `try_tokenize(text, lexical_class)` with a token or with None.
A ParserChain asks its members in order and takes the first answer it gets,
so earlier members win wherever two parsers would both claim the same text.
"""
from typing import Optional, Sequence

from word2number import w2n
from .ontology import Token, Number, Operator
from . import primitive
from .front_end import WORD, NUMBER, SYMBOL

class TokenParser:
	def try_tokenize(self, text:str, lexical_class:str) -> Optional[Token]:
		raise NotImplementedError(type(self))

	def chained(self, another:"TokenParser") -> "ParserChain":
		return ParserChain([self, another])

class ParserChain(TokenParser):
	""" First match wins. Chaining chains is flat, which makes chaining associative. """
	members: tuple[TokenParser, ...]

	def __init__(self, members:Sequence[TokenParser]):
		flat = []
		for m in members:
			if isinstance(m, ParserChain): flat.extend(m.members)
			else: flat.append(m)
		self.members = tuple(flat)

	def try_tokenize(self, text, lexical_class):
		for m in self.members:
			token = m.try_tokenize(text, lexical_class)
			if token is not None:
				return token

	def __repr__(self): return "<ParserChain %r>" % (self.members,)

def parse_numeral(text:str) -> Optional[float]:
	""" en_US decimal style: digits, optional grouping commas, optional fraction. """
	digits = text.replace(",", "")
	try: return float(digits)
	except ValueError: return None

def parse_spelled_number(text:str) -> Optional[float]:
	"""
	One word, as the segmenter found it. Hyphenated compounds like "twenty-one"
	are one word, and the decoder reads them whole.
	"""
	if text in primitive.NOT_A_NUMBER:
		return None
	try: return float(w2n.word_to_num(text.replace("-", " ")))
	except ValueError: return None

class NumeralParser(TokenParser):
	""" Numerals such as "1,024.5" and spelled-out numbers such as "seven" or "ninety-nine" """
	def try_tokenize(self, text, lexical_class):
		if lexical_class == NUMBER: value = parse_numeral(text)
		elif lexical_class == WORD: value = parse_spelled_number(text)
		else: return None
		if value is not None:
			return Number(value)

	def __repr__(self): return "<NumeralParser>"

class OperatorParser(TokenParser):
	def __init__(self, vocabulary=None):
		self._vocabulary = dict(vocabulary or primitive.OPERATOR_WORDS)

	def try_tokenize(self, text, lexical_class):
		if lexical_class in (WORD, SYMBOL):
			op = self._vocabulary.get(text.lower())
			if op is not None:
				return Operator(op)

	def __repr__(self): return "<OperatorParser>"

class AlwaysZero(TokenParser):
	""" Handy for testing what the rest of the pipeline makes of a stream of zeros. """
	def try_tokenize(self, text, lexical_class): return Number(0)

ALWAYS_ZERO = AlwaysZero()
DEFAULT_PARSER = ParserChain([NumeralParser(), OperatorParser()])
