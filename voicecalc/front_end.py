"""
Turn an utterance into tokens: Segment the text, ask the token-parser about each segment,
and then submit the resulting token sequence to the token-processor.
"""
from typing import NamedTuple, Iterator, Sequence

from boozetools.scanning import miniscan
from boozetools.scanning.engine import IterableScanner
from .ontology import Token
from .diagnostics import Report

WORD = "word"
NUMBER = "number"
SYMBOL = "symbol"
OTHER = "other"

class Segment(NamedTuple):
	""" A tagged span of the (lower-cased) utterance """
	text: str
	lexical_class: str
	spot: slice

class Segmenter:
	""" Anything with this method can stand in for the default lexical segmenter. """
	def segment(self, text:str) -> Iterator[Segment]:
		raise NotImplementedError(type(self))

# The four rules below are disjoint by their first character, so no rule ever needs a rank.
_lexicon = miniscan.Definition()
_lexicon.ignore(r"\s+")

def _emit(yy:IterableScanner, lexical_class:str):
	yy.token(lexical_class, Segment(yy.match(), lexical_class, yy.slice()))

@_lexicon.on(r"[a-z]+(\-[a-z]+)*")
def _scan_word(yy:IterableScanner): _emit(yy, WORD)

@_lexicon.on(r"[0-9]+(,[0-9][0-9][0-9])*(\.[0-9]+)?")
def _scan_numeral(yy:IterableScanner): _emit(yy, NUMBER)

@_lexicon.on(r"[\-+*/×÷]")
def _scan_symbol(yy:IterableScanner): _emit(yy, SYMBOL)

@_lexicon.on(r"[^a-z0-9\s\-+*/×÷]")
def _scan_other(yy:IterableScanner): _emit(yy, OTHER)

class LexicalSegmenter(Segmenter):
	"""
	Words (hyphenated compounds stay whole), en_US numerals, operator glyphs,
	and one-character leftovers. Whitespace separates but contributes nothing.
	"""
	def segment(self, text:str) -> Iterator[Segment]:
		for _kind, segment in _lexicon.scan(text.lower()):
			yield segment

def tokenize(text:str, segmenter:Segmenter, parser, processor, report:Report=None) -> Sequence[Token]:
	"""
	The parser is consulted once per segment in order of appearance.
	Segments the parser declines simply vanish: that is how "what is" and "the" go away.
	"""
	tokens = []
	for segment in segmenter.segment(text.lower()):
		token = parser.try_tokenize(segment.text, segment.lexical_class)
		if token is None:
			if report: report.info("Dropped", segment)
			continue
		tokens.append(token.at(segment.spot))
	if report: report.info("Tokens:", tokens)
	processed = processor.process(tokens)
	if report and processed != tokens: report.info("Processed:", processed)
	return processed
