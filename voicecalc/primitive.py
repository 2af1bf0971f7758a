"""
The primitive vocabulary: which words and glyphs mean which operation.
Keys are lower-case; the front-end lower-cases the utterance before it looks here.
"""

from .ontology import Operation

OPERATOR_WORDS : dict[str, Operation] = {}

def _spoken(operation:Operation, *words:str):
	for w in words:
		assert w == w.lower() and w not in OPERATOR_WORDS, w
		OPERATOR_WORDS[w] = operation

_spoken(Operation.ADD, "+", "plus", "add", "adding")
_spoken(Operation.SUBTRACT, "-", "minus", "subtract", "subtracting")
_spoken(Operation.MULTIPLY, "*", "×", "x", "times", "multiplied")
_spoken(Operation.DIVIDE, "/", "÷", "divided", "over")

# The number-word decoder reads a lone "point" as zero.
NOT_A_NUMBER = frozenset(["point"])
