"""
These most-fundamental classes are separate from the rest
to avoid various circular-import scenarios.
Tokens are what the front-end hands to the expression builder.
Each one remembers where in the utterance it came from, if anywhere,
so that complaints can point at the guilty word.
"""
import math
import operator
from enum import Enum
from typing import Optional

class CalculationError(Exception):
	""" Anything that keeps an utterance from turning into a displayable number. """
	description = "Something went wrong"
	def __str__(self): return self.description

class Token:
	spot: Optional[slice]
	def is_number(self) -> bool: raise NotImplementedError(type(self))
	def at(self, spot:slice) -> "Token": raise NotImplementedError(type(self))

class Number(Token):
	def __init__(self, value:float, spot:slice=None):
		self.value, self.spot = float(value), spot
	def is_number(self): return True
	def at(self, spot:slice): return Number(self.value, spot)
	def __eq__(self, other): return isinstance(other, Number) and other.value == self.value
	def __hash__(self): return hash(self.value)
	def __repr__(self): return "<Number %r>" % self.value

class Operator(Token):
	def __init__(self, op:"Operation", spot:slice=None):
		assert isinstance(op, Operation), op
		self.op, self.spot = op, spot
	def is_number(self): return False
	def at(self, spot:slice): return Operator(self.op, spot)
	def __eq__(self, other): return isinstance(other, Operator) and other.op is self.op
	def __hash__(self): return hash(self.op)
	def __repr__(self): return "<Operator %s>" % self.op.symbol

def _divide(left:float, right:float) -> float:
	# Python raises where IEEE-754 would produce infinity or not-a-number.
	try: return left / right
	except ZeroDivisionError:
		if left == 0 or math.isnan(left): return math.nan
		return math.copysign(math.inf, left) * math.copysign(1.0, right)

class Operation(Enum):
	"""
	Each operation carries its display symbol, its priority, and its arithmetic.
	Higher priority binds tighter.
	"""
	ADD = "+", 5, operator.add
	SUBTRACT = "-", 5, operator.sub
	MULTIPLY = "×", 10, operator.mul
	DIVIDE = "/", 10, _divide

	def __init__(self, symbol:str, priority:int, function):
		self.symbol = symbol
		self.priority = priority
		self.function = function

	def evaluate(self, left:float, right:float) -> float:
		return self.function(float(left), float(right))

	def __str__(self): return self.symbol
