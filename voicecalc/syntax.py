"""
Building an expression out of processed tokens.

The only shape accepted is `number (operator number)*`, with at least one operator.
The builder checks that shape and nothing else: It makes no decisions about precedence.
Those all wait for the evaluator.
"""
from typing import Sequence, NamedTuple, Union, Optional

from .ontology import CalculationError, Token, Number, Operator, Operation

class ShapeError(CalculationError):
	""" The token sequence is not `number (operator number)+` """
	description = "Invalid expression"
	token: Optional[Token] = None

class NoTokens(ShapeError):
	pass

class FirstTokenIsNotANumber(ShapeError):
	description = "The expression should start with a number"
	def __init__(self, token:Token):
		super().__init__(token)
		self.token = token

class OddRemainder(ShapeError):
	""" After the first number, operators and numbers must come in pairs. """
	def __init__(self, remainder:int):
		super().__init__(remainder)
		self.remainder = remainder

class NotOperation(ShapeError):
	description = "Invalid order"
	def __init__(self, token:Token):
		super().__init__(token)
		self.token = token

class NotANumber(ShapeError):
	description = "Invalid order"
	def __init__(self, token:Token):
		super().__init__(token)
		self.token = token

class NoOperations(ShapeError):
	""" A lone number is not a calculation. """

class Expression(NamedTuple):
	"""
	`first`, then each (operation, operand) pair in order of appearance.
	Immutable, so evaluating or rendering it any number of times is harmless.
	"""
	first: float
	pairs: tuple[tuple[Operation, float], ...]

	def operations(self): return [op for op, _ in self.pairs]
	def operands(self): return [self.first] + [n for _, n in self.pairs]

	def chain(self) -> "EvalNode":
		""" A fresh right-growing chain; the caller owns it and may consume it. """
		current = self.first
		for op, n in self.pairs:
			current = EvalNode(current, op, n)
		return current

class EvalNode:
	"""
	One partially-applied binary operation. The left side is either a plain number
	or the predecessor node; the right side is always a plain number.
	The newest node is the head of the chain.
	"""
	left: Union[float, "EvalNode"]
	right: float
	operation: Operation

	def __init__(self, left, operation:Operation, right:float):
		assert isinstance(left, (float, EvalNode)), type(left)
		self.left, self.operation, self.right = left, operation, right

	def __repr__(self): return "(%r %s %r)" % (self.left, self.operation, self.right)

def build(tokens:Sequence[Token]) -> Expression:
	if not tokens:
		raise NoTokens()
	head, rest = tokens[0], tokens[1:]
	if not isinstance(head, Number):
		raise FirstTokenIsNotANumber(head)
	if len(rest) % 2:
		raise OddRemainder(len(rest))
	pairs = []
	for i in range(0, len(rest), 2):
		op, n = rest[i], rest[i+1]
		if not isinstance(op, Operator): raise NotOperation(op)
		if not isinstance(n, Number): raise NotANumber(n)
		pairs.append((op.op, n.value))
	if not pairs:
		raise NoOperations()
	return Expression(head.value, tuple(pairs))
