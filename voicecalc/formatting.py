"""
Numbers for people to read (or for a speech synthesizer to read aloud).

A NumberFormat is plain immutable configuration. Pass one in wherever numbers get shown.
"""
import math
from decimal import Decimal, localcontext, ROUND_HALF_EVEN
from typing import NamedTuple

from boozetools.support.foundation import Visitor
from .ontology import CalculationError

class InvalidResultFormatting(CalculationError):
	description = "Cannot display the result"
	def __init__(self, value:float):
		super().__init__(value)
		self.value = value

class NumberFormat(NamedTuple):
	grouping: str = ","
	decimal_point: str = "."
	max_fraction_digits: int = 3

	def format(self, value:float) -> str:
		""" Round half-even to the allowed fraction digits, group the thousands, and drop trailing zeros. """
		if not math.isfinite(value):
			raise InvalidResultFormatting(value)
		exact = Decimal(repr(float(value)))
		with localcontext() as ctx:
			# Integer digits, fraction digits, and one more for a carry out of rounding.
			ctx.prec = max(28, exact.adjusted() + self.max_fraction_digits + 2)
			quantum = Decimal(1).scaleb(-self.max_fraction_digits)
			d = exact.quantize(quantum, rounding=ROUND_HALF_EVEN)
			if d.is_zero(): d = abs(d)
			text = format(d, ",f")
		if "." in text:
			text = text.rstrip("0").rstrip(".")
		return text.translate({ord(","): self.grouping, ord("."): self.decimal_point})

EN_US = NumberFormat()

class Render(Visitor):
	"""
	Operands and operator symbols in their original order, with nothing in between.
	Works on expressions, on (unconsumed) chains, and on token sequences.
	"""
	def __init__(self, number_format:NumberFormat):
		self._format = number_format

	def visit_Expression(self, expr):
		return self.visit(expr.first) + "".join(self.visit(op) + self.visit(n) for op, n in expr.pairs)

	def visit_EvalNode(self, node):
		return self.visit(node.left) + self.visit(node.operation) + self.visit(node.right)

	def visit_list(self, tokens):
		return "".join(self.visit(t) for t in tokens)

	def visit_Number(self, token): return self.visit(token.value)
	def visit_Operator(self, token): return self.visit(token.op)
	def visit_Operation(self, op): return op.symbol

	def visit_float(self, n):
		# An echo should not fail just because some custom parser produced infinity.
		return self._format.format(n) if math.isfinite(n) else str(n)

def render(subject, number_format:NumberFormat) -> str:
	return Render(number_format).visit(subject)
