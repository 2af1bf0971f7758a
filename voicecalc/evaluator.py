"""
Reduce an expression to a single number.

The expression arrives in order of appearance, not order of priority.
Evaluation has to act as if conventional precedence had been parsed in:
multiplication and division before addition and subtraction,
and left-to-right among operations of equal priority.

There are two ways in here. `evaluate` is the one to use:
One pass, an operand stack and an operation stack, nothing mutated.
`evaluate_chain` is the older in-place fold over a chain of EvalNodes.
It is quadratic and destroys its input, but it makes a good second opinion.
"""
from typing import Union

from .ontology import Operation
from .syntax import Expression, EvalNode

def evaluate(expression:Expression) -> float:
	operands = [expression.first]
	pending : list[Operation] = []
	for op, n in expression.pairs:
		# Anything already waiting binds at least as tightly, and came first.
		while pending and pending[-1].priority >= op.priority:
			_reduce(operands, pending.pop())
		pending.append(op)
		operands.append(n)
	# What remains has strictly increasing priority, so work from the top down.
	while pending:
		_reduce(operands, pending.pop())
	assert len(operands) == 1, operands
	return operands[0]

def _reduce(operands:list[float], op:Operation):
	right = operands.pop()
	left = operands.pop()
	operands.append(op.evaluate(left, right))

###############################################################################
#
#  The in-place fold.
#

NEIGHBOR = Union[float, EvalNode]

def evaluate_chain(head:NEIGHBOR) -> float:
	""" Consumes the chain: Each fold collapses exactly one node. """
	while isinstance(head, EvalNode):
		head, _ = fold(head, head)
	return head

def fold(node:EvalNode, highest:EvalNode) -> tuple[NEIGHBOR, bool]:
	"""
	Walk back from `node` looking for something that should happen before `highest`.
	A predecessor of equal or greater priority becomes the new candidate,
	which is what makes equal priorities associate to the left.
	On reaching the start of the chain, apply whatever candidate survived.

	Returns what should now stand where `node` stood (or where `highest` stood, once applied)
	and whether the candidate has been applied on the way.
	"""
	predecessor = node.left
	if not isinstance(predecessor, EvalNode):
		return _apply(highest), True
	if predecessor.operation.priority >= highest.operation.priority:
		node.left, _ = fold(predecessor, predecessor)
		return node, False
	folded, applied = fold(predecessor, highest)
	if applied:
		return folded, True
	node.left = folded
	return node, False

def _apply(node:EvalNode) -> NEIGHBOR:
	""" The node disappears; its result lands in whatever stood to its left. """
	left = node.left
	if isinstance(left, EvalNode):
		left.right = node.operation.evaluate(left.right, node.right)
		return left
	return node.operation.evaluate(left, node.right)
