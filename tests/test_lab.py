"""
Cross-checks: The one-pass reduction, the in-place chain fold,
and Python's own notion of precedence should agree bit for bit,
because all three build the same tree and do the same arithmetic at each node.
"""
import random
import unittest

from voicecalc.ontology import Number, Operator, Operation
from voicecalc import syntax, evaluator

PYTHON_GLYPH = {
	Operation.ADD: "+",
	Operation.SUBTRACT: "-",
	Operation.MULTIPLY: "*",
	Operation.DIVIDE: "/",
}

def random_tokens(rng:random.Random, pairs:int):
	tokens = [Number(rng.randint(1, 9))]
	for _ in range(pairs):
		tokens.append(Operator(rng.choice(list(Operation))))
		tokens.append(Number(rng.choice([rng.randint(1, 9), rng.uniform(0.5, 50)])))
	return tokens

def as_python(expr:syntax.Expression) -> str:
	return repr(expr.first) + "".join(PYTHON_GLYPH[op] + repr(n) for op, n in expr.pairs)

class AgreementTests(unittest.TestCase):

	def test_reduction_matches_python(self):
		rng = random.Random(1234)
		for trial in range(300):
			expr = syntax.build(random_tokens(rng, rng.randint(1, 12)))
			with self.subTest(trial=trial, expr=as_python(expr)):
				self.assertEqual(eval(as_python(expr)), evaluator.evaluate(expr))

	def test_chain_fold_matches_reduction(self):
		rng = random.Random(5678)
		for trial in range(300):
			expr = syntax.build(random_tokens(rng, rng.randint(1, 12)))
			with self.subTest(trial=trial, expr=as_python(expr)):
				self.assertEqual(evaluator.evaluate(expr), evaluator.evaluate_chain(expr.chain()))

	def test_long_chains(self):
		rng = random.Random(42)
		expr = syntax.build(random_tokens(rng, 150))
		self.assertEqual(evaluator.evaluate(expr), evaluator.evaluate_chain(expr.chain()))

	def test_equal_priority_associates_left(self):
		for op in Operation:
			for sibling in Operation:
				if sibling.priority != op.priority:
					continue
				with self.subTest(op=op, sibling=sibling):
					expr = syntax.build([Number(24), Operator(op), Number(4), Operator(sibling), Number(2)])
					expected = sibling.evaluate(op.evaluate(24, 4), 2)
					self.assertEqual(expected, evaluator.evaluate(expr))
					self.assertEqual(expected, evaluator.evaluate_chain(expr.chain()))

if __name__ == '__main__':
	unittest.main()
