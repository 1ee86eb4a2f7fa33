"""
Both strategies must agree on every program that finishes,
including on the order in which built-ins see their arguments.
"""
import io
import unittest

from stepwise import demos, executive, preamble
from stepwise.diagnostics import UndefinedName, TypeMismatch
from stepwise.forms import app, lam, ref

BIG = 10 ** 6

def both(expr):
	direct = executive.run_direct(expr, preamble.direct_scope())
	stepped = executive.run(expr, preamble.stepped_scope(), BIG).outcome
	return direct, stepped

class CrossStrategyTests(unittest.TestCase):
	
	def test_programs_agree(self):
		for label, expr, expect in [
			("selector", demos.selector(), 55),
			("constant", app(lam("x", "y", ref("y")), 420, 69), 69),
			("captured", app(lam("x", "y", ref("x")), 7, 8), 7),
			("shadowed", app(lam("x", app(lam("x", ref("x")), 2)), 1), 2),
			("factorial", demos.factorial(6), 720),
			("summation", demos.summation(30), 465),
			("countdown", demos.countdown(30), "liftoff"),
			("twice", app(ref("twice"), app(ref("add"), 3), 10), 16),
			("twice twice", app(ref("twice"), ref("twice"), lam("n", app(ref("mul"), ref("n"), 2)), 1), 16),
			("concat", app(ref("concat"), "Hello, ", "World!"), "Hello, World!"),
			("pair", app(ref("pair"), 1, "b"), (1, "b")),
			("length", app(ref("length"), app(ref("pair"), 1, 2)), 2),
			("vector literal", app(lam("v", ref("v")), [1, 2, 3]), (1, 2, 3)),
		]:
			with self.subTest(label):
				direct, stepped = both(expr)
				self.assertEqual(expect, direct.unwrap())
				self.assertEqual(expect, stepped.unwrap())
	
	def test_selectors_agree(self):
		for a, b, expect in [(1, 1, preamble.TRU), (1, 2, preamble.LIE), ("a", "a", preamble.TRU), (1, "1", preamble.LIE)]:
			with self.subTest((a, b)):
				direct, stepped = both(app(ref("eq"), a, b))
				self.assertIs(expect, direct.unwrap())
				self.assertIs(expect, stepped.unwrap())
	
	def test_errors_agree(self):
		for label, expr, kind, message in [
			("integer", app(1, 2), TypeMismatch, "Cannot call integer"),
			("string", app("s", 2), TypeMismatch, "Cannot call string"),
			("vec", app([1], 2), TypeMismatch, "Cannot call vec"),
			("arithmetic", app(ref("add"), 1, "one"), TypeMismatch, "add wants integers, not string"),
			("unbound", app(lam("x", ref("y")), 1), UndefinedName, "y"),
		]:
			with self.subTest(label):
				for outcome in both(expr):
					self.assertIsInstance(outcome.error, kind)
					self.assertEqual(message, str(outcome.error))
	
	def test_side_effects_happen_in_the_same_order(self):
		# Function before argument, and both before the body.
		expr = app(
			app(ref("show"), lam("a", "b", app(ref("show"), ref("b")))),
			app(ref("show"), 1),
			app(ref("show"), 2),
		)
		direct_out, stepped_out = io.StringIO(), io.StringIO()
		direct = executive.run_direct(expr, preamble.direct_scope(direct_out))
		stepped = executive.run(expr, preamble.stepped_scope(stepped_out), BIG).outcome
		self.assertEqual(2, direct.unwrap())
		self.assertEqual(2, stepped.unwrap())
		self.assertEqual("<UserFn a>\n1\n2\n2\n", direct_out.getvalue())
		self.assertEqual(direct_out.getvalue(), stepped_out.getvalue())

if __name__ == '__main__':
	unittest.main()
