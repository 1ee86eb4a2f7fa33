import unittest

from stepwise.forms import app, lam, ref, form
from stepwise.syntax import Put, Name, Call, Lam

class FormTests(unittest.TestCase):
	
	def test_curried_application(self):
		expected = Call(Call(Lam("x", Lam("y", Name("y"))), Put(420)), Put(69))
		self.assertEqual(expected, app(lam("x", "y", ref("y")), 420, 69))
	
	def test_strings_are_literals(self):
		self.assertEqual(Put("x"), form("x"))
		self.assertEqual(Put((1, 2)), form([1, 2]))
	
	def test_nodes_are_immutable(self):
		node = Call(Name("f"), Put(1))
		with self.assertRaises(AttributeError):
			node.func = Name("g")
	
	def test_repr(self):
		self.assertEqual("Call(Name('f'), Put(1))", repr(app(ref("f"), 1)))

if __name__ == '__main__':
	unittest.main()
