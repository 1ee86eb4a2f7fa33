import unittest

from stepwise.diagnostics import UndefinedName
from stepwise.environment import Environment, null_env

class EnvironmentTests(unittest.TestCase):
	
	def setUp(self) -> None:
		self.root = Environment.fresh().bind("x", 1).bind("y", 2)
	
	def test_lookup_finds_local_binding(self):
		self.assertEqual(1, self.root.lookup("x"))
		self.assertEqual(2, self.root.lookup("y"))
	
	def test_lookup_walks_outward(self):
		inner = self.root.child().child()
		self.assertEqual(2, inner.lookup("y"))
	
	def test_nearest_binding_shadows(self):
		inner = self.root.child().bind("x", "shadow")
		self.assertEqual("shadow", inner.lookup("x"))
		self.assertEqual(1, self.root.lookup("x"))
	
	def test_unbound_name(self):
		with self.assertRaises(UndefinedName) as cm:
			self.root.child().lookup("zebra")
		self.assertEqual("zebra", cm.exception.name)
	
	def test_null_env_knows_nothing(self):
		self.assertRaises(UndefinedName, null_env.lookup, "x")
		self.assertNotIn("x", null_env)
	
	def test_bind_leaves_original_alone(self):
		before = self.root.child()
		after = before.bind("z", 3)
		self.assertIn("z", after)
		self.assertNotIn("z", before)
		self.assertEqual([], before.local_names())
		self.assertRaises(UndefinedName, before.lookup, "z")
	
	def test_bind_overrides_within_the_same_frame(self):
		again = self.root.bind("x", 10)
		self.assertEqual(10, again.lookup("x"))
		self.assertEqual(1, self.root.lookup("x"))
		self.assertIs(again.static_link, self.root.static_link)
	
	def test_child_shares_its_parent(self):
		kid = self.root.child()
		self.assertIs(self.root, kid.static_link)
		self.assertEqual([], kid.local_names())
	
	def test_bind_many(self):
		env = Environment.fresh().bind_many([("a", 1), ("b", 2), ("a", 3)])
		self.assertEqual(3, env.lookup("a"))
		self.assertEqual(2, env.lookup("b"))

if __name__ == '__main__':
	unittest.main()
