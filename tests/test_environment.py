import unittest

from blizzard.environment import Environment
from blizzard.errors import DuplicateDeclaration, UndefinedIdentifier, ErrorKind
from blizzard.values import Variable, VariableType

class EnvironmentTests(unittest.TestCase):
	
	def setUp(self) -> None:
		self.env = Environment()
	
	def test_declare_then_lookup(self):
		variable = self.env.declare("age", VariableType.INT, 34)
		self.assertEqual(Variable("age", VariableType.INT, 34), variable)
		self.assertEqual(34, self.env.lookup("age"))
		self.assertIs(variable, self.env.variable("age"))
		self.assertIn("age", self.env)
		self.assertEqual(1, len(self.env))
	
	def test_declared_twice(self):
		self.env.declare("name", VariableType.STR, "John Smith")
		with self.assertRaises(DuplicateDeclaration) as cm:
			self.env.declare("name", VariableType.STR, "Jane Doe")
		self.assertIs(ErrorKind.DUPLICATE_DECLARATION, cm.exception.kind)
		self.assertIn("name", str(cm.exception))
		# The first declaration stands.
		self.assertEqual("John Smith", self.env.lookup("name"))
	
	def test_undefined(self):
		with self.assertRaises(UndefinedIdentifier) as cm:
			self.env.lookup("salary")
		self.assertEqual("Unknown identifier `salary`", str(cm.exception))
	
	def test_errors_are_also_key_errors(self):
		self.env.declare("x", VariableType.INT, 2)
		with self.assertRaises(KeyError): self.env.declare("x", VariableType.INT, 3)
		with self.assertRaises(KeyError): self.env.lookup("y")
	
	def test_each_run_is_fresh(self):
		self.env.declare("x", VariableType.INT, 2)
		self.assertNotIn("x", Environment())

if __name__ == '__main__':
	unittest.main()
