"""
Simplest possible environment concept: one flat namespace per program run.

Like a lightly enhanced dictionary, it does not like duplicate keys,
and it never forgets or changes anything once told.
"""
from typing import Iterator
from .errors import DuplicateDeclaration, UndefinedIdentifier
from .values import Variable, VariableType, VALUE

class Environment:
	_variables: dict[str, Variable]
	
	def __init__(self):
		self._variables = {}
	
	def __contains__(self, name:str) -> bool: return name in self._variables
	def __len__(self): return len(self._variables)
	def __iter__(self) -> Iterator[str]: return iter(self._variables)
	def __repr__(self): return "<Environment %s>" % ', '.join(self._variables)
	
	def declare(self, name:str, declared_type:VariableType, value:VALUE) -> Variable:
		if name in self._variables:
			raise DuplicateDeclaration("Variable `%s` is already declared." % name)
		self._variables[name] = variable = Variable(name, declared_type, value)
		return variable
	
	def variable(self, name:str) -> Variable:
		try: return self._variables[name]
		except KeyError: raise UndefinedIdentifier("Unknown identifier `%s`" % name) from None
	
	def lookup(self, name:str) -> VALUE:
		return self.variable(name).value
