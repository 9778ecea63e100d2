"""
The set of parse-nodes in simple form.
Whatever parses Blizzard text builds a tree out of these constructors,
bottom-up, and hands the resulting Program to the evaluator.
The evaluator only ever reads these; it never adds or changes fields.
"""
from typing import Sequence
from .ontology import Phrase, Nom, Expression

TEXT, INTEGER, DECIMAL = "string", "integer", "decimal"

class Literal(Expression):
	"""
	The raw text of a literal token, along with which kind of token it was.
	Turning the text into a value is the evaluator's business.
	"""
	def __init__(self, kind:str, text:str, spot:int=None):
		assert isinstance(text, str), type(text)
		assert isinstance(spot, int) or spot is None, type(spot)
		self.kind, self.text, self._spot = kind, text, spot or 0

	def __str__(self): return self.text
	def __repr__(self): return "<Literal %s %s>" % (self.kind, self.text)
	def left(self): return self._spot
	def right(self): return self._spot

def text_literal(text:str, spot:int=None): return Literal(TEXT, text, spot)
def integer_literal(text:str, spot:int=None): return Literal(INTEGER, text, spot)
def decimal_literal(text:str, spot:int=None): return Literal(DECIMAL, text, spot)

class IdentifierExpression(Expression):
	def __init__(self, nom:Nom): self.nom = nom
	def __str__(self): return self.nom.text
	def left(self): return self.nom.left()
	def right(self): return self.nom.right()

class ParenthesesExpression(Expression):
	""" Purely a grouping node. """
	def __init__(self, expr:Expression): self.expr = expr
	def __str__(self): return "(%s)" % self.expr
	def left(self): return self.expr.left()
	def right(self): return self.expr.right()

class Binary(Expression):
	GLYPHS = frozenset()
	def __init__(self, lhs:Expression, op:Nom, rhs:Expression):
		assert op.text in self.GLYPHS, (type(self), op.text)
		self.lhs, self.op, self.rhs = lhs, op, rhs
	def __str__(self): return "%s %s %s" % (self.lhs, self.op.text, self.rhs)
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()

class MulDivExpression(Binary): GLYPHS = frozenset("*/")
class AddSubExpression(Binary): GLYPHS = frozenset("+-")

class FunctionCall(Expression):
	def __init__(self, nom:Nom, args:Sequence[Expression]):
		self.nom, self.args = nom, tuple(args)

	def __str__(self):
		return "%s(%s)" % (self.nom.text, ', '.join(map(str, self.args)))

	def left(self): return self.nom.left()
	def right(self): return (self.args[-1] if self.args else self.nom).right()

class VariableDeclaration(Phrase):
	"""
	The type keyword is kept as written (a Nom) so that
	a bogus keyword can be pointed at, should one ever get this far.
	"""
	def __init__(self, type_keyword:Nom, nom:Nom, expr:Expression):
		self.type_keyword, self.nom, self.expr = type_keyword, nom, expr
	def __str__(self): return "%s %s = %s" % (self.type_keyword.text, self.nom.text, self.expr)
	def left(self): return self.type_keyword.left()
	def right(self): return self.expr.right()

class Program(Phrase):
	statements: tuple[Phrase, ...]
	def __init__(self, statements:Sequence[Phrase]):
		self.statements = tuple(statements)
	def left(self): return self.statements[0].left() if self.statements else 0
	def right(self): return self.statements[-1].right() if self.statements else 0
