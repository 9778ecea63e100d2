"""
Direct interpretation by walking the syntax tree.
Each kind of node has an _eval_ function; the EVALUATE table at the bottom
is built from their annotations, so adding a node type means adding a function.
"""
import math
import operator
import re
from typing import Union
from . import syntax
from .ontology import Nom
from .environment import Environment
from .errors import BlizzardError, ParseLiteralFailure, UnknownFunction, UnsupportedOperation, DivisionByZero
from .primitive import BUILTINS
from .values import VariableType, Variable, RESULT, INT_MIN, INT_MAX, kind_of, render, wrap_integer

EVALUABLE = Union[syntax.Expression, syntax.VariableDeclaration, syntax.Program]

def evaluate(expr:EVALUABLE, env:Environment) -> Union[RESULT, Variable]:
	assert isinstance(env, Environment), env
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	try: return fn(expr, env)
	except BlizzardError as ex: raise ex.blame(expr)

###############################################################################

_INTEGER_TEXT = re.compile(r"[-+]?[0-9]+")
_DECIMAL_TEXT = re.compile(r"[-+]?[0-9]*\.[0-9]+|[-+]?[0-9]+\.[0-9]*")

def _text_literal(text:str) -> str:
	if len(text) < 2: raise ParseLiteralFailure("Text literal %r lacks its delimiters." % text)
	return text[1:-1]  # Exclude the quotation marks

def _integer_literal(text:str) -> int:
	if not _INTEGER_TEXT.fullmatch(text):
		raise ParseLiteralFailure("%r is not an integer." % text)
	value = int(text)
	if not INT_MIN <= value <= INT_MAX:
		raise ParseLiteralFailure("Integer %s is out of range." % text)
	return value

def _decimal_literal(text:str) -> float:
	# float() alone would also take "nan", "1_000.5", and padding.
	if not _DECIMAL_TEXT.fullmatch(text):
		raise ParseLiteralFailure("%r is not a decimal number." % text)
	return float(text)

_LITERAL = {
	syntax.TEXT: _text_literal,
	syntax.INTEGER: _integer_literal,
	syntax.DECIMAL: _decimal_literal,
}

###############################################################################

def _divide_integer(a:int, b:int) -> int:
	if b == 0: raise DivisionByZero("Attempted to divide by zero.")
	quotient = abs(a) // abs(b)
	return quotient if (a < 0) == (b < 0) else -quotient

def _divide_decimal(a:float, b:float) -> float:
	# Plain IEEE-754: no exception, just infinity or not-a-number.
	if b == 0.0:
		if a == 0.0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)
	return a / b

INTEGER_OPS = {
	"*": operator.mul,
	"/": _divide_integer,
	"+": operator.add,
	"-": operator.sub,
}

DECIMAL_OPS = {
	"*": operator.mul,
	"/": _divide_decimal,
	"+": operator.add,
	"-": operator.sub,
}

def _as_decimal(value:Union[int, float]) -> float:
	# For an int this agrees exactly with reparsing its canonical text.
	return float(value)

def arithmetic(op:Nom, lhs:RESULT, rhs:RESULT) -> RESULT:
	"""
	The coercion rules, strictly in order: text beats decimal beats integer.
	Only one operand needs to be of a kind to select that rule.
	"""
	glyph = op.text
	kinds = kind_of(lhs), kind_of(rhs)
	if VariableType.STR in kinds:
		if glyph == "+": return render(lhs) + render(rhs)
		raise UnsupportedOperation("Operation `%s` doesn't exist on type `str`" % glyph, op)
	if None not in kinds:
		if VariableType.DEC in kinds:
			return DECIMAL_OPS[glyph](_as_decimal(lhs), _as_decimal(rhs))
		return wrap_integer(INTEGER_OPS[glyph](lhs, rhs))
	raise UnsupportedOperation("Cannot determine types for operation `%s`" % glyph, op)

###############################################################################

def _eval_literal(expr:syntax.Literal, env:Environment):
	try: resolve = _LITERAL[expr.kind]
	except KeyError: raise NotImplementedError("Unexpected literal kind %r." % expr.kind)
	return resolve(expr.text)

def _eval_identifier(expr:syntax.IdentifierExpression, env:Environment):
	return env.lookup(expr.nom.text)

def _eval_parentheses(expr:syntax.ParenthesesExpression, env:Environment):
	return evaluate(expr.expr, env)

def _binary(expr:syntax.Binary, env:Environment):
	lhs = evaluate(expr.lhs, env)
	rhs = evaluate(expr.rhs, env)
	return arithmetic(expr.op, lhs, rhs)

def _eval_mul_div(expr:syntax.MulDivExpression, env:Environment):
	return _binary(expr, env)

def _eval_add_sub(expr:syntax.AddSubExpression, env:Environment):
	return _binary(expr, env)

def _eval_function_call(expr:syntax.FunctionCall, env:Environment):
	args = [evaluate(a, env) for a in expr.args]
	try: function = BUILTINS[expr.nom.text]
	except KeyError: raise UnknownFunction("Unknown function `%s`" % expr.nom.text, expr.nom) from None
	return function.apply(args)

def _eval_variable_declaration(expr:syntax.VariableDeclaration, env:Environment):
	declared_type = VariableType.from_keyword(expr.type_keyword.text)
	value = evaluate(expr.expr, env)
	try: return env.declare(expr.nom.text, declared_type, value)
	except BlizzardError as ex: raise ex.blame(expr.nom)

def _eval_program(expr:syntax.Program, env:Environment):
	result = None
	for statement in expr.statements:
		result = evaluate(statement, env)
	return result

###############################################################################

EVALUATE = {}
for _k, _v in list(globals().items()):
	if _k.startswith("_eval_"):
		_t = _v.__annotations__["expr"]
		assert isinstance(_t, type), (_k, _t)
		EVALUATE[_t] = _v
