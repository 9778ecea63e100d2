"""
The run-time value model.
Basic primitive values play themselves: str is Text, int is Integer, float is Decimal.
Built-in procedures hand back None, which is the ignorable unit value.
"""
import math
from decimal import Decimal as _Digits
from enum import Enum
from typing import NamedTuple, Optional, Union

VALUE = Union[str, int, float]
RESULT = Optional[VALUE]

INT_MIN, INT_MAX = -2**63, 2**63-1

class VariableType(Enum):
	STR = "str"
	INT = "int"
	DEC = "dec"

	@staticmethod
	def from_keyword(keyword:str) -> "VariableType":
		try: return VariableType(keyword)
		except ValueError: raise NotImplementedError("Variable type %s not implemented." % keyword)

class Variable(NamedTuple):
	name: str
	declared_type: VariableType
	value: VALUE

_KINDS = {str: VariableType.STR, int: VariableType.INT, float: VariableType.DEC}

def kind_of(value:RESULT) -> Optional[VariableType]:
	""" Which of the three kinds of value this is, or None for anything else (e.g. the unit value). """
	return _KINDS.get(type(value))

def wrap_integer(n:int) -> int:
	""" Integer arithmetic wraps around at 64 bits, like an unchecked machine word. """
	return (n - INT_MIN) % 2**64 + INT_MIN

def render(value:RESULT) -> str:
	""" The canonical text form, as used by concatenation and by WRITE/WRITELN. """
	if value is None: return ""
	if isinstance(value, float): return render_decimal(value)
	return str(value)

def render_decimal(x:float) -> str:
	"""
	Shortest round-trip digits, in positional notation for exponents -4 through 14
	and in scientific notation otherwise. Integral values carry no trailing ".0".
	"""
	if math.isnan(x): return "NaN"
	if math.isinf(x): return "Infinity" if x > 0 else "-Infinity"
	sign, digits, exponent = _Digits(repr(x)).as_tuple()
	# Scientific exponent of the leading digit:
	magnitude = len(digits) + exponent - 1
	digits = ''.join(map(str, digits)).rstrip("0") or "0"
	if digits == "0": body = "0"
	elif -5 < magnitude < 15:
		if magnitude < 0:
			body = "0." + "0" * (-magnitude - 1) + digits
		elif len(digits) <= magnitude + 1:
			body = digits + "0" * (magnitude + 1 - len(digits))
		else:
			body = digits[:magnitude+1] + "." + digits[magnitude+1:]
	else:
		mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
		body = "%sE%s%02d" % (mantissa, "-" if magnitude < 0 else "+", abs(magnitude))
	return ("-" if sign else "") + body
