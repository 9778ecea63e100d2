"""
Build the primitive (built-in) function registry.
Registration happens exactly once, when this module is first imported;
afterwards the registry is a read-only mapping shared by every run.
"""
import sys
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Sequence
from .values import render, RESULT

class Function(NamedTuple):
	name: str
	call: Callable[[Sequence[RESULT]], RESULT]

	def apply(self, args:Sequence[RESULT]) -> RESULT:
		return self.call(args)

def _joined(args:Sequence[RESULT]) -> str:
	return ' '.join(map(render, args))

def _write(args):
	sys.stdout.write(_joined(args))
	sys.stdout.flush()

def _write_line(args):
	sys.stdout.write(_joined(args) + "\n")
	sys.stdout.flush()

_builtin_functions = [
	Function("WRITE", _write),
	Function("WRITELN", _write_line),
]

def register_builtins(functions:Sequence[Function]=()) -> Mapping[str, Function]:
	registry = {}
	for fn in [*_builtin_functions, *functions]:
		assert fn.name not in registry, "Function %s registered twice." % fn.name
		registry[fn.name] = fn
	return MappingProxyType(registry)

BUILTINS = register_builtins()
