"""
This is the overall control for one run of one program:
a fresh environment, the tree-walk, and the bookkeeping afterward.
"""
from typing import Optional, Union
from . import syntax
from .diagnostics import Report
from .environment import Environment
from .errors import BlizzardError
from .evaluator import evaluate
from .values import RESULT, Variable, kind_of

def run_program(program:syntax.Program, report:Report, environment:Optional[Environment]=None) -> Union[RESULT, Variable]:
	"""
	Evaluate every statement in order. The first error stops the run and lands on the report;
	callers check report.sick() to tell a failed run from one that merely produced nothing.
	"""
	assert isinstance(program, syntax.Program), type(program)
	env = Environment() if environment is None else environment
	report.info("Running %d statement(s)." % len(program.statements))
	try:
		return evaluate(program, env)
	except BlizzardError as ex:
		report.runtime_error(ex)
	finally:
		_audit_declarations(env, report)

def _audit_declarations(env:Environment, report:Report):
	for name in env:
		variable = env.variable(name)
		if kind_of(variable.value) is not variable.declared_type:
			report.declared_type_mismatch(variable)
