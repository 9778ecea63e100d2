"""
Everything that can go wrong while a Blizzard program runs.
Each of these is fatal to the run that raised it; the executive
turns them into issues on the Report. Bugs in the interpreter itself
show up as NotImplementedError or AssertionError instead, and are not caught.
"""
from enum import Enum
from typing import Optional
from .ontology import Phrase

class ErrorKind(Enum):
	PARSE_LITERAL = "Malformed literal"
	DUPLICATE_DECLARATION = "Duplicate declaration"
	UNDEFINED_IDENTIFIER = "Undefined identifier"
	UNKNOWN_FUNCTION = "Unknown function"
	UNSUPPORTED_OPERATION = "Unsupported operation"
	DIVISION_BY_ZERO = "Division by zero"

class BlizzardError(Exception):
	kind: ErrorKind
	guilty: Optional[Phrase]
	
	def __init__(self, message:str, guilty:Optional[Phrase]=None):
		super().__init__(message)
		self.message, self.guilty = message, guilty
	
	def __str__(self): return self.message
	
	def blame(self, guilty:Phrase) -> "BlizzardError":
		""" Attach the offending phrase, unless something more specific was already attached. """
		if self.guilty is None: self.guilty = guilty
		return self

class ParseLiteralFailure(BlizzardError):
	kind = ErrorKind.PARSE_LITERAL

class DuplicateDeclaration(BlizzardError, KeyError):
	kind = ErrorKind.DUPLICATE_DECLARATION

class UndefinedIdentifier(BlizzardError, KeyError):
	kind = ErrorKind.UNDEFINED_IDENTIFIER

class UnknownFunction(BlizzardError, LookupError):
	kind = ErrorKind.UNKNOWN_FUNCTION

class UnsupportedOperation(BlizzardError):
	kind = ErrorKind.UNSUPPORTED_OPERATION

class DivisionByZero(BlizzardError, ZeroDivisionError):
	kind = ErrorKind.DIVISION_BY_ZERO
