import sys, random
from functools import lru_cache
from typing import Optional, Sequence
from pathlib import Path
from boozetools.support.failureprone import SourceText, illustration

from .location import lookup_span, source_text
from .ontology import Phrase
from .errors import BlizzardError
from .values import Variable, kind_of

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Brrr', 'Burr', 'Crud', 'Curses',
		'Drat', 'Flurries', 'Frostbite', 'Good Grief', 'Great Scott',
		'Heavens', 'Hail and Sleet', 'Icicles', 'Jeepers', 'Nuts', 'Rats',
		'Snowballs', 'Whiteout',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'The path before me is snowed over.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" The single channel for everything a person might need to hear about a run. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the executive calls:

	def runtime_error(self, ex:BlizzardError):
		intro = "%s: %s" % (ex.kind.value, ex.message)
		problem = [Annotation(ex.guilty, "Here")] if ex.guilty is not None else []
		footer = ["The program stopped here. Output it wrote before this point stands."]
		self.issue(Pic(intro, problem, footer))

	def declared_type_mismatch(self, variable:Variable):
		""" Not an error: the language does no coercion at declaration, but it's probably a mistake. """
		self.info("Variable `%s` is declared %s but holds a %s value." % (
			variable.name, variable.declared_type.value, _kind_name(variable.value),
		))

def _kind_name(value) -> str:
	kind = kind_of(value)
	return kind.value if kind else "unit"

class Annotation:
	path: Optional[Path]
	slice: slice
	caption: str
	def __init__(self, node:Phrase, caption:str=""):
		span = lookup_span(*node.span())
		self.path = span.path
		self.slice = span.slice
		self.caption = caption
	def illustrate(self):
		source = _fetch(self.path)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = self.slice.stop - self.slice.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def __str__(self): return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.path is None:
				# The built-in location has no text to show.
				if ann.caption: lines.append("(built-in) "+ann.caption)
				continue
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _fetch(path:Path) -> SourceText:
	# In-memory text can change whenever the location index resets, so only files get cached.
	text = source_text(path)
	if text is not None:
		return SourceText(text, filename=str(path))
	return _read(path)

@lru_cache(5)
def _read(path:Path) -> SourceText:
	with open(path, "r", encoding="utf-8") as fh:
		return SourceText(fh.read(), filename=str(path))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
