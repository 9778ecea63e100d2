"""
A simple, light-weight way to pass-around and manipulate points and spans within a collection of sources.
The concept is simple: Use integers, with spans of them associated to specific sources.
Whatever parses a program calls start_segment once per source and insert_token once per token;
syntax nodes then carry plain integer spots.
"""
from bisect import bisect_right
from pathlib import Path
from typing import NamedTuple, Optional

class Span(NamedTuple):
	""" Aimed at whatever prints error messages """
	path: Optional[Path]
	slice: slice

_slices: list[slice] = []
_bounds: list[int] = []
_paths: list[Optional[Path]] = []
_texts: dict[Path, str] = {}

def reset_location_index():
	for it in _slices, _bounds, _paths, _texts: it.clear()
	# Now prepare the "built-in" location, which is location zero:
	start_segment(None)
	insert_token(slice(0,0))

def start_segment(path:Optional[Path], text:Optional[str]=None):
	"""
	Begin a new source. If the text is given, diagnostics will use it
	instead of reading the file back from disk.
	"""
	assert isinstance(path, Path) or path is None
	_bounds.append(len(_slices))
	_paths.append(path)
	if text is not None:
		assert path is not None, "In-memory text needs a name."
		_texts[path] = text

def insert_token(s:slice) -> int:
	index = len(_slices)
	_slices.append(s)
	return index

def source_text(path:Path) -> Optional[str]:
	return _texts.get(path)

def lookup_token(index:int) -> Span:
	segment_index = bisect_right(_bounds, index)-1
	return Span(_paths[segment_index], _slices[index])

def lookup_span(first: int, last:int) -> Span:
	"""
	The stretch of source from one token to another.
	Ends in different sources can't make one stretch, so the left end wins,
	unless it's at the built-in location with nothing to show.
	"""
	left = lookup_token(first)
	right = lookup_token(last)
	if left.path == right.path:
		return Span(left.path, slice(left.slice.start, right.slice.stop))
	return left if left.path is not None else right

reset_location_index()
