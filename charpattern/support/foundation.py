""" Small is beautiful. These algorithms need no introduction. """

from collections.abc import Iterable
from ..interfaces import CodePoint, Literal, Range

# Above this many members, duplicates are knocked out with a presence map rather than a sort.
PRESENCE_MAP_THRESHOLD = 128

def sort_dedupe(points:Iterable) -> list:
	""" Sort, then skip each item equal to its predecessor. """
	result = []
	for p in sorted(points):
		if not result or result[-1] != p: result.append(p)
	return result

def presence_dedupe(points:list) -> list:
	"""
	Mark each code point in a table spanning the lowest to the highest,
	then read the table back in order. Linear in the size of that span,
	which the character domain keeps bounded.
	"""
	if not points: return []
	low, high = min(points), max(points)
	present = bytearray(high - low + 1)
	for p in points: present[p - low] = 1
	return [low + offset for offset, flag in enumerate(present) if flag]

def choose_dedupe(points:list):
	""" Pick a strategy by size. Which one runs is not observable in the result. """
	if len(points) > PRESENCE_MAP_THRESHOLD: return presence_dedupe
	return sort_dedupe

def dedupe(points:list) -> list:
	""" Sorted, distinct code points. """
	return choose_dedupe(points)(points)

def collapse_runs(points:list) -> list:
	"""
	Given sorted, distinct code points, produce the token stream for a bracket expression.
	A run of three or more consecutive code points becomes a Range; shorter runs stay literal,
	because "a-b" is no shorter than "ab".
	"""
	tokens = []
	def flush(first:CodePoint, last:CodePoint):
		if last - first > 1: tokens.append(Range(first, last))
		else: tokens.extend(Literal(p) for p in range(first, last+1))
	if points:
		first = last = points[0]
		for p in points[1:]:
			if p == last + 1: last = p
			else:
				flush(first, last)
				first = last = p
		flush(first, last)
	return tokens
