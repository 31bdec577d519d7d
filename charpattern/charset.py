"""
Turn a set of characters into the most compact regular-expression fragment which matches
exactly one member of the set -- or, in inverse mode, exactly one character NOT in the set.

The result is text meant for splicing into a larger pattern that Python's `re` module will
eventually compile. Nothing here compiles or executes a pattern.

The recipe goes like this:

	1. Normalize the argument into either a lone character or a sequence of them.
	2. A lone (or effectively lone) member, not inverted, is just the escaped character.
	3. Otherwise, pull out the three troublemakers: close-bracket, caret, and dash.
	4. Sort and dedupe everything else, then collapse runs of three or more into ranges.
	5. Assemble: "[", optional "^", close-bracket first, the tokens, caret, dash, "]".

Why that order for the troublemakers? A close-bracket is literal only in first position.
A caret is literal anywhere except first position. A dash is literal at either extremity.
There is one awkward customer: a class consisting solely of caret and dash must not
open with the caret, or it negates itself. In that case the dash goes first.

An empty set is either nothing at all (the empty string) or, inverted, anything at all.
"""

import re
from collections.abc import Iterable

from .interfaces import (
	CodePoint, MAX_CODEPOINT, CLOSE_BRACKET, CARET, DASH, ANY_CHARACTER,
	InvalidArgument, SingleCharacter, CharacterSequence, TaggedInput,
)
from .support import foundation
from .support.foundation import PRESENCE_MAP_THRESHOLD

VERBOSE = False

def is_character(item) -> bool:
	if isinstance(item, str): return len(item) == 1
	if isinstance(item, int) and not isinstance(item, bool): return 0 <= item <= MAX_CODEPOINT
	return False

def codepoint(item) -> CodePoint: return item if isinstance(item, int) else ord(item)

def normalize(char_set) -> TaggedInput:
	""" Decide, once and for all, whether we have one character or a sequence of them. """
	if isinstance(char_set, str):
		if len(char_set) == 1: return SingleCharacter(char_set)
		return CharacterSequence(tuple(char_set))
	if isinstance(char_set, Iterable): return CharacterSequence(tuple(char_set))
	return SingleCharacter(char_set)

def literal(item) -> str:
	""" The escaped form of one character, for use outside brackets. """
	if not is_character(item): raise InvalidArgument(item)
	return re.escape(chr(codepoint(item)))

def _members(char_set) -> tuple:
	tagged = normalize(char_set)
	if isinstance(tagged, SingleCharacter):
		if not is_character(tagged.item): raise InvalidArgument(tagged.item)
		return (tagged.item,)
	return tagged.items

def _all_alike(members:tuple) -> bool:
	""" True when the members are all one and the same item, repeated. (True and 1 are not alike.) """
	first = members[0]
	return all(type(item) is type(first) and item == first for item in members)

class _Classification:
	""" Troublemakers flagged; everybody else deduplicated, sorted, and collapsed into tokens. """
	def __init__(self, members:tuple):
		self.close_bracket = self.caret = self.dash = False
		self.sources = {}
		general = []
		for item in members:
			point = codepoint(item)
			self.sources.setdefault(point, []).append(item)
			if point == ord(CLOSE_BRACKET): self.close_bracket = True
			elif point == ord(CARET): self.caret = True
			elif point == ord(DASH): self.dash = True
			else: general.append(point)
		strategy = foundation.choose_dedupe(general)
		self.points = strategy(general)
		self.tokens = foundation.collapse_runs(self.points)
		if VERBOSE: print("Charset of %d members deduplicated by %s to %d distinct, rendered as %d tokens."%(
			len(general),
			strategy.__name__,
			len(self.points),
			len(self.tokens),
		))
	
	def specials(self) -> list:
		return [c for c, flag in [(CLOSE_BRACKET, self.close_bracket), (CARET, self.caret), (DASH, self.dash)] if flag]
	
	def cardinality(self) -> int: return len(self.points) + len(self.specials())
	
	def sole_member(self) -> CodePoint:
		assert self.cardinality() == 1
		if self.points: return self.points[0]
		return ord(self.specials()[0])
	
	def check_sole_member(self):
		""" Every caller-supplied item behind the sole member must really be a character. """
		for item in self.sources[self.sole_member()]:
			if not is_character(item): raise InvalidArgument(item)

def charset_tokens(char_set) -> tuple:
	"""
	The ordered token stream (Literal and Range) for the ordinary members of a set.
	Close-bracket, caret and dash are placed separately, so they never appear here.
	"""
	return tuple(_Classification(_members(char_set)).tokens)

def build_charset_pattern(char_set, inverse:bool=False) -> str:
	"""
	Produce a regular-expression fragment matching one character in `char_set`,
	or with `inverse`, one character not in it.
	
	`char_set` may be a single character (a one-character string or an int code point),
	a string of several characters, or any iterable of characters.
	Raises InvalidArgument if a would-be single character isn't one.
	"""
	members = _members(char_set)
	if not inverse and members and _all_alike(members): return literal(members[0])
	
	cls = _Classification(members)
	if not cls.cardinality(): return ANY_CHARACTER if inverse else ''
	if not inverse and cls.cardinality() == 1:
		cls.check_sole_member()
		return re.escape(chr(cls.sole_member()))
	
	body = ''.join(token.render() for token in cls.tokens)
	head = CLOSE_BRACKET if cls.close_bracket else ''
	tail = (CARET if cls.caret else '') + (DASH if cls.dash else '')
	if not (inverse or head or body) and cls.caret and cls.dash: tail = DASH + CARET
	return '[' + (CARET if inverse else '') + head + body + tail + ']'
