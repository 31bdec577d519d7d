"""
This file aggregates the small vocabulary of types, constants and exception types
which the character-set pattern builder deals in.

There are two kinds of things here. First, the input side: a caller may hand over
a lone character or a whole collection, and the entry point wants to know which
without sniffing again later. Second, the output side: the run-collapsing pass
produces a stream of tokens, each of which knows how to spell itself inside a
bracket expression. Neither side knows anything about the algorithm in between.
"""

from typing import NamedTuple, Any, Union

CodePoint = int
MAX_CODEPOINT : CodePoint = 0x10FFFF

# These three are troublemakers inside a bracket expression.
CLOSE_BRACKET = ']'
CARET = '^'
DASH = '-'

# Matches any one character, line terminators included.
ANY_CHARACTER = r'(?:.|\n)'

class CharsetError(ValueError):
	""" Base class of all exceptions arising from the character-set machinery. """

class InvalidArgument(CharsetError):
	"""
	Raised when something which ought to be one character is not.
	Parameter is the offending item, also available as `.item`.
	"""
	gripe = "Expected a single character (a one-character string or a code point)."
	def __init__(self, item):
		super().__init__(self.gripe, item)
		self.item = item

class SingleCharacter(NamedTuple):
	item: Any

class CharacterSequence(NamedTuple):
	items: tuple

TaggedInput = Union[SingleCharacter, CharacterSequence]

def in_bracket(codepoint:CodePoint) -> str:
	"""
	Spell one code point so Python's `re` reads it literally within [...].
	Placement of the three troublemakers is the assembler's problem, not this one's.
	"""
	char = chr(codepoint)
	if char in '\\[': return '\\'+char
	return char

class Literal(NamedTuple):
	codepoint: CodePoint
	def render(self) -> str: return in_bracket(self.codepoint)

class Range(NamedTuple):
	first: CodePoint
	last: CodePoint
	def render(self) -> str: return in_bracket(self.first)+DASH+in_bracket(self.last)

Token = Union[Literal, Range]
