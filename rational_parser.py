from __future__ import annotations
import logging
from typing import List, Tuple
from rational import Rational, InvalidFormat, int_from_decimal

LOG = logging.getLogger(__name__)

SEPARATOR = "/"

# Hand-written scanner for: rational := integer ("/" integer)?
#                           integer  := "-"? digit+
class Tok:
	def __init__(self, kind: str, lex: str = "", pos: int = 0):
		self.kind, self.lex, self.pos = kind, lex, pos

def _reject(text: str, reason: str) -> InvalidFormat:
	LOG.debug("rejecting %r: %s", text, reason)
	return InvalidFormat(text, reason)

def tokenize(text: str) -> List[Tok]:
	# surrounding whitespace is skipped, positions index into text
	s = text
	i, n = len(s) - len(s.lstrip()), len(s.rstrip())
	toks: List[Tok] = []
	while i < n:
		c = s[i]
		if c == SEPARATOR:
			toks.append(Tok('SEP', c, i))
			i += 1; continue
		# ascii digits only, str.isdigit also accepts superscripts
		if c == '-' or '0' <= c <= '9':
			j = i+1 if c == '-' else i
			k = j
			while k < n and '0' <= s[k] <= '9':
				k += 1
			if k == j:
				raise _reject(text, f"sign without digits at {i}")
			toks.append(Tok('INT', s[i:k], i))
			i = k; continue
		raise _reject(text, f"unexpected char {c!r} at {i}")
	return toks

def split_terms(text: str) -> Tuple[str, str]:
	toks = tokenize(text)
	kinds = [t.kind for t in toks]
	if kinds == ['INT']:
		return toks[0].lex, "1"
	if kinds == ['INT', 'SEP', 'INT']:
		return toks[0].lex, toks[2].lex
	if kinds.count('SEP') > 1:
		raise _reject(text, "more than one separator")
	if not toks:
		raise _reject(text, "empty input")
	if kinds and kinds[-1] == 'SEP':
		raise _reject(text, "missing denominator")
	if kinds and kinds[0] == 'SEP':
		raise _reject(text, "missing numerator")
	raise _reject(text, "expected integer or integer/integer")

def parse_rational(text: str) -> Rational:
	if not isinstance(text, str):
		raise TypeError(f"expected str, not {type(text).__name__}")
	num, den = split_terms(text)
	# a zero denominator is left for the constructor to reject
	return Rational(int_from_decimal(num), int_from_decimal(den))
