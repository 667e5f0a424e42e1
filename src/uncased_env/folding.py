from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union


class CaseFolding(Enum):
	ASCII = "ascii"
	UNICODE = "unicode"


@dataclass(frozen=True)
class Folding:
	"""Case operations for one folding mode, resolved once per accessor."""

	mode: CaseFolding
	lower: Callable[[str], str]
	upper: Callable[[str], str]
	eq: Callable[[str, str], bool]


_ASCII_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _ascii_lower(s: str) -> str:
	return s.translate(_ASCII_TO_LOWER)


def _ascii_upper(s: str) -> str:
	return s.translate(_ASCII_TO_UPPER)


def _ascii_eq(a: str, b: str) -> bool:
	# translate() is 1:1 here, so equal lengths are a cheap early out
	if len(a) != len(b):
		return False
	return _ascii_lower(a) == _ascii_lower(b)


def _unicode_lower(s: str) -> str:
	return s.lower()


def _unicode_upper(s: str) -> str:
	return s.upper()


def _unicode_eq(a: str, b: str) -> bool:
	return a.casefold() == b.casefold()


ASCII = Folding(mode=CaseFolding.ASCII, lower=_ascii_lower, upper=_ascii_upper, eq=_ascii_eq)
UNICODE = Folding(mode=CaseFolding.UNICODE, lower=_unicode_lower, upper=_unicode_upper, eq=_unicode_eq)

_FOLDINGS = {
	CaseFolding.ASCII: ASCII,
	CaseFolding.UNICODE: UNICODE,
}


def folding_for(mode: Union[CaseFolding, str]) -> Folding:
	if isinstance(mode, CaseFolding):
		return _FOLDINGS[mode]
	name = str(mode).strip().lower()
	for m in CaseFolding:
		if m.value == name:
			return _FOLDINGS[m]
	choices = ", ".join(m.value for m in CaseFolding)
	raise ValueError(f"unknown case folding {mode!r} (expected one of: {choices})")
