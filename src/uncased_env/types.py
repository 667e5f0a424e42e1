from __future__ import annotations

from typing import Union

from .folding import Folding


class VarNotPresent(KeyError):
	"""No environment variable matched the requested key.

	Subclasses ``KeyError`` so code written against ``os.environ[...]``
	keeps working. ``key`` is the key as the caller passed it and ``mode``
	is the presentation mode of the lookup (``uncased``, ``lower`` or
	``upper``).
	"""

	def __init__(self, key: str, mode: str) -> None:
		super().__init__(key)
		self.key = key
		self.mode = mode

	def __str__(self) -> str:
		return f"environment variable not present: {self.key!r} ({self.mode} lookup)"


class UncasedKey:
	"""Environment key that compares equal to any casing of itself.

	Only ``==`` and ``!=`` are supported; the wrapped text is never
	transformed and stays available as ``key``. Instances are unhashable
	and unorderable.
	"""

	__slots__ = ("_key", "_folding")

	def __init__(self, key: str, folding: Folding) -> None:
		self._key = key
		self._folding = folding

	@property
	def key(self) -> str:
		return self._key

	def __eq__(self, other: object) -> bool:
		if isinstance(other, UncasedKey):
			return self._folding.eq(self._key, other._key)
		if isinstance(other, str):
			return self._folding.eq(self._key, other)
		return NotImplemented

	def __ne__(self, other: object) -> bool:
		res = self.__eq__(other)
		if res is NotImplemented:
			return res
		return not res

	__hash__ = None  # type: ignore[assignment]

	def __str__(self) -> str:
		return self._key

	def __repr__(self) -> str:
		return f"UncasedKey({self._key!r}, {self._folding.mode.value})"


KeyLike = Union[str, UncasedKey]


def _key_text(key: KeyLike) -> str:
	if isinstance(key, UncasedKey):
		return key.key
	if isinstance(key, str):
		return key
	raise TypeError(f"environment key must be str or UncasedKey, not {type(key).__name__}")
