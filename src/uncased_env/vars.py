from __future__ import annotations

import logging
import os
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from .folding import CaseFolding, Folding, folding_for
from .types import KeyLike, UncasedKey, VarNotPresent, _key_text

log = logging.getLogger(__name__)

EnvPairs = List[Tuple[str, str]]


class _SnapshotVars:
	"""Single-pass iterator over a snapshot taken when it was created.

	Later changes to the environment are not visible to an iterator that
	already exists.
	"""

	def __init__(self, pairs: EnvPairs, folding: Folding) -> None:
		self._pairs = iter(pairs)
		self._folding = folding

	def __iter__(self):
		return self

	def __repr__(self) -> str:
		return f"{type(self).__name__}({self._folding.mode.value})"


class UncasedVars(_SnapshotVars):
	def __next__(self) -> Tuple[UncasedKey, str]:
		k, v = next(self._pairs)
		return UncasedKey(k, self._folding), v


class LowerVars(_SnapshotVars):
	def __next__(self) -> Tuple[str, str]:
		k, v = next(self._pairs)
		return self._folding.lower(k), v


class UpperVars(_SnapshotVars):
	def __next__(self) -> Tuple[str, str]:
		k, v = next(self._pairs)
		return self._folding.upper(k), v


def _find(pairs: Iterable[Tuple[object, str]], key: str, mode: str) -> str:
	for k, v in pairs:
		if k == key:
			return v
	log.debug("environment variable %r not present (%s lookup)", key, mode)
	raise VarNotPresent(key, mode)


class EnvCase:
	"""Environment access bound to one case folding mode.

	``environ`` defaults to the live ``os.environ`` and is re-read on every
	call; pass a mapping to read from a prepared copy instead.
	"""

	def __init__(
		self,
		folding: Union[CaseFolding, Folding, str] = CaseFolding.ASCII,
		environ: Optional[Mapping[str, str]] = None,
	) -> None:
		self._folding = folding if isinstance(folding, Folding) else folding_for(folding)
		self._environ = environ

	@property
	def folding(self) -> Folding:
		return self._folding

	@property
	def mode(self) -> CaseFolding:
		return self._folding.mode

	def _snapshot(self) -> EnvPairs:
		environ = os.environ if self._environ is None else self._environ
		return list(environ.items())

	def uncased_vars(self) -> UncasedVars:
		"""Iterate ``(UncasedKey, value)`` pairs; keys compare regardless of case."""
		return UncasedVars(self._snapshot(), self._folding)

	def uncased_var(self, key: KeyLike) -> str:
		"""Return the value of the first variable whose key matches ``key`` in any case."""
		return _find(self.uncased_vars(), _key_text(key), "uncased")

	def lower_vars(self) -> LowerVars:
		"""Iterate ``(key, value)`` pairs with lowercased keys."""
		return LowerVars(self._snapshot(), self._folding)

	def lower_var(self, key: KeyLike) -> str:
		"""Return the value for an already lowercased ``key``.

		The key is matched exactly against the lowercased keys; it is not
		lowercased here.
		"""
		return _find(self.lower_vars(), _key_text(key), "lower")

	def upper_vars(self) -> UpperVars:
		"""Iterate ``(key, value)`` pairs with UPPERCASED keys."""
		return UpperVars(self._snapshot(), self._folding)

	def upper_var(self, key: KeyLike) -> str:
		"""Return the value for an already UPPERCASED ``key``, matched exactly."""
		return _find(self.upper_vars(), _key_text(key), "upper")

	def __repr__(self) -> str:
		return f"EnvCase({self._folding.mode.value})"
