"""Read environment variables by lower, UPPER or case-insensitive keys.

The functions exported here use ASCII case handling. Import them from
``uncased_env.unicode`` for full Unicode case mapping, or build an
``EnvCase`` for a specific mode or source mapping.
"""

from __future__ import annotations

from .ascii import lower_var, lower_vars, uncased_var, uncased_vars, upper_var, upper_vars
from .folding import CaseFolding, Folding, folding_for
from .types import UncasedKey, VarNotPresent
from .vars import EnvCase, LowerVars, UncasedVars, UpperVars

__all__ = [
	"CaseFolding",
	"EnvCase",
	"Folding",
	"LowerVars",
	"UncasedKey",
	"UncasedVars",
	"UpperVars",
	"VarNotPresent",
	"folding_for",
	"lower_var",
	"lower_vars",
	"uncased_var",
	"uncased_vars",
	"upper_var",
	"upper_vars",
]
