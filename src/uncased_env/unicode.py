"""Environment access with full Unicode case mapping and case folding."""

from __future__ import annotations

from .folding import CaseFolding
from .vars import EnvCase

_env = EnvCase(CaseFolding.UNICODE)

uncased_vars = _env.uncased_vars
uncased_var = _env.uncased_var
lower_vars = _env.lower_vars
lower_var = _env.lower_var
upper_vars = _env.upper_vars
upper_var = _env.upper_var

__all__ = ["uncased_vars", "uncased_var", "lower_vars", "lower_var", "upper_vars", "upper_var"]
