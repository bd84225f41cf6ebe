"""Variant overrides taken from environment variables.

``VARIANT_HOME_BUTTON_COLOR='#FF0000'`` assigns ``home_button_color``.  Values
stay strings; the resolver converts them to the type of each variant's
default, so ``VARIANT_HOME_HEADLINE=2024`` is still a valid headline.
"""
from __future__ import annotations

import os
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from common.config import DEFAULT_ENV_PREFIX


def read_env_assignments(prefix: str, environ: Mapping[str, str]) -> Dict[str, str]:
    assignments: Dict[str, str] = {}
    for name, raw in environ.items():
        if not name.startswith(prefix) or len(name) == len(prefix):
            continue
        assignments[name[len(prefix):].lower()] = raw
    return assignments


class EnvVariantSource:
    """Assignments captured from the environment at construction time."""

    def __init__(
        self,
        prefix: str = DEFAULT_ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.prefix = prefix
        env = os.environ if environ is None else environ
        self._state: Mapping[str, Any] = MappingProxyType(read_env_assignments(prefix, env))

    def variant(self, key: str, default: Any) -> Any:
        return self._state.get(key, default)

    def state(self) -> Mapping[str, Any]:
        return self._state

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.prefix!r}, keys={sorted(self._state)})"
