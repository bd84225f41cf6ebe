"""Variant source backed by a YAML file of assignments.

The file holds a single mapping of variant key to value::

    home_button_color: "#FF0000"
    image: true
    home_headline: Hello again
"""
from __future__ import annotations

import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

import yaml

from common.logging import get_logger
from variants.errors import VariantSourceError

LOGGER = get_logger(__name__)


def load_assignments(path: Path) -> Dict[str, Any]:
    """Read and validate an assignments file."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise VariantSourceError(f"Cannot read variants file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise VariantSourceError(f"Variants file {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise VariantSourceError(f"Variants file {path} must contain a mapping")
    return {str(key): value for key, value in data.items()}


class YamlVariantSource:
    """Read assignments from a YAML file; ``reload`` picks up edits."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._reload_lock = threading.Lock()
        self._state: Mapping[str, Any] = MappingProxyType(load_assignments(self.path))
        LOGGER.debug("Loaded %d variant assignments from %s", len(self._state), self.path)

    def variant(self, key: str, default: Any) -> Any:
        return self._state.get(key, default)

    def state(self) -> Mapping[str, Any]:
        return self._state

    def reload(self) -> bool:
        """Re-read the file. On failure the previous assignments stay active."""

        with self._reload_lock:
            try:
                fresh = load_assignments(self.path)
            except VariantSourceError as exc:
                LOGGER.warning("Keeping previous variant assignments: %s", exc)
                return False
            self._state = MappingProxyType(fresh)
        LOGGER.info("Reloaded %d variant assignments from %s", len(fresh), self.path)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self.path)!r})"
