"""Configuration resolver — an immutable, path-addressed parameter tree.

The tree is read from JSON (defaults first, then a user file merged on
top), frozen, and passed explicitly to every feature function.  Values
derived from the key matrix are computed once at construction and are
addressed exactly like ordinary options:

    options.get("key-clusters", "finger", "derived", "row-indices-by-column")
    options.get("key-clusters", "derived", "aliases", "back-plate-key")
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from keycase.matrix.compass import Direction


log = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).resolve().parent / "default_case.json"

_MISSING = object()
_ABSENT = object()


class ConfigReferenceError(Exception):
    """Raised when a configuration path, alias or matrix column does not resolve."""

    def __init__(self, path: Sequence[Any], reason: str = "not found") -> None:
        self.path = tuple(path)
        self.reason = reason
        super().__init__(f"Missing configuration at {format_path(self.path)}: {reason}")


@dataclass(frozen=True)
class KeyAlias:
    """A named key: the cluster it belongs to and its (column, row)."""

    name: str
    cluster: str
    coordinates: tuple[int, int]


def format_path(path: Sequence[Any]) -> str:
    return ".".join(str(p) for p in path) or "<root>"


# ── Options ────────────────────────────────────────────────────────


class Options:
    """Read-only view of a parameter tree plus its derived values."""

    __slots__ = ("_tree",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        tree = _thaw(data)
        _derive(tree)
        object.__setattr__(self, "_tree", _freeze(tree))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Options are immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Options) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Options({sorted(self._tree)})"

    # ── lookup ────────────────────────────────────────────────────

    def get(self, *path: str | int, default: Any = _MISSING) -> Any:
        node: Any = self._tree
        for i, key in enumerate(path):
            if isinstance(node, Mapping) and key in node:
                node = node[key]
            elif isinstance(node, tuple) and isinstance(key, int) and 0 <= key < len(node):
                node = node[key]
            else:
                if default is not _MISSING:
                    return default
                raise ConfigReferenceError(path[: i + 1])
        return node

    def has(self, *path: str | int) -> bool:
        return self.get(*path, default=_ABSENT) is not _ABSENT

    def vector(self, *path: str | int, length: int = 3) -> tuple[float, ...]:
        """A numeric vector of exactly *length* components."""
        value = self.get(*path)
        if not isinstance(value, tuple) or len(value) != length:
            raise ConfigReferenceError(path, f"expected {length} numbers, got {value!r}")
        return tuple(float(v) for v in value)

    def direction(self, *path: str | int) -> Direction:
        token = self.get(*path)
        try:
            return Direction.parse(token)
        except ValueError as e:
            raise ConfigReferenceError(path, str(e)) from None

    def alias(self, name: str) -> KeyAlias:
        entry = self.get("key-clusters", "derived", "aliases", name)
        col, row = entry["coordinates"]
        return KeyAlias(name=name, cluster=entry["cluster"], coordinates=(col, row))

    def row_indices(self, cluster: str, column: int) -> tuple[int, ...]:
        return self.get("key-clusters", cluster, "derived", "row-indices-by-column", column)

    def column_coordinates(self, cluster: str, column: int) -> tuple[tuple[int, int], ...]:
        """All (column, row) pairs of a non-empty matrix column, south to north."""
        path = ("key-clusters", cluster, "derived", "coordinates-by-column", column)
        coords = self.get(*path)
        if not coords:
            raise ConfigReferenceError(path, "matrix column has no rows")
        return coords

    # ── conversion ────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return _thaw(self._tree)

    def with_overrides(self, overrides: Mapping[str, Any]) -> Options:
        """A new Options with *overrides* deep-merged over this tree."""
        return Options(deep_merge(self.to_dict(), overrides))


# ── loading ────────────────────────────────────────────────────────


@lru_cache(maxsize=None)
def _read_json(path: str) -> Mapping[str, Any]:
    return _freeze(json.loads(Path(path).read_text(encoding="utf-8")))


def load_options(path: str | Path | None = None) -> Options:
    """Default parameters, with the JSON file at *path* merged on top."""
    data = _thaw(_read_json(str(DEFAULTS_PATH)))
    if path is not None:
        resolved = Path(path).resolve()
        log.debug("Loading configuration from %s", resolved)
        data = deep_merge(data, _thaw(_read_json(str(resolved))))
    return Options(data)


def options_from_dict(data: Mapping[str, Any], *, defaults: bool = True) -> Options:
    """Build Options from an in-memory dict, optionally over the defaults."""
    if not defaults:
        return Options(data)
    return Options(deep_merge(_thaw(_read_json(str(DEFAULTS_PATH))), data))


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict:
    """Recursively merge mappings; anything else in *overrides* replaces."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# ── derived values ─────────────────────────────────────────────────


def _derive(tree: dict) -> None:
    """Attach per-column row indices, coordinates and the alias table."""
    clusters = tree.setdefault("key-clusters", {})
    aliases: dict[str, dict] = {}

    for name, cluster in clusters.items():
        if name == "derived" or not isinstance(cluster, dict):
            continue
        rows_by_column: list[tuple[int, ...]] = []
        for column in cluster.get("matrix-columns", []):
            if not column:
                rows_by_column.append(())
                continue
            below = int(column.get("rows-below-home", 0))
            above = int(column.get("rows-above-home", 0))
            rows_by_column.append(tuple(range(-below, above + 1)))

        cluster["derived"] = {
            "row-indices-by-column": rows_by_column,
            "coordinates-by-column": [
                [(col, row) for row in rows]
                for col, rows in enumerate(rows_by_column)
            ],
        }

        for alias, coordinates in cluster.get("aliases", {}).items():
            if alias in aliases:
                log.warning("Key alias %r redefined in cluster %r", alias, name)
            col, row = coordinates
            aliases[alias] = {"cluster": name, "coordinates": (int(col), int(row))}

    clusters["derived"] = {"aliases": aliases}


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(v) for v in value]
    return value
