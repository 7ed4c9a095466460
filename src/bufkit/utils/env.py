"""Minimal ``.env`` file loader with typed lookups.

Supported syntax::

    # comment
    // comment
    KEY=value
    /*
    block comment, ``/*`` and ``*/`` must sit on their own lines
    */

Keys are stripped of surrounding whitespace while values are kept verbatim
after the first ``=``.  Lines without ``=`` are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Type, TypeVar, Union

T = TypeVar("T")

logger = logging.getLogger(__name__)

_TRUE = {"1", "t", "T", "true", "TRUE", "True"}
_FALSE = {"0", "f", "F", "false", "FALSE", "False"}

SetFn = Callable[[str, str], None]


class EnvError(ValueError):
    """Raised when an env file cannot be loaded or a value cannot be read."""


def _parse_bool(raw: str) -> bool:
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {raw!r}")


def _parse_int(raw: str) -> int:
    if "_" in raw:
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)


def _parse_float(raw: str) -> float:
    if "_" in raw:
        raise ValueError(f"invalid float: {raw!r}")
    return float(raw)


_PARSERS: Dict[type, Callable[[str], object]] = {
    str: str,
    int: _parse_int,
    float: _parse_float,
    bool: _parse_bool,
}


def load_env(path: Union[str, Path] = ".env") -> "EnvData":
    """Parse ``path`` and return its key/value pairs as :class:`EnvData`.

    Raises :class:`EnvError` when the file cannot be opened or decoded as
    UTF-8, or when it ends inside a block comment.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            lines = [line.rstrip("\n") for line in fh]
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvError(f"failed to load env file '{path}': {exc}") from exc

    config: Dict[str, str] = {}
    in_block = False
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or stripped.startswith("//"):
            continue
        if in_block:
            if stripped == "*/":
                in_block = False
            continue
        if stripped == "/*":
            in_block = True
            continue
        key, sep, value = line.partition("=")
        if sep:
            config[key.strip()] = value

    if in_block:
        raise EnvError("cannot end on a multi-line comment")
    logger.debug("loaded %d keys from %s", len(config), path)
    return EnvData(config)


class EnvData:
    """Parsed env file contents."""

    def __init__(self, config: Optional[Dict[str, str]] = None) -> None:
        self._config: Dict[str, str] = dict(config or {})

    def config(self) -> Dict[str, str]:
        return self._config

    def get(self, name: str, type: Type[T] = str) -> T:  # type: ignore[assignment]
        """Return ``name`` converted to ``type``.

        Raises :class:`EnvError` when the key is missing, the value does not
        parse or ``type`` is unsupported.
        """
        if name not in self._config:
            raise EnvError(f"env key '{name}' not found")
        parser = _PARSERS.get(type)
        if parser is None:
            raise EnvError(f"unsupported type: {type!r}")
        raw = self._config[name]
        try:
            return parser(raw)  # type: ignore[return-value]
        except ValueError as exc:
            raise EnvError(f"env key '{name}' is not a valid {type.__name__}: {raw!r}") from exc

    def get_or_default(self, name: str, default: T, type: Optional[Type[T]] = None) -> T:
        """Like :meth:`get` but returns ``default`` on any lookup failure.

        ``type`` defaults to the type of ``default``.
        """
        try:
            return self.get(name, type or default.__class__)
        except EnvError as exc:
            logger.warning("%s; using default %r", exc, default)
            return default

    def hook(self, fn: Callable[[SetFn], bool]) -> Optional["EnvData"]:
        """Let ``fn`` stage extra values and merge them if it returns ``True``."""
        staged: Dict[str, str] = {}

        def set_value(name: str, value: str) -> None:
            staged[name] = value

        if not fn(set_value):
            return None
        self._config.update(staged)
        return self

    def __contains__(self, name: object) -> bool:
        return name in self._config
