from collections.abc import Mapping
from typing import Any

from imsctx.errors import InvalidArgumentError


def join_path(*segments) -> str:
    """Join key segments into a dot-delimited store path"""
    return '.'.join(str(s) for s in segments)


def merge_shallow(existing: Any, patch: Mapping) -> dict:
    """Overlay patch on existing one level deep. Returns a new dict, patch keys win."""
    merged = dict(existing) if isinstance(existing, Mapping) else {}
    merged.update(patch)
    return merged


def validate_plugins(plugins):
    """Raise InvalidArgumentError unless plugins is None or a list of strings"""
    if plugins is None:
        return
    if not isinstance(plugins, (list, tuple)):
        raise InvalidArgumentError('plugins must be a list of strings or None')
    for plugin in plugins:
        if not isinstance(plugin, str):
            raise InvalidArgumentError(f'plugin identifier must be a string, got {plugin!r}')
