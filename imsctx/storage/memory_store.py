import copy
import logging
from collections.abc import Mapping
from typing import Any, Optional

from imsctx.errors import InvalidArgumentError
from imsctx.storage.config_store import LOCATIONS, Location

logger = logging.getLogger(__name__)


def _deep_merge(base: Any, override: Any) -> Any:
    """Merge override into base recursively, override wins on leaves"""
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        merged = dict(base)
        for key, value in override.items():
            merged[key] = _deep_merge(merged[key], value) if key in merged else value
        return merged
    return override


def _lookup(data: Any, keys):
    node = data
    for key in keys:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node


class MemoryConfigStore:
    """In-process local/global config store (nothing is persisted)"""

    def __init__(self, local_data: Optional[dict] = None, global_data: Optional[dict] = None):
        """Initialize the store with optional seed data for each location"""
        self._tiers: dict[str, dict] = {
            'local': copy.deepcopy(local_data or {}),
            'global': copy.deepcopy(global_data or {}),
        }
        self._merged: dict = {}
        self.reload_count = 0
        self._build_merged()

    def _build_merged(self):
        """Rebuild the combined view, local values override global ones"""
        self._merged = _deep_merge(self._tiers['global'], self._tiers['local'])

    def _split(self, path: str):
        """Split a dot path into keys; an empty path addresses the root"""
        return [k for k in path.split('.') if k] if path else []

    def reload(self):
        """Refresh the combined view from both locations"""
        self.reload_count += 1
        self._build_merged()
        logger.debug('reloaded config store (%d)', self.reload_count)

    def get(self, path: str, location: Optional[Location] = None) -> Any:
        """Get a value from the combined view, or from one location if given"""
        keys = self._split(path)
        if location is None:
            return copy.deepcopy(_lookup(self._merged, keys))
        if location not in LOCATIONS:
            raise InvalidArgumentError(f'unknown config location: {location!r}')
        return copy.deepcopy(_lookup(self._tiers[location], keys))

    def set(self, path: str, value: Any, local: bool = False):
        """Replace the value at path, creating intermediate mappings as needed"""
        keys = self._split(path)
        tier = 'local' if local else 'global'
        if not keys:
            if not isinstance(value, Mapping):
                raise InvalidArgumentError('root config value must be a mapping')
            self._tiers[tier] = copy.deepcopy(dict(value))
        else:
            node = self._tiers[tier]
            for key in keys[:-1]:
                child = node.get(key)
                if not isinstance(child, dict):
                    child = {}
                    node[key] = child
                node = child
            node[keys[-1]] = copy.deepcopy(value)
        self._build_merged()
        logger.debug('set %s in %s config', path, tier)
