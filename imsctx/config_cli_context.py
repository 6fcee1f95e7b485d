import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Union

from imsctx.context import Context
from imsctx.errors import InvalidArgumentError
from imsctx.models import DEFAULT_KEY_NAMES, KeyNames
from imsctx.storage.config_store import ConfigStore
from imsctx.storage.memory_store import MemoryConfigStore
from imsctx.utils.utils import join_path, merge_shallow, validate_plugins

logger = logging.getLogger(__name__)


class ConfigCliContext(Context):
    """Context manager backed by a two-tier (local/global) config store.

    Config values live under ``IMS.CONFIG.<name>`` and contexts under
    ``IMS.CONTEXTS.<name>``. The store is reloaded once on construction.
    """

    def __init__(self, key_names: Union[KeyNames, Mapping, None] = None, store: Optional[ConfigStore] = None):
        if key_names is None:
            key_names = DEFAULT_KEY_NAMES
        elif isinstance(key_names, Mapping):
            key_names = KeyNames.from_dict(key_names)
        super().__init__(key_names)
        self.store = store if store is not None else MemoryConfigStore()
        self.store.reload()
        logger.debug('initialized config context with key names %s', key_names)

    def _config_path(self, *names) -> str:
        return join_path(self.key_names.IMS, self.key_names.CONFIG, *names)

    def _contexts_path(self, *names) -> str:
        return join_path(self.key_names.IMS, self.key_names.CONTEXTS, *names)

    async def get_cli(self) -> Any:
        """Get the CLI context data"""
        logger.debug('get_cli()')
        return await self.get_context_value(self.key_names.CLI)

    async def set_cli(self, context_data: Mapping, local: bool = False, merge: bool = True):
        """Write the CLI context data.

        With merge=True the existing value from the selected location is read
        first and context_data is overlaid on it one level deep (new keys win).
        With merge=False the value is replaced without reading. The
        read-modify-write is not atomic.
        """
        logger.debug('set_cli(%r, local=%s, merge=%s)', context_data, bool(local), bool(merge))
        if not isinstance(context_data, Mapping):
            raise InvalidArgumentError('contextData must be an object')

        path = self._contexts_path(self.key_names.CLI)
        value = context_data
        if merge:
            existing = self.store.get(path, 'local' if local else 'global')
            if existing:
                value = merge_shallow(existing, context_data)
            logger.debug('set_cli: merged %r into %r', context_data, existing)

        self.store.set(path, value, bool(local))

    async def get_plugins(self) -> Any:
        """Return the configured plugins verbatim (None when not configured)"""
        logger.debug('get_plugins()')
        return await self.get_config_value(self.key_names.PLUGINS)

    async def set_plugins(self, plugins: Optional[List[str]], local: bool = False):
        """Replace the configured plugins. None leaves the configuration untouched."""
        logger.debug('set_plugins(%r, local=%s)', plugins, bool(local))
        validate_plugins(plugins)
        if plugins is None:
            return
        await self.set_config_value(self.key_names.PLUGINS, plugins, bool(local))

    async def get_config_value(self, config_name: str) -> Any:
        return self.store.get(self._config_path(config_name))

    async def set_config_value(self, config_name: str, config_value: Any, local: bool):
        self.store.set(self._config_path(config_name), config_value, local)

    async def get_context_value(self, context_name: str) -> Any:
        return self.store.get(self._contexts_path(context_name))

    async def set_context_value(self, context_name: str, context_value: Any, local: bool):
        self.store.set(self._contexts_path(context_name), context_value, local)

    async def context_keys(self) -> List[str]:
        contexts = self.store.get(self._contexts_path())
        return list(contexts) if isinstance(contexts, Mapping) else []
