import logging
from typing import Any, List, Optional

from imsctx.errors import ContextNotImplementedError, MissingContextNameError
from imsctx.models import ContextInfo, KeyNames

logger = logging.getLogger(__name__)


class Context:
    """Manage named IMS contexts on top of a configuration backend.

    Subclasses supply the storage primitives (get_config_value,
    set_config_value, get_context_value, set_context_value, context_keys).
    This class adds the current-context fallback and plugin defaults and
    cannot be used on its own.
    """

    def __init__(self, key_names: KeyNames):
        self.key_names = key_names

    async def get_current(self) -> Optional[str]:
        """Get the current context name"""
        logger.debug('get current')
        return await self.get_config_value(self.key_names.CURRENT)

    async def set_current(self, context_name: str):
        """Set the current context name in the local configuration"""
        logger.debug('set current=%s', context_name)
        # always local: current must not conflict with global contexts such as `cli`
        await self.set_config_value(self.key_names.CURRENT, context_name, True)

    async def get(self, context_name: Optional[str] = None) -> ContextInfo:
        """Return the named context, defaulting to the current one.

        If no name is given and no current context is set, the returned
        ContextInfo carries the name as passed and no data.
        """
        logger.debug('get(%s)', context_name)

        if not context_name:
            context_name = await self.get_current()

        if context_name:
            return ContextInfo(name=context_name, data=await self.get_context_value(context_name))

        # missing context and no current context
        return ContextInfo(name=context_name, data=None)

    async def set(self, context_name: Optional[str] = None, context_data: Any = None, local: bool = False):
        """Replace the data of the named context (or of the current one if no name is given).

        Raises MissingContextNameError when no name is given and no current
        context is set.
        """
        logger.debug('set(%s, %r, local=%s)', context_name, context_data, bool(local))

        if not context_name:
            context_name = await self.get_current()
        if not context_name:
            raise MissingContextNameError()

        await self.set_context_value(context_name, context_data, bool(local))

    async def keys(self) -> List[str]:
        """Return the names of the configured contexts"""
        logger.debug('keys()')
        return await self.context_keys()

    async def get_plugins(self) -> Any:
        """Return the configured token creation plugins. None are supported by default."""
        logger.debug('get_plugins() (none)')
        return []

    async def set_plugins(self, plugins: Optional[List[str]], local: bool = False):
        """Persist the list of token creation plugins.

        Backends supporting plugins override this: None leaves the current
        configuration alone, a list (possibly empty) replaces it. Only the
        shape of the argument is validated.
        """
        logger.debug('set_plugins(%r, local=%s)', plugins, bool(local))
        raise ContextNotImplementedError()

    # Backend primitives

    async def get_config_value(self, config_name: str) -> Any:
        raise ContextNotImplementedError()

    async def set_config_value(self, config_name: str, config_value: Any, local: bool):
        raise ContextNotImplementedError()

    async def get_context_value(self, context_name: str) -> Any:
        raise ContextNotImplementedError()

    async def set_context_value(self, context_name: str, context_value: Any, local: bool):
        raise ContextNotImplementedError()

    async def context_keys(self) -> List[str]:
        raise ContextNotImplementedError()
