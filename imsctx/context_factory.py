from collections.abc import Mapping
from typing import Optional, Union

from imsctx.config_cli_context import ConfigCliContext
from imsctx.models import KeyNames
from imsctx.storage.config_store import ConfigStore


def get_context(key_names: Union[KeyNames, Mapping, None] = None, store: Optional[ConfigStore] = None) -> ConfigCliContext:
    """Return a context manager for the given key names and store"""
    return ConfigCliContext(key_names, store)
