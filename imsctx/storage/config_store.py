from typing import Any, Literal, Optional, Protocol, runtime_checkable

Location = Literal['local', 'global']
LOCATIONS = ('local', 'global')


@runtime_checkable
class ConfigStore(Protocol):
    """Two-tier key-value store addressed by dot-delimited paths"""

    def get(self, path: str, location: Optional[Location] = None) -> Any:
        """Read the value at path, from one location only if given"""
        ...

    def set(self, path: str, value: Any, local: bool = False) -> None:
        """Replace the value at path in the local or global location"""
        ...

    def reload(self) -> None:
        """Refresh data from the backing medium"""
        ...
