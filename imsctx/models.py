from dataclasses import dataclass, fields
from typing import Any, Optional


@dataclass(frozen=True)
class KeyNames:
    """Segment names used to compose config store paths"""
    IMS: str = 'ims'
    CONFIG: str = 'config'
    CONTEXTS: str = 'contexts'
    CURRENT: str = 'current'  # under CONFIG
    CLI: str = 'cli'  # under CONTEXTS
    PLUGINS: str = 'plugins'  # under CONFIG

    def to_dict(self) -> dict:
        """Convert key names to a plain dictionary"""
        return {
            'IMS': self.IMS,
            'CONFIG': self.CONFIG,
            'CONTEXTS': self.CONTEXTS,
            'CURRENT': self.CURRENT,
            'CLI': self.CLI,
            'PLUGINS': self.PLUGINS
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create key names from a dictionary (missing entries keep their defaults)"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


DEFAULT_KEY_NAMES = KeyNames()


@dataclass
class ContextInfo:
    """A named context and its data as returned by Context.get"""
    name: Optional[str]
    data: Any = None

