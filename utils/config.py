from dataclasses import dataclass, asdict, fields
import json
from pathlib import Path
from typing import Dict, Optional, Union

from appdirs import user_config_dir

from .logger import APP_NAME, logger

BACKEND_STUB = "stub"
BACKEND_REST = "rest"

def default_config_path() -> Path:
    return Path(user_config_dir(APP_NAME)) / "config.json"

@dataclass
class BookmarksConfig:
    """Settings that select and configure the bookmarks backend"""
    backend: str = BACKEND_STUB
    base_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    recent_resource: str = "bookmarks/recent"
    request_timeout: float = 10.0  # seconds
    strict_folder_lookup: bool = False
    fallback_to_empty_root: bool = False

    def to_dict(self) -> Dict:
        """Convert the config to a dictionary for JSON storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> 'BookmarksConfig':
        """Build a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}", component="Config")
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> 'BookmarksConfig':
        """Load the config file, falling back to defaults when it does not exist."""
        path = Path(path) if path else default_config_path()
        if not path.exists():
            logger.debug(f"No config file at {path}, using defaults", component="Config")
            return cls()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        logger.info(f"Loaded config from {path}", component="Config")
        return cls.from_dict(data)

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        path = Path(path) if path else default_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug(f"Saved config to {path}", component="Config")
        return path
