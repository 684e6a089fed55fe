# vtree/config.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "event_prefix": "on",
    "log_level": "WARNING",
    "host": "memory",
    "warn_on_reentrant_updates": True,
}


class Config:
    """
    Singleton config loader backed by a YAML file (default name: vtree.yaml).

    Values missing from the file fall back to ``DEFAULTS``.

    Usage:
        cfg = Config()                      # loads vtree.yaml if one is found
        prefix = cfg.get("event_prefix")
        level = cfg.get_nested("logging.level", "INFO")
        cfg.reload()                        # re-read the file (useful in dev)

    Parameters:
      config_file: path to the YAML config (relative or absolute). Attempts sensible fallbacks.
    """

    _instance: Optional["Config"] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_file: Union[str, Path] = "vtree.yaml"):
        # initialize only once
        if getattr(self, "_initialized", False):
            return

        self._initialized = True
        self.config_file_arg = str(config_file)
        self._config: Dict[str, Any] = dict(DEFAULTS)
        self._source: Optional[str] = None  # 'file' or None

        self._resolved_config_path: Optional[Path] = self._resolve_config_path(self.config_file_arg)
        self.reload()

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance so the next ``Config()`` loads afresh."""
        cls._instance = None

    # ----- public API -----
    def reload(self) -> None:
        """Re-read the configuration file, keeping defaults for missing keys."""
        self._config = dict(DEFAULTS)
        self._source = None
        data = self._load_file()
        if data:
            self._config.update(data)
            self._source = "file"

    def as_dict(self) -> Dict[str, Any]:
        """Return the effective configuration as a dict."""
        return dict(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """Shallow lookup in the top-level config dict."""
        return self._config.get(key, default)

    def get_nested(self, path: str, default: Any = None, sep: str = ".") -> Any:
        """
        Lookup nested keys using dot-path (e.g. "logging.level").
        Returns default if any step is missing.
        """
        cur = self._config
        if not path:
            return default
        for part in path.split(sep):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur

    @property
    def source(self) -> Optional[str]:
        """Return 'file' or None depending on where config came from."""
        return self._source

    @property
    def resolved_config_path(self) -> Optional[Path]:
        """If a filesystem config was resolved, return its Path, otherwise None."""
        return self._resolved_config_path

    # ----- internal helpers -----
    def _resolve_config_path(self, config_file: str) -> Optional[Path]:
        """
        Try to resolve the YAML config path:
          1. config_file as given (absolute, or relative to cwd)
          2. config_file relative to the project root (parent of the package)
          3. else None
        """
        candidate = Path(config_file)
        if candidate.exists():
            return candidate.resolve()

        project_root = Path(__file__).resolve().parent.parent
        p1 = project_root / config_file
        if not candidate.is_absolute() and p1.exists():
            return p1.resolve()

        return None

    def _load_file(self) -> Optional[Dict[str, Any]]:
        if not self._resolved_config_path:
            return None
        with self._resolved_config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValueError(
                f"Config file {self._resolved_config_path} must hold a mapping, got {type(data).__name__}"
            )
        logger.debug("Loaded config from %s: %s", self._resolved_config_path, sorted(data))
        return data


def get_config(*args, **kwargs) -> Config:
    """
    Convenience factory that returns the singleton Config instance.
    Arguments forwarded to Config() only on the first call.
    """
    return Config(*args, **kwargs)
