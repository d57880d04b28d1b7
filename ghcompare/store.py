"""Persisted user preferences: the GitHub token and the display theme."""

import json
import os
from pathlib import Path

from ghcompare.exceptions import ConfigurationError
from ghcompare.logging import get_logger

logger = get_logger("store")

TOKEN_KEY = "github_token"
THEME_KEY = "theme"
THEMES = ("light", "dark")


def default_path() -> Path:
    """``$GHCOMPARE_PREFERENCES`` or ``$XDG_CONFIG_HOME/ghcompare/preferences.json``."""
    explicit = os.environ.get("GHCOMPARE_PREFERENCES", "").strip()
    if explicit:
        return Path(explicit).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME", "").strip() or "~/.config"
    return Path(config_home).expanduser() / "ghcompare" / "preferences.json"


class PreferenceStore:
    """Key/value preferences kept in a small JSON file.

    Only two keys are used: the last entered access token and the
    light/dark display preference. Every change is written through to disk.
    """

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path is not None else default_path()
        self._values: dict[str, str] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with self._path.open() as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self._path, e)
            return
        if isinstance(data, dict):
            self._values = {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        # A leftover temp file may carry wider permissions; start fresh
        tmp.unlink(missing_ok=True)
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(self._values, f, indent=2)
            os.replace(tmp, self._path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise

    def get_token(self) -> str | None:
        return self._values.get(TOKEN_KEY) or None

    def set_token(self, token: str | None) -> None:
        """Store ``token``; an empty or missing token removes the stored one."""
        if token:
            self._values[TOKEN_KEY] = token
        else:
            self._values.pop(TOKEN_KEY, None)
        self._save()

    def clear_token(self) -> None:
        self.set_token(None)

    def get_theme(self) -> str | None:
        return self._values.get(THEME_KEY)

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ConfigurationError(f"Invalid theme: {theme!r}. Must be 'light' or 'dark'")
        self._values[THEME_KEY] = theme
        self._save()
