from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

_ENV_FILENAME = ".env"
_KEY_NAME = "YOUTUBE_API_KEY"
_APP_DIR = "yt-ranker"

DEFAULT_MAX_RESULTS = 5
DEFAULT_MAX_COMMENTS = 50
DEFAULT_WORKERS = 5
DEFAULT_TIMEOUT = 10.0  # seconds, per API call
DEFAULT_DURATION = "medium"  # any | short | medium | long

DEFAULT_ALPHA = 0.7
DEFAULT_BETA = 0.3


class MissingApiKeyError(RuntimeError):
    """Raised when no YouTube API key can be found anywhere."""


def get_api_key() -> str:
    """
    Returns the YouTube API key.

    Lookup order:
      1) Real environment variable: YOUTUBE_API_KEY
      2) Repo-local .env (dev convenience)
      3) Per-user config file
    """
    key = os.getenv(_KEY_NAME)
    if key:
        return key

    _load_dotenv_if_present()
    key = os.getenv(_KEY_NAME)
    if key:
        return key

    _load_user_config_if_present()
    key = os.getenv(_KEY_NAME)
    if key:
        return key

    raise MissingApiKeyError(
        f"{_KEY_NAME} not set.\n"
        "Set it in your environment, run `yt-ranker set-key KEY`, or create a config file:\n\n"
        f"  {user_config_path()}\n"
        f"  {_KEY_NAME}=YOUR_KEY_HERE\n"
    )


def save_api_key(key: str) -> Path | None:
    """
    Saves the API key to the per-user config file and returns its path.
    Blank keys are ignored.
    """
    key = (key or "").strip()
    if not key:
        return None

    path = user_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{_KEY_NAME}={key}\n", encoding="utf-8")
    return path


def _load_dotenv_if_present() -> None:
    _load_env_file(_find_repo_root() / _ENV_FILENAME)


def _load_user_config_if_present() -> None:
    _load_env_file(user_config_path())


def _load_env_file(path: Path) -> None:
    """
    Copies KEY=VALUE pairs from an env-style file into os.environ.
    Real environment variables always win; unreadable files are ignored.
    """
    if not path.is_file():
        return
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return

    for name, value in filter(None, map(_parse_env_line, lines)):
        os.environ.setdefault(name, value)


def _parse_env_line(line: str) -> Optional[Tuple[str, str]]:
    # "# comment", blank and key-less lines yield None
    name, sep, value = line.strip().partition("=")
    name = name.strip()
    if not sep or not name or name.startswith("#"):
        return None
    return name, value.strip().strip("\"'")


def user_config_path() -> Path:
    """
    %APPDATA%\\yt-ranker\\config.env on Windows
    ~/.config/yt-ranker/config.env on macOS/Linux
    """
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        config_dir = Path(appdata)
    else:
        config_dir = Path.home() / ".config"
    return config_dir / _APP_DIR / "config.env"


def _find_repo_root() -> Path:
    """
    Nearest ancestor of cwd holding main.py or .git; cwd itself otherwise.
    """
    cwd = Path.cwd()
    markers = ("main.py", ".git")
    return next(
        (d for d in (cwd, *cwd.parents) if any((d / m).exists() for m in markers)),
        cwd,
    )
