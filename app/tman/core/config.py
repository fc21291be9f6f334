"""Settings and runtime configuration.

Settings are read from a TOML file in the config directory and validated
with Pydantic. TrashConfig bundles the settings with the index and storage
locations; it is built once at startup and passed to every component.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError

from tman.core.errors import SettingsError, UnknownError
from tman.core.paths import get_index_path, get_settings_path, get_storage_root
from tman.core.versions import VersionScheme

logger = logging.getLogger(__name__)


class AmbiguityPolicy(str, Enum):
    """What restore does when one name exists at several origins.

    Attributes:
        RESTORE_ALL: Restore every matching entry to its own origin.
        FAIL: Refuse and ask for an origin.
    """

    RESTORE_ALL = "restore-all"
    FAIL = "fail"


class Settings(BaseModel):
    """User settings for tman.

    Attributes:
        use_unicode: Use unicode glyphs in listings.
        use_colors: Use styled output in listings.
        version_scheme: How new version ids are generated.
        ambiguous_restore: Policy for restores matching several origins.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    use_unicode: bool = False
    use_colors: bool = False
    version_scheme: VersionScheme = VersionScheme.TIMESTAMP
    ambiguous_restore: AmbiguityPolicy = AmbiguityPolicy.RESTORE_ALL


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing or empty file yields the defaults, which are written to
    ``path`` so users have a file to edit.

    Args:
        path: Settings file. If None, uses the default settings path.

    Returns:
        Validated Settings.

    Raises:
        SettingsError: If the TOML syntax or a value is invalid.
        UnknownError: If the file exists but cannot be read.
    """
    settings_path = path or get_settings_path()

    try:
        raw = settings_path.read_bytes()
    except FileNotFoundError:
        raw = b""
    except OSError as e:
        raise UnknownError(e) from e

    if not raw.strip():
        settings = Settings()
        _write_defaults(settings, settings_path)
        return settings

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise SettingsError(f"invalid settings in {settings_path.name}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"]) or "$"
        msg = f"invalid settings in {settings_path.name}: '{location}' {error['msg']}"
        raise SettingsError(msg) from e


def _write_defaults(settings: Settings, path: Path) -> None:
    """Write default settings, logging instead of failing on I/O errors."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump(settings.model_dump(mode="json"), f)
    except OSError as e:
        logger.warning("Could not write default settings to %s: %s", path, e)


@dataclass(frozen=True, slots=True)
class TrashConfig:
    """Locations and settings for one run.

    Attributes:
        index_path: JSON file holding the index.
        storage_root: Directory holding one container directory per entry.
        settings: User settings.
    """

    index_path: Path
    storage_root: Path
    settings: Settings

    @classmethod
    def from_environment(cls) -> TrashConfig:
        """Build the configuration from the XDG environment and settings file.

        Raises:
            SettingsError: If the settings file is invalid.
        """
        return cls(
            index_path=get_index_path(),
            storage_root=get_storage_root(),
            settings=load_settings(),
        )
