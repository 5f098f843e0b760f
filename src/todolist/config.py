"""Server settings.

Values are resolved from, highest priority first: constructor
arguments, ``TODOLIST_*`` environment variables, ``./.todolist/settings.json``,
``~/.todolist/settings.json``, a ``.env`` file, and the field defaults.

The process uses one settings object. ``get_settings()`` builds it on
first use; ``set_settings()`` replaces it (or clears it with None so the
next call reloads from the environment).
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings as PydanticBaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from todolist.settings_mixins import LoggingSettingsMixin, ServerSettingsMixin

__all__ = [
    "BaseSettings",
    "SettingsValidationError",
    "config_files",
    "get_settings",
    "set_settings",
    "validate_settings",
]


def config_files(app_name: str) -> list[Path]:
    """JSON settings files for an app, highest priority first."""
    return [
        Path.cwd() / f".{app_name}" / "settings.json",
        Path.home() / f".{app_name}" / "settings.json",
    ]


class BaseSettings(ServerSettingsMixin, LoggingSettingsMixin, PydanticBaseSettings):
    """Settings for the todolist server.

    - ServerSettingsMixin: identity, bind address, task defaults
    - LoggingSettingsMixin: log level and format
    """

    model_config = SettingsConfigDict(
        env_prefix="TODOLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[PydanticBaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Slot the JSON settings files between env vars and ``.env``.

        Files that do not exist are skipped.
        """
        json_sources = [
            JsonConfigSettingsSource(settings_cls, json_file=path)
            for path in config_files(cls.model_fields["app_name"].default)
            if path.exists()
        ]
        return (init_settings, env_settings, *json_sources, dotenv_settings)


_settings: BaseSettings | None = None


def get_settings() -> BaseSettings:
    """Return the process settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = BaseSettings()
    return _settings


def set_settings(settings: BaseSettings | None) -> None:
    """Replace the process settings.

    Args:
        settings: Settings to use from now on, or None to reload from
            the environment on the next get_settings() call.
    """
    global _settings
    _settings = settings


class SettingsValidationError(Exception):
    """Raised when settings validation fails."""


def validate_settings(settings: BaseSettings) -> None:
    """Check settings that pydantic cannot validate field by field.

    Raises:
        SettingsValidationError: Listing every problem, one per line.
    """
    errors = []

    if not settings.host:
        errors.append("No host configured. Set TODOLIST_HOST.")

    if not settings.default_status:
        errors.append(
            "Default status must not be blank. Set TODOLIST_DEFAULT_STATUS."
        )

    if errors:
        raise SettingsValidationError("\n".join(errors))
