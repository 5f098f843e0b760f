"""Settings mixins for the server and for logging.

ServerSettingsMixin: Application identity, bind address and task defaults.
LoggingSettingsMixin: Log verbosity and output format.

Both are plain mixins composed into BaseSettings in config.py.
"""

from typing import Literal

from pydantic import Field, field_validator

from todolist.constants import DEFAULT_STATUS


class ServerSettingsMixin:
    """Settings for the HTTP server.

    Mixin class that provides:
    - Application name (also names the JSON config directory)
    - Bind host and port
    - Debug and threading switches for the Werkzeug server
    - Status assigned to newly created tasks

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="todolist",
        title="App Name",
        description="Application name, also used for the config directory",
    )

    host: str = Field(
        default="0.0.0.0",
        title="Host",
        description="Interface the HTTP server binds to",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        title="Port",
        description="TCP port the HTTP server listens on",
    )
    debug: bool = Field(
        default=False,
        title="Debug",
        description="Run Flask in debug mode",
    )
    threaded: bool = Field(
        default=True,
        title="Threaded",
        description="Serve each request on its own thread",
    )

    default_status: str = Field(
        default=DEFAULT_STATUS,
        title="Default Status",
        description="Status given to every newly created task",
    )

    @field_validator("host", "default_status", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        """Strip surrounding whitespace from text settings."""
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def base_url(self) -> str:
        """URL the server can be reached at from this machine."""
        host = "localhost" if self.host in ("", "0.0.0.0") else self.host
        return f"http://{host}:{self.port}"


class LoggingSettingsMixin:
    """Settings for log output.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )
