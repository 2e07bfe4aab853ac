"""Configuration: frozen Config with environment resolution and scoping.

The configuration only affects boundary behavior (``verdict.http``); the
outcome types themselves have no tunables.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
import os
from typing import TYPE_CHECKING

import dotenv

from verdict.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator

ENV_PREFIX = "VERDICT_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Immutable configuration for outcome-to-response mapping.

    Example:
        config = Config(unknown_code_status=500)
        with config_scope(config):
            status_for(err("Teapot", "short and stout"))  # 500
    """

    #: Status used for error codes outside ``ResultCode``.
    unknown_code_status: int = 200
    #: Log every failure mapped by ``verdict.http`` at INFO.
    log_failures: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if isinstance(self.unknown_code_status, bool) or not isinstance(
            self.unknown_code_status, int
        ):
            raise ConfigurationError(
                "unknown_code_status must be an int, "
                f"got {type(self.unknown_code_status).__name__}",
            )
        if not 100 <= self.unknown_code_status <= 599:
            raise ConfigurationError(
                f"unknown_code_status must be in 100..599, got {self.unknown_code_status}",
                hint="Use a standard HTTP status such as 200 or 500.",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``VERDICT_*`` variables (and a ``.env`` file).

        Recognized variables: ``VERDICT_UNKNOWN_CODE_STATUS`` and
        ``VERDICT_LOG_FAILURES``. Unset variables keep their defaults.
        """
        dotenv.load_dotenv()

        kwargs: dict[str, int | bool] = {}
        raw_status = os.environ.get(f"{ENV_PREFIX}UNKNOWN_CODE_STATUS")
        if raw_status is not None:
            try:
                kwargs["unknown_code_status"] = int(raw_status.strip())
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_PREFIX}UNKNOWN_CODE_STATUS must be an integer, got {raw_status!r}",
                    hint="Set it to an HTTP status code, e.g. 200.",
                ) from None

        raw_log = os.environ.get(f"{ENV_PREFIX}LOG_FAILURES")
        if raw_log is not None:
            kwargs["log_failures"] = _coerce_bool(raw_log, f"{ENV_PREFIX}LOG_FAILURES")

        return cls(**kwargs)  # type: ignore[arg-type]


def _coerce_bool(value: str, env_key: str) -> bool:
    """Convert string to boolean using common conventions."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{env_key} must be a boolean, got {value!r}",
        hint="Use one of: 1, true, yes, on, 0, false, no, off.",
    )


_SCOPED: contextvars.ContextVar[Config | None] = contextvars.ContextVar(
    "verdict_config", default=None
)
_process_config: Config | None = None


def get_config() -> Config:
    """Return the active configuration.

    A ``config_scope`` wins over the process-wide config, which is resolved
    from the environment on first use unless ``set_config`` was called.
    """
    global _process_config
    scoped = _SCOPED.get()
    if scoped is not None:
        return scoped
    if _process_config is None:
        _process_config = Config.from_env()
    return _process_config


def set_config(config: Config | None) -> None:
    """Replace the process-wide configuration; None re-resolves from the environment."""
    global _process_config
    if config is not None and not isinstance(config, Config):
        raise ConfigurationError(
            f"expected a Config, got {type(config).__name__}",
        )
    _process_config = config


@contextmanager
def config_scope(config: Config) -> Generator[Config]:
    """Temporarily activate ``config`` for the current context.

    Safe for threads and asyncio tasks; the previous value is restored on exit.
    """
    if not isinstance(config, Config):
        raise ConfigurationError(f"expected a Config, got {type(config).__name__}")
    token = _SCOPED.set(config)
    try:
        yield config
    finally:
        _SCOPED.reset(token)
