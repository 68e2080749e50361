"""Configuration for witness reports.

Values come from ``[tool.witness]`` in the nearest ``pyproject.toml`` and can be
overridden through ``WITNESS_*`` environment variables (a ``.env`` file is read
first).
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from witness.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "WITNESS_"
PYPROJECT = "pyproject.toml"
DOTENV = ".env"


class WitnessConfig(BaseModel):
    """Resolved witness settings.

    Attributes
    ----------
    fatal
        Whether a failed ``check`` raises ``CheckFailedError`` (otherwise it only reports).
    verbose
        Whether a passing ``check`` prints the compared values.
    color
        Whether console output carries color codes.
    rule_width
        Width of the horizontal rule closing each report.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fatal: bool = True
    verbose: bool = False
    color: bool = True
    rule_width: int = Field(default=80, ge=1)


def _find_upwards(name: str, start: Path | None) -> Path | None:
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` looking for a pyproject.toml."""
    return _find_upwards(PYPROJECT, start)


def find_dotenv_file(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` looking for a .env file."""
    return _find_upwards(DOTENV, start)


def _read_pyproject(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    return data.get("tool", {}).get("witness", {})


def _env_overrides() -> dict[str, str]:
    overrides: dict[str, str] = {}
    for name in WitnessConfig.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_config(start: Path | None = None) -> WitnessConfig:
    """Build a WitnessConfig from pyproject.toml and the environment."""
    dotenv_path = find_dotenv_file(start)
    if dotenv_path is not None:
        load_dotenv(dotenv_path)
        logger.debug("Loaded environment from %s", dotenv_path)

    values: dict[str, Any] = {}
    pyproject = find_pyproject(start)
    if pyproject is not None:
        values.update(_read_pyproject(pyproject))
        logger.debug("Loaded witness settings from %s", pyproject)
    values.update(_env_overrides())

    try:
        return WitnessConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"invalid witness configuration: {exc}") from exc


_loaded_config: WitnessConfig | None = None
CONFIG_CONTEXT: ContextVar[WitnessConfig | None] = ContextVar("witness_config", default=None)


def get_config() -> WitnessConfig:
    """Return the config active for the current context, loading it on first use."""
    global _loaded_config

    scoped = CONFIG_CONTEXT.get()
    if scoped is not None:
        return scoped
    if _loaded_config is None:
        _loaded_config = load_config()
    return _loaded_config


def reset_config() -> None:
    """Forget the loaded config so the next ``get_config`` reloads it."""
    global _loaded_config
    _loaded_config = None


@contextmanager
def config_scope(config: WitnessConfig | None = None, **overrides: Any) -> Iterator[WitnessConfig]:
    """Use ``config`` (updated with ``overrides``) for the duration of the block."""
    base = config or get_config()
    scoped = base.model_copy(update=overrides) if overrides else base
    token = CONFIG_CONTEXT.set(scoped)
    try:
        yield scoped
    finally:
        CONFIG_CONTEXT.reset(token)
