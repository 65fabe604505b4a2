"""Config settings – environment and ``.env`` loaders."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from listquery.config.settings.base import Settings
from listquery.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class EnvSettingsLoader:
    """Build a settings dataclass from ``{PREFIX}_{FIELD}`` environment variables.

    ``ListQuerySettings.items_per_page`` is read from
    ``LISTQUERY_ITEMS_PER_PAGE``. Unset fields keep their defaults.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = settings_class._prefix.upper()  # noqa: SLF001
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_key = f"{prefix}_{field.name.upper()}" if prefix else field.name.upper()
            raw = os.environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                values[field.name] = self._parse(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"could not build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _parse(raw: str, annotation: Any) -> Any:
        # annotations are strings under ``from __future__ import annotations``
        name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
        if name == "bool":
            return raw.strip().lower() in _TRUTHY
        if name == "int":
            return int(raw)
        return raw


class DotenvSettingsLoader(EnvSettingsLoader):
    """Apply a ``.env`` file to the environment, then read it like :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return super().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader"]
