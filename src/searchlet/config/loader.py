"""Ambient settings: logging, from YAML and environment.

Sources, highest precedence first:
1. Keyword arguments to ``load_settings``
2. Environment variables, ``SEARCHLET__LOGGING__LEVEL=DEBUG``
3. ``searchlet.yaml`` in the working directory, or the file passed as ``--config``
4. Model defaults

Run options (output directory, javadoc url...) never come from here; they are
resolved from the command line by options.py.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from searchlet.config.models import LoggingConfig
from searchlet.core.errors import ConfigError

DEFAULT_SETTINGS_FILE = "searchlet.yaml"


class SearchletSettings(BaseSettings):
    """Settings without a file layer: env vars over defaults."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCHLET__",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _with_file_layer(file_values: dict[str, Any]) -> type[SearchletSettings]:
    """Subclass whose lowest-precedence source is the given YAML mapping."""

    class FileBackedSettings(SearchletSettings):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (
                init_settings,
                env_settings,
                InitSettingsSource(settings_cls, init_kwargs=file_values),
            )

    return FileBackedSettings


def load_settings(config_file: Path | None = None, **kwargs: Any) -> SearchletSettings:
    """Resolve ambient settings.

    Args:
        config_file: Explicit YAML file; must exist. When None,
            ``./searchlet.yaml`` is used if present.
        **kwargs: Highest-precedence overrides, e.g. ``logging={"level": "DEBUG"}``.

    Raises:
        ConfigError: Missing explicit file, unparseable YAML, or invalid values.
    """
    if config_file is None:
        file_values = _load_yaml(Path.cwd() / DEFAULT_SETTINGS_FILE)
    elif config_file.exists():
        file_values = _load_yaml(config_file)
    else:
        raise ConfigError.file_not_found(str(config_file))

    try:
        return _with_file_layer(file_values)(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
