# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads argument specs from YAML or TOML files into a `SpecRegistry`."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from clab.exceptions import ClabConfigError
from clab.importer import resolve_action
from clab.logger import logger
from clab.parser.arg_spec import DEFAULT_PREFIX
from clab.parser.registry import SpecRegistry


class RawTag(BaseModel):
    """One tag of a spec entry."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    prefix: str = DEFAULT_PREFIX
    toggle: bool = True


class RawSpec(BaseModel):
    """Raw spec model for CLAB configuration files."""

    model_config = ConfigDict(extra="forbid")

    id: str
    tags: list[RawTag] = Field(default_factory=list)
    consume: int = Field(default=0, ge=0)
    allowed: list[str] | None = None
    required: bool = False
    multiple: bool = False
    over: bool = False
    abort: bool = False
    initial: bool | str | list[str] | None = None
    initial_toggle: bool | None = None
    action: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"name": tag} if isinstance(tag, str) else tag for tag in value]
        return value


class ClabConfig(BaseModel):
    """CLAB configuration model."""

    model_config = ConfigDict(extra="forbid")

    specs: list[RawSpec] = Field(default_factory=list)

    def to_registry(self) -> SpecRegistry:
        registry = SpecRegistry()
        for raw_spec in self.specs:
            configurator = registry.start(raw_spec.id)
            for tag in raw_spec.tags:
                configurator.toggle(tag.toggle, tag.name, tag.prefix)
            configurator.consume(raw_spec.consume, raw_spec.allowed)
            if raw_spec.required:
                configurator.required()
            if raw_spec.multiple:
                configurator.multiple()
            if raw_spec.over:
                configurator.over()
            if raw_spec.abort:
                configurator.abort()
            if raw_spec.initial is not None:
                configurator.initial(raw_spec.initial)
            if raw_spec.initial_toggle is not None:
                configurator.initial(raw_spec.initial_toggle)
            if raw_spec.action:
                try:
                    callback = resolve_action(raw_spec.action)
                except (ImportError, ValueError) as error:
                    logger.error(
                        "Failed to resolve action '%s' for '%s': %s",
                        raw_spec.action,
                        raw_spec.id,
                        error,
                    )
                    raise ClabConfigError(
                        f"Could not resolve action '{raw_spec.action}' for "
                        f"'{raw_spec.id}': {error}",
                        arg_id=raw_spec.id,
                        value=raw_spec.action,
                    ) from error
                configurator.action(callback)
            configurator.end()
        return registry


def from_mapping(raw_config: Any) -> SpecRegistry:
    """
    Build a `SpecRegistry` from an already parsed configuration mapping.

    Raises:
        ClabConfigError: If the mapping does not describe a list of specs.
        InvalidBuilding: If the described specs violate a build-time rule.
    """
    if not isinstance(raw_config, dict):
        raise ClabConfigError(
            "Configuration must contain a dictionary with a list of specs.\n"
            "Example:\n"
            "specs:\n"
            "  - id: 'input'\n"
            "    tags: ['i']\n"
            "    consume: 1"
        )
    try:
        config = ClabConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ClabConfigError(f"Invalid configuration: {error}") from error
    return config.to_registry()


def loader(file_path: Path | str) -> SpecRegistry:
    """
    Load a `SpecRegistry` from a YAML or TOML file.

    Each spec entry needs at least an `id`; see `RawSpec` for the other keys.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        SpecRegistry: Registry with every spec finalized.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported.
        ClabConfigError: If the file cannot be parsed or validated.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ValueError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ClabConfigError(f"Could not parse '{path}': {error}") from error

    logger.debug("Loaded spec config from '%s'.", path)
    return from_mapping(raw_config)
