"""Loader for the per-user SDK configuration file.

The file is TOML with one `[[sdk]]` table per installed SDK. Parsing is done
with `tomllib` and the record shape is validated with pydantic before being
converted into core `SdkDescriptor` values.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xcrun.core.sdks import (
    ConfigurationInvalid,
    ConfigurationMissing,
    SdkDescriptor,
    SdkStore,
)

CONFIG_RELATIVE_PATH = Path("xcrun") / "config.toml"


class SdkRecord(BaseModel):
    """One `[[sdk]]` table as written in the configuration file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    path: str
    version: str
    target_triple: str
    macosx_deployment_target: str
    ios_deployment_target: str

    def to_descriptor(self) -> SdkDescriptor:
        return SdkDescriptor(**self.model_dump())


class SdkConfigFile(BaseModel):
    """Top-level shape of the configuration file."""

    model_config = ConfigDict(extra="ignore")

    sdks: list[SdkRecord] = Field(..., alias="sdk")


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """
    Return the location of the SDK configuration file.

    `$XDG_CONFIG_HOME/xcrun/config.toml` when XDG_CONFIG_HOME is set,
    otherwise `$HOME/.config/xcrun/config.toml`.
    """
    env = os.environ if environ is None else environ
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        base = Path(xdg)
    else:
        home = env.get("HOME")
        base = (Path(home) if home else Path.home()) / ".config"
    return base / CONFIG_RELATIVE_PATH


def _format_validation_error(exc: ValidationError) -> str:
    """Return a compact, single-line summary of pydantic validation errors."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_store(text: str, *, path: Path) -> SdkStore:
    """
    Parse configuration text into an SdkStore.

    Args:
        text: Raw TOML content.
        path: Where the text came from (used in error messages only).

    Raises:
        ConfigurationInvalid: If the text is not TOML or does not have the
            expected `[[sdk]]` shape.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationInvalid(path, str(exc)) from exc

    try:
        config = SdkConfigFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationInvalid(path, _format_validation_error(exc)) from exc

    return SdkStore.of(record.to_descriptor() for record in config.sdks)


def load_store(path: Path | None = None) -> SdkStore:
    """
    Load the SDK store from disk.

    Args:
        path: Configuration file to read. Defaults to `default_config_path()`.

    Raises:
        ConfigurationMissing: If the file does not exist.
        ConfigurationInvalid: If the file cannot be read or parsed.
    """
    path = path or default_config_path()
    if not path.exists():
        raise ConfigurationMissing(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationInvalid(path, str(exc)) from exc
    return parse_store(text, path=path)
