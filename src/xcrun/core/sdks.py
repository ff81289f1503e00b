"""Core SDK domain models and whole-store reports.

This module defines the SDK descriptor and the immutable store that holds
every configured SDK for the lifetime of one invocation. It is intentionally
free of CLI and file-format concerns: loading lives in
`xcrun.core.adapters.config_file`, rendering lives in the CLI layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence


class ConfigurationError(RuntimeError):
    """Base class for SDK configuration failures."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class ConfigurationMissing(ConfigurationError):
    """Raised when the SDK configuration file does not exist."""

    def __init__(self, path: Path):
        super().__init__(path, f"SDK configuration file not found at {path}")


class ConfigurationInvalid(ConfigurationError):
    """Raised when the SDK configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(path, f"Invalid SDK configuration in {path}: {reason}")
        self.reason = reason


@dataclass(frozen=True)
class SdkDescriptor:
    """
    Represents one installed SDK.

    Attributes:
        name: Human identifier used by `--sdk`. Not required to be unique.
        path: Filesystem root of the SDK installation. Need not exist.
        version: Display version of the SDK.
        target_triple: Platform/architecture triple the SDK targets.
        macosx_deployment_target: Minimum macOS version (opaque string).
        ios_deployment_target: Minimum iOS version (opaque string).
    """

    name: str
    path: str
    version: str
    target_triple: str
    macosx_deployment_target: str
    ios_deployment_target: str

    @property
    def root(self) -> Path:
        """Absolute filesystem root of this SDK."""
        return Path(self.path).absolute()


@dataclass(frozen=True)
class SdkStore(Sequence[SdkDescriptor]):
    """
    Ordered, read-only collection of configured SDKs.

    Order is the order of the configuration file and decides which SDK
    wins when several match a request.
    """

    sdks: tuple[SdkDescriptor, ...] = ()

    @classmethod
    def of(cls, sdks: Iterable[SdkDescriptor]) -> SdkStore:
        return cls(tuple(sdks))

    def __getitem__(self, index):
        return self.sdks[index]

    def __len__(self) -> int:
        return len(self.sdks)

    def __iter__(self) -> Iterator[SdkDescriptor]:
        return iter(self.sdks)


# Report name -> descriptor attribute. The toolchain reports are aliases:
# there is no separate toolchain entity.
SDK_REPORT_FIELDS: dict[str, str] = {
    "path": "path",
    "version": "version",
    "target_triple": "target_triple",
    "toolchain_path": "path",
    "toolchain_version": "version",
}


def sdk_report(store: SdkStore, report: str) -> list[str]:
    """
    Return one value per configured SDK for a whole-store report.

    Args:
        store: Loaded SDK store.
        report: One of the keys of `SDK_REPORT_FIELDS`.

    Returns:
        The selected field of every SDK, in store order.

    Raises:
        KeyError: If the report name is unknown.
    """
    attr = SDK_REPORT_FIELDS[report]
    return [getattr(sdk, attr) for sdk in store]
