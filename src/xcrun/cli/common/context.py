"""Application context management for the CLI."""

from dataclasses import dataclass
from pathlib import Path

from xcrun.cli.common.exits import exit_from_exc
from xcrun.core.adapters.config_file import default_config_path, load_store
from xcrun.core.sdks import ConfigurationError, SdkStore


@dataclass(frozen=True)
class XcrunAppContext:
    """Application context holding the loaded SDK store."""

    config_path: Path
    store: SdkStore


def build_context(config_path: Path | None = None) -> XcrunAppContext:
    """Load the SDK configuration and return the application context.

    Args:
        config_path: Configuration file to load. Defaults to the per-user
            location derived from XDG_CONFIG_HOME / HOME.

    Returns:
        XcrunAppContext: Context with the immutable SDK store.
    """
    path = config_path or default_config_path()
    try:
        store = load_store(path)
    except ConfigurationError as exc:
        exit_from_exc(exc, message=str(exc), code=1)
    return XcrunAppContext(config_path=path, store=store)
