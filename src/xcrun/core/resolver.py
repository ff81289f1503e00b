"""SDK selection and tool location.

Given a tool name and an optional SDK name, pick exactly one SDK from the
store and find the tool executable inside it. Both steps probe the
filesystem only; nothing is cached between calls.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from xcrun.core.sdks import SdkDescriptor, SdkStore

# Conventional tool directories under an SDK root, in probe order.
TOOL_SUBDIRS: tuple[str, ...] = ("bin", "usr/bin")


class ToolResolutionError(LookupError):
    """Base class for failures to resolve a tool to an executable."""

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool


class SdkSelectionFailed(ToolResolutionError):
    """No configured SDK matches the request."""

    def __init__(self, tool: str, sdk_hint: str | None = None):
        if sdk_hint is not None:
            message = f"no SDK named '{sdk_hint}' is configured"
        else:
            message = f"no configured SDK provides '{tool}'"
        super().__init__(tool, message)
        self.sdk_hint = sdk_hint


class ToolNotFound(ToolResolutionError):
    """An SDK was selected but the tool is not in any tool directory."""

    def __init__(self, tool: str, sdk: SdkDescriptor):
        super().__init__(tool, f"'{tool}' not found in SDK '{sdk.name}'")
        self.sdk = sdk


@dataclass(frozen=True)
class ResolutionRequest:
    """
    A request to resolve a tool.

    Attributes:
        tool: Tool name, e.g. `clang`.
        sdk_hint: Exact SDK name to use instead of probing, if given.
    """

    tool: str
    sdk_hint: str | None = None


@dataclass(frozen=True)
class ResolvedTool:
    """A tool resolved to an existing executable inside a selected SDK."""

    sdk: SdkDescriptor
    executable: Path


def is_tool_name(tool: str) -> bool:
    """Return True if `tool` is a bare file name that stays inside a tool directory."""
    if tool in ("", ".", ".."):
        return False
    return not any(sep and sep in tool for sep in (os.sep, os.altsep, "/"))


def _candidates(sdk: SdkDescriptor, tool: str) -> list[Path]:
    if not is_tool_name(tool):
        return []
    return [sdk.root / subdir / tool for subdir in TOOL_SUBDIRS]


def find_tool(sdk: SdkDescriptor, tool: str) -> Path | None:
    """Return the first existing candidate path for the tool, or None."""
    for candidate in _candidates(sdk, tool):
        if candidate.exists():
            return candidate
    return None


def provides_tool(sdk: SdkDescriptor, tool: str) -> bool:
    """Return True if the tool exists in one of the SDK's tool directories."""
    return find_tool(sdk, tool) is not None


def select_sdk(store: SdkStore, request: ResolutionRequest) -> SdkDescriptor:
    """
    Select the SDK that should serve a request.

    With a hint, the first SDK whose name equals the hint is selected
    whether or not the tool is present. Without a hint, the first SDK that
    physically contains the tool is selected.

    Raises:
        SdkSelectionFailed: If no SDK matches.
    """
    for sdk in store:
        if request.sdk_hint is not None:
            if sdk.name == request.sdk_hint:
                return sdk
        elif provides_tool(sdk, request.tool):
            return sdk
    raise SdkSelectionFailed(request.tool, request.sdk_hint)


def locate_tool(sdk: SdkDescriptor, tool: str) -> Path:
    """
    Locate the tool inside an already selected SDK.

    Raises:
        ToolNotFound: If the tool is in neither `bin/` nor `usr/bin/`.
    """
    path = find_tool(sdk, tool)
    if path is None:
        raise ToolNotFound(tool, sdk)
    return path


def resolve_tool(store: SdkStore, request: ResolutionRequest) -> ResolvedTool:
    """Select an SDK and locate the requested tool in it."""
    sdk = select_sdk(store, request)
    return ResolvedTool(sdk=sdk, executable=locate_tool(sdk, request.tool))
