"""Tool execution with an SDK-specific environment.

The child inherits the caller's standard streams and its exit status
becomes the caller's exit status.
"""

from __future__ import annotations

import os
import signal
import subprocess
from contextlib import contextmanager
from typing import Iterator, Mapping, Sequence

from xcrun.core.resolver import ResolvedTool
from xcrun.core.sdks import SdkDescriptor

LIBRARY_PATH_VAR = "LD_LIBRARY_PATH"

# Delivered to the whole foreground process group by the terminal; the tool
# decides what they mean.
FORWARDED_SIGNALS = (signal.SIGINT, signal.SIGQUIT)


class ToolExecutionError(RuntimeError):
    """Raised when the resolved executable cannot be started."""

    def __init__(self, tool: ResolvedTool, reason: str):
        super().__init__(f"failed to execute {tool.executable}: {reason}")
        self.tool = tool


def _prepend(value: str, existing: str | None) -> str:
    """Colon-join `value` in front of an existing search path, if any."""
    if not existing:
        return value
    return f"{value}{os.pathsep}{existing}"


def build_environment(
    sdk: SdkDescriptor, environ: Mapping[str, str] | None = None
) -> dict[str, str]:
    """
    Return the environment for a tool running inside `sdk`.

    Copies the ambient environment and overrides:
      - SDKROOT: the SDK path, as configured
      - PATH: the SDK path prepended
      - LD_LIBRARY_PATH: `<sdk>/lib` prepended
    """
    env = dict(os.environ if environ is None else environ)
    env["SDKROOT"] = sdk.path
    env["PATH"] = _prepend(sdk.path, env.get("PATH"))
    lib_dir = os.path.join(sdk.path, "lib")
    env[LIBRARY_PATH_VAR] = _prepend(lib_dir, env.get(LIBRARY_PATH_VAR))
    return env


def format_invocation(tokens: Sequence[str]) -> str:
    """Describe a tool invocation for the `--log` diagnostic line."""
    return f'invoking command: "{" ".join(tokens)}"'


def exit_code_from_returncode(returncode: int) -> int:
    """
    Map a subprocess return code to this process's exit code.

    A negative return code means the child was killed by that signal;
    it is reported as 128 + signal number, like a POSIX shell.
    """
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


@contextmanager
def _signals_ignored(signums: Sequence[int]) -> Iterator[None]:
    """Ignore the given signals in this process, restoring the handlers on exit."""
    previous = {signum: signal.signal(signum, signal.SIG_IGN) for signum in signums}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def run_tool(
    tool: ResolvedTool,
    args: Sequence[str],
    environ: Mapping[str, str] | None = None,
) -> int:
    """
    Run a resolved tool and wait for it to finish.

    Standard input, output and error are inherited untouched. While the tool
    runs, SIGINT and SIGQUIT are ignored here so that the tool alone decides
    how to react to them (like `os.system` and POSIX shells).

    Args:
        tool: Resolved executable and its SDK.
        args: Arguments forwarded verbatim to the tool.
        environ: Ambient environment to derive from (defaults to os.environ).

    Returns:
        The exit code this process should exit with.

    Raises:
        ToolExecutionError: If the executable cannot be started.
    """
    env = build_environment(tool.sdk, environ)
    try:
        # The child must start with default handlers, so ignore only after spawn.
        process = subprocess.Popen([str(tool.executable), *args], env=env)
    except OSError as exc:
        raise ToolExecutionError(tool, exc.strerror or str(exc)) from exc
    with _signals_ignored(FORWARDED_SIGNALS):
        returncode = process.wait()
    return exit_code_from_returncode(returncode)
