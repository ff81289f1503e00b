"""CLI application for running SDK tools."""

import typer

from xcrun.cli.common.context import XcrunAppContext, build_context
from xcrun.cli.common.exits import die, exit_from_exc
from xcrun.cli.common.options import (
    FindOpt,
    KillCacheOpt,
    LogOpt,
    NoCacheOpt,
    RunOpt,
    SdkOpt,
    ShowSdkPathOpt,
    ShowSdkTargetTripleOpt,
    ShowSdkToolchainPathOpt,
    ShowSdkToolchainVersionOpt,
    ShowSdkVersionOpt,
    ToolArgs,
    ToolchainOpt,
    VerboseOpt,
)
from xcrun.cli.common.output import out
from xcrun.core.invoke import ToolExecutionError, format_invocation, run_tool
from xcrun.core.resolver import (
    ResolutionRequest,
    ResolvedTool,
    ToolResolutionError,
    resolve_tool,
)
from xcrun.core.sdks import sdk_report

VERSION = "1.0.0"

app = typer.Typer(
    help="xcrun - find and run developer tools from configured SDKs",
    add_completion=False,
)


def _resolve_or_die(
    appctx: XcrunAppContext, tool: str, sdk: str | None
) -> ResolvedTool:
    """Resolve a tool, folding selection and location failures into one error."""
    try:
        return resolve_tool(appctx.store, ResolutionRequest(tool=tool, sdk_hint=sdk))
    except ToolResolutionError as exc:
        exit_from_exc(exc, message=f"tool not found: {tool}", code=1)


@app.command(
    context_settings={"allow_interspersed_args": False},
)
def main(
    ctx: typer.Context,
    arguments: list[str] | None = ToolArgs,
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the xcrun version",
    ),
    verbose: bool = VerboseOpt,
    sdk: str | None = SdkOpt,
    toolchain: str | None = ToolchainOpt,
    log: bool = LogOpt,
    find: str | None = FindOpt,
    no_cache: bool = NoCacheOpt,
    kill_cache: bool = KillCacheOpt,
    show_sdk_path: bool = ShowSdkPathOpt,
    show_sdk_version: bool = ShowSdkVersionOpt,
    show_sdk_target_triple: bool = ShowSdkTargetTripleOpt,
    show_sdk_toolchain_path: bool = ShowSdkToolchainPathOpt,
    show_sdk_toolchain_version: bool = ShowSdkToolchainVersionOpt,
    run: str | None = RunOpt,
):
    """
    Find or run a developer tool from one of the configured SDKs.

    xcrun [OPTIONS] TOOL [TOOL_ARGUMENTS]...
    """
    # --toolchain, --run, --no-cache and --kill-cache are accepted but unused.
    appctx = build_context()

    if version:
        out.result(f"xcrun {VERSION}")

    if verbose:
        out.kv(ctx.params)

    reports = {
        "path": show_sdk_path,
        "version": show_sdk_version,
        "target_triple": show_sdk_target_triple,
        "toolchain_path": show_sdk_toolchain_path,
        "toolchain_version": show_sdk_toolchain_version,
    }
    wanted = [name for name, enabled in reports.items() if enabled]

    if not version and not wanted and find is None and not arguments:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    for report in wanted:
        out.results(sdk_report(appctx.store, report))

    if find is not None:
        resolved = _resolve_or_die(appctx, find, sdk)
        out.result(resolved.executable)

    if arguments:
        tool, *tool_args = arguments
        resolved = _resolve_or_die(appctx, tool, sdk)
        if log:
            out.info(format_invocation(arguments))
        try:
            code = run_tool(resolved, tool_args)
        except ToolExecutionError as exc:
            die(str(exc), code=1)
        raise typer.Exit(code)


if __name__ == "__main__":
    app()
