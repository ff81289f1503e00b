"""Common CLI options for the CLI."""

import typer

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Print the parsed invocation for debugging",
)

SdkOpt = typer.Option(
    None,
    "--sdk",
    help="Use the SDK with this exact name instead of searching",
)

ToolchainOpt = typer.Option(
    None,
    "--toolchain",
    help="Toolchain name (accepted for compatibility, no effect)",
)

LogOpt = typer.Option(
    False,
    "--log",
    "-l",
    help="Print the command line before executing the tool",
)

FindOpt = typer.Option(
    None,
    "--find",
    "-f",
    help="Print the full path of a tool instead of running it",
)

NoCacheOpt = typer.Option(
    False,
    "--no-cache",
    "-n",
    help="Do not use the lookup cache (no effect)",
)

KillCacheOpt = typer.Option(
    False,
    "--kill-cache",
    "-k",
    help="Invalidate the lookup cache (no effect)",
)

ShowSdkPathOpt = typer.Option(
    False,
    "--show-sdk-path",
    help="Print the path of every configured SDK",
)

ShowSdkVersionOpt = typer.Option(
    False,
    "--show-sdk-version",
    help="Print the version of every configured SDK",
)

ShowSdkTargetTripleOpt = typer.Option(
    False,
    "--show-sdk-target-triple",
    "-s",
    help="Print the target triple of every configured SDK",
)

ShowSdkToolchainPathOpt = typer.Option(
    False,
    "--show-sdk-toolchain-path",
    help="Print the toolchain path of every configured SDK",
)

ShowSdkToolchainVersionOpt = typer.Option(
    False,
    "--show-sdk-toolchain-version",
    help="Print the toolchain version of every configured SDK",
)

RunOpt = typer.Option(
    None,
    "--run",
    help="Tool to run (accepted for compatibility, no effect)",
)

ToolArgs = typer.Argument(
    None,
    help="Tool name followed by the arguments forwarded to it",
    show_default=False,
)
