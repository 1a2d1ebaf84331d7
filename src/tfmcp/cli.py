"""CLI definition for the install-time verifier, using tyro.

The launcher has no CLI of its own: every argument belongs to the wrapped
binary, see tfmcp.launcher.main.
"""

import dataclasses
import pathlib
import sys
import typing as tp

import beartype
import tyro

import tfmcp.binary
import tfmcp.install
import tfmcp.platform


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class Install:
    """Check the bundled terraform-mcp-server binary and make it executable."""

    bin_dpath: tp.Annotated[pathlib.Path | None, tyro.conf.arg(name="bin-dir")] = None
    """Directory holding the platform binaries (default: the package's bin/)."""

    verbose: bool = False
    """Show the resolved binary before checking it."""


@beartype.beartype
def run_install(cmd: Install) -> int:
    """Run the install check, returning the exit status."""
    if cmd.verbose:
        _print_resolution(cmd.bin_dpath)
    return tfmcp.install.verify_install(bin_dpath=cmd.bin_dpath)


@beartype.beartype
def main() -> None:
    """Main entry point."""
    cmd = tyro.cli(Install)
    sys.exit(run_install(cmd))


@beartype.beartype
def _print_resolution(bin_dpath: pathlib.Path | None) -> None:
    """Print what the host resolves to."""
    raw_os = tfmcp.platform.get_host_os()
    raw_arch = tfmcp.platform.get_host_arch()
    print(f"host: {raw_os} {raw_arch}")

    descriptor = tfmcp.binary.resolve(raw_os, raw_arch, bin_dpath)
    if isinstance(descriptor, tfmcp.platform.UnsupportedPlatform):
        print("binary: (unsupported platform)")
        return
    print(f"platform: {descriptor.os_name}-{descriptor.arch}")
    print(f"binary: {descriptor.fpath}")
