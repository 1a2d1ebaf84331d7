"""Install-time check that the platform binary is present and executable."""

import os
import pathlib
import sys

import beartype

import tfmcp.binary
import tfmcp.errors
import tfmcp.platform

_PREFIX = "[terraform-mcp-server]"


@beartype.beartype
def ensure_executable(binary_fpath: pathlib.Path) -> str | None:
    """Set rwxr-xr-x on the binary. Returns a warning message on failure."""
    try:
        os.chmod(binary_fpath, 0o755)
    except OSError as err:
        return f"could not set executable permission: {err}"
    return None


@beartype.beartype
def verify_install(
    bin_dpath: pathlib.Path | None = None,
    raw_os: str | None = None,
    raw_arch: str | None = None,
) -> int:
    """Verify the binary for this platform and make it executable.

    Unsupported platforms are skipped with a warning so that installing the
    package as a dependency does not fail. Returns the process exit status.
    """
    if raw_os is None:
        raw_os = tfmcp.platform.get_host_os()
    if raw_arch is None:
        raw_arch = tfmcp.platform.get_host_arch()

    descriptor = tfmcp.binary.resolve(raw_os, raw_arch, bin_dpath)
    if isinstance(descriptor, tfmcp.platform.UnsupportedPlatform):
        print(
            f"{_PREFIX} Warning: unsupported platform {descriptor.label}\n"
            f"Supported: {tfmcp.platform.format_supported()}",
            file=sys.stderr,
        )
        return 0

    if not descriptor.fpath.is_file():
        err = tfmcp.errors.BinaryNotFoundError.make(
            descriptor.fpath, f"{raw_os} {raw_arch}"
        )
        print(f"{_PREFIX} Error: {err}", file=sys.stderr)
        return 1

    # Windows has no executable bit.
    if not descriptor.is_windows:
        warning = ensure_executable(descriptor.fpath)
        if warning:
            print(f"{_PREFIX} Warning: {warning}", file=sys.stderr)

    print(f"{_PREFIX} Installed for {descriptor.os_name}-{descriptor.arch}")
    return 0
