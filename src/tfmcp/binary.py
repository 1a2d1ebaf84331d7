"""Binary naming and path resolution."""

import collections.abc
import dataclasses
import pathlib

import beartype

import tfmcp.platform

BINARY_PREFIX = "terraform-mcp-server"


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class BinaryDescriptor:
    """Where the binary for one platform lives."""

    os_name: str
    """Canonical OS (darwin, linux, windows)."""

    arch: str
    """Canonical architecture (amd64, arm64)."""

    extension: str
    """".exe" on windows, "" elsewhere."""

    file_name: str
    """E.g. "terraform-mcp-server-linux-amd64"."""

    fpath: pathlib.Path
    """Absolute path to the binary."""

    @property
    def is_windows(self) -> bool:
        return self.os_name == "windows"


@beartype.beartype
def get_bin_dpath() -> pathlib.Path:
    """Get the directory the packaged binaries are placed in."""
    return pathlib.Path(__file__).resolve().parent / "bin"


@beartype.beartype
def get_extension(os_name: str) -> str:
    """Return the executable extension for a canonical OS."""
    if os_name == "windows":
        return ".exe"
    return ""


@beartype.beartype
def get_binary_name(os_name: str, arch: str) -> str:
    """Return the binary file name for a canonical OS and architecture."""
    return f"{BINARY_PREFIX}-{os_name}-{arch}{get_extension(os_name)}"


@beartype.beartype
def resolve(
    raw_os: str,
    raw_arch: str,
    bin_dpath: pathlib.Path | None = None,
    os_map: collections.abc.Mapping[str, str] = tfmcp.platform.OS_MAP,
    arch_map: collections.abc.Mapping[str, str] = tfmcp.platform.ARCH_MAP,
) -> BinaryDescriptor | tfmcp.platform.UnsupportedPlatform:
    """Resolve raw host identifiers to a binary descriptor.

    Does not touch the filesystem beyond making bin_dpath absolute; callers
    decide what a missing file means.
    """
    resolved = tfmcp.platform.resolve_platform(raw_os, raw_arch, os_map, arch_map)
    if isinstance(resolved, tfmcp.platform.UnsupportedPlatform):
        return resolved

    if bin_dpath is None:
        bin_dpath = get_bin_dpath()

    file_name = get_binary_name(resolved.os_name, resolved.arch)
    return BinaryDescriptor(
        os_name=resolved.os_name,
        arch=resolved.arch,
        extension=get_extension(resolved.os_name),
        file_name=file_name,
        fpath=bin_dpath.resolve(strict=False) / file_name,
    )


@beartype.beartype
def resolve_host(
    bin_dpath: pathlib.Path | None = None,
) -> BinaryDescriptor | tfmcp.platform.UnsupportedPlatform:
    """Resolve the binary for the platform this interpreter runs on."""
    return resolve(
        tfmcp.platform.get_host_os(), tfmcp.platform.get_host_arch(), bin_dpath
    )
