"""OS/arch detection and normalization."""

import collections.abc
import dataclasses
import platform
import sys
import types

import beartype

OS_MAP: collections.abc.Mapping[str, str] = types.MappingProxyType({
    "darwin": "darwin",
    "linux": "linux",
    "win32": "windows",
})
"""Raw host OS identifier -> canonical OS name."""

ARCH_MAP: collections.abc.Mapping[str, str] = types.MappingProxyType({
    "x64": "amd64",
    "arm64": "arm64",
})
"""Raw host architecture identifier -> canonical architecture name."""

SUPPORTED_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("darwin", "amd64"),
    ("darwin", "arm64"),
    ("linux", "amd64"),
    ("linux", "arm64"),
    ("windows", "amd64"),
    ("windows", "arm64"),
)

# What platform.machine() reports on the hosts we ship for.
_MACHINE_ALIASES = types.MappingProxyType({
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
})


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class Platform:
    """Canonical (OS, architecture) pair used in binary names."""

    os_name: str
    arch: str


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class UnsupportedPlatform:
    """Host identifiers with no entry in the lookup tables."""

    raw_os: str
    raw_arch: str

    @property
    def label(self) -> str:
        return f"{self.raw_os} {self.raw_arch}"

    @property
    def message(self) -> str:
        return f"Unsupported platform: {self.label}\nSupported: {format_supported()}"


@beartype.beartype
def get_host_os() -> str:
    """Get the raw host OS identifier (darwin, linux, win32, ...)."""
    return sys.platform


@beartype.beartype
def get_host_arch() -> str:
    """Get the raw host architecture identifier (x64, arm64, ...)."""
    machine = platform.machine().lower()
    return _MACHINE_ALIASES.get(machine, machine)


@beartype.beartype
def resolve_platform(
    raw_os: str,
    raw_arch: str,
    os_map: collections.abc.Mapping[str, str] = OS_MAP,
    arch_map: collections.abc.Mapping[str, str] = ARCH_MAP,
) -> Platform | UnsupportedPlatform:
    """Map raw host identifiers to a canonical pair, or report them unsupported."""
    os_name = os_map.get(raw_os)
    arch = arch_map.get(raw_arch)
    if os_name is None or arch is None:
        return UnsupportedPlatform(raw_os=raw_os, raw_arch=raw_arch)
    return Platform(os_name=os_name, arch=arch)


@beartype.beartype
def format_supported(
    platforms: tuple[tuple[str, str], ...] = SUPPORTED_PLATFORMS,
) -> str:
    """Render the supported matrix, e.g. "darwin (amd64, arm64), linux (...)"."""
    by_os: dict[str, list[str]] = {}
    for os_name, arch in platforms:
        by_os.setdefault(os_name, []).append(arch)
    return ", ".join(
        f"{os_name} ({', '.join(archs)})" for os_name, archs in by_os.items()
    )
