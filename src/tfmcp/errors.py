"""Errors raised while locating or starting the terraform-mcp-server binary.

Each carries the path involved and, where there is one, a hint printed on
the line after the message. An unsupported host is not an error;
see tfmcp.platform.UnsupportedPlatform.
"""

import dataclasses
import pathlib

import beartype


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class ShimError(Exception):
    """Base error with structured context for user-facing messages."""

    message: str
    """What went wrong."""

    hint: str | None = None
    """What the user can do about it."""

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(self.hint)
        return "\n".join(parts)


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class BinaryNotFoundError(ShimError):
    """The platform binary is not where the package layout says it should be."""

    binary_fpath: pathlib.Path = dataclasses.field(kw_only=True)
    """Expected path of the binary."""

    platform: str = dataclasses.field(kw_only=True)
    """Raw host identifiers, e.g. "linux x64"."""

    @staticmethod
    def make(binary_fpath: pathlib.Path, platform: str) -> "BinaryNotFoundError":
        """Create a BinaryNotFoundError with default message and hint."""
        return BinaryNotFoundError(
            message=f"binary not found at {binary_fpath}",
            hint=(
                "This package may not include a build for your platform "
                f"({platform})."
            ),
            binary_fpath=binary_fpath,
            platform=platform,
        )


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class LaunchError(ShimError):
    """The binary could not be started, or it was killed before exiting."""

    binary_fpath: pathlib.Path = dataclasses.field(kw_only=True)
    """Path of the binary we tried to run."""
