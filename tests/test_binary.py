"""Tests for binary naming and resolution."""

import itertools
import pathlib

import pytest

import tfmcp.binary
import tfmcp.platform


def test_supported_matrix_names() -> None:
    """Every supported raw pair yields exactly one of the six binary names."""
    names = set()
    raw_pairs = itertools.product(("darwin", "linux", "win32"), ("x64", "arm64"))
    for raw_os, raw_arch in raw_pairs:
        descriptor = tfmcp.binary.resolve(raw_os, raw_arch, pathlib.Path("/opt/bin"))
        assert isinstance(descriptor, tfmcp.binary.BinaryDescriptor)
        names.add(descriptor.file_name)

    assert names == {
        "terraform-mcp-server-darwin-amd64",
        "terraform-mcp-server-darwin-arm64",
        "terraform-mcp-server-linux-amd64",
        "terraform-mcp-server-linux-arm64",
        "terraform-mcp-server-windows-amd64.exe",
        "terraform-mcp-server-windows-arm64.exe",
    }


@pytest.mark.parametrize(
    ("os_name", "ext"), [("windows", ".exe"), ("linux", ""), ("darwin", "")]
)
def test_get_extension(os_name: str, ext: str) -> None:
    """Only windows binaries carry an extension."""
    assert tfmcp.binary.get_extension(os_name) == ext


def test_resolve_builds_absolute_path(tmp_path: pathlib.Path) -> None:
    """resolve places the binary under the given bin directory."""
    descriptor = tfmcp.binary.resolve("win32", "arm64", tmp_path)
    assert isinstance(descriptor, tfmcp.binary.BinaryDescriptor)
    assert descriptor.os_name == "windows"
    assert descriptor.arch == "arm64"
    assert descriptor.extension == ".exe"
    assert descriptor.is_windows
    assert descriptor.fpath.is_absolute()
    assert descriptor.fpath == tmp_path.resolve() / "terraform-mcp-server-windows-arm64.exe"


def test_resolve_does_not_require_file(tmp_path: pathlib.Path) -> None:
    """resolve is a lookup only; missing files are the caller's concern."""
    descriptor = tfmcp.binary.resolve("linux", "x64", tmp_path / "missing")
    assert isinstance(descriptor, tfmcp.binary.BinaryDescriptor)
    assert not descriptor.fpath.exists()


def test_resolve_defaults_to_package_bin() -> None:
    """Without bin_dpath, resolve looks in the package's bin directory."""
    descriptor = tfmcp.binary.resolve("darwin", "arm64")
    assert isinstance(descriptor, tfmcp.binary.BinaryDescriptor)
    assert descriptor.fpath.parent == tfmcp.binary.get_bin_dpath()
    assert descriptor.fpath.parent.parent.name == "tfmcp"


def test_resolve_unsupported(tmp_path: pathlib.Path) -> None:
    """resolve passes through unsupported platforms without a descriptor."""
    resolved = tfmcp.binary.resolve("freebsd", "ia32", tmp_path)
    assert resolved == tfmcp.platform.UnsupportedPlatform(
        raw_os="freebsd", raw_arch="ia32"
    )


def test_resolve_host_uses_detected_platform(
    tmp_path: pathlib.Path, monkeypatch
) -> None:
    """resolve_host resolves the identifiers reported by the host."""
    monkeypatch.setattr(tfmcp.platform, "get_host_os", lambda: "darwin")
    monkeypatch.setattr(tfmcp.platform, "get_host_arch", lambda: "x64")
    descriptor = tfmcp.binary.resolve_host(tmp_path)
    assert isinstance(descriptor, tfmcp.binary.BinaryDescriptor)
    assert descriptor.file_name == "terraform-mcp-server-darwin-amd64"
