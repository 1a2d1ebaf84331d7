"""Run the platform binary in place of this process."""

import collections.abc
import os
import signal
import subprocess
import sys

import beartype

import tfmcp.binary
import tfmcp.errors
import tfmcp.platform


@beartype.beartype
def launch(
    descriptor: tfmcp.binary.BinaryDescriptor,
    args: collections.abc.Sequence[str],
    env: collections.abc.Mapping[str, str] | None = None,
) -> int:
    """Run the binary with inherited stdio and return its exit status.

    Raises LaunchError if the binary could not be started, or if it was
    killed by a signal. Ctrl-C reaches the child through the process group;
    the launcher keeps waiting so the child can shut down on its own terms.
    """
    cmd = [str(descriptor.fpath), *args]
    if env is None:
        env = os.environ

    try:
        proc = subprocess.Popen(cmd, env=dict(env))
    except OSError as err:
        raise tfmcp.errors.LaunchError(
            message=str(err), binary_fpath=descriptor.fpath
        ) from err

    returncode = _wait(proc)
    if returncode < 0:
        raise tfmcp.errors.LaunchError(
            message=f"terminated by signal {_signal_name(-returncode)}",
            binary_fpath=descriptor.fpath,
        )

    return returncode


@beartype.beartype
def main(argv: collections.abc.Sequence[str] | None = None) -> int:
    """Entry point for the terraform-mcp-server command."""
    if argv is None:
        argv = sys.argv[1:]

    descriptor = tfmcp.binary.resolve_host()
    if isinstance(descriptor, tfmcp.platform.UnsupportedPlatform):
        print(descriptor.message, file=sys.stderr)
        return 1

    try:
        return launch(descriptor, argv)
    except tfmcp.errors.LaunchError as err:
        print(f"Failed to run terraform-mcp-server: {err}", file=sys.stderr)
        return 1


@beartype.beartype
def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)


@beartype.beartype
def _wait(proc: subprocess.Popen) -> int:
    """Wait for the child to exit, riding out interrupts aimed at the group."""
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            continue
