"""Shell command runner implementing ProcessRunnerPort with asyncio."""

import asyncio
import errno
from typing import Dict, Optional

from concatenate.ports.outbound import ProcessResult

# Same codes a POSIX shell reports for these launch failures.
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126
EXIT_LAUNCH_FAILED = 1


def _decode(data: Optional[bytes]) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def launch_failure_exit_code(error: OSError) -> int:
    """Exit code synthesised for a process that could not be spawned."""
    if isinstance(error, FileNotFoundError) or error.errno == errno.ENOENT:
        return EXIT_NOT_FOUND
    if isinstance(error, PermissionError) or error.errno == errno.EACCES:
        return EXIT_NOT_EXECUTABLE
    return EXIT_LAUNCH_FAILED


async def _run_subprocess(command: str, cwd: Optional[str], env: Optional[Dict[str, str]]):
    """Run a shell command line and return process/stdout/stderr."""
    proc = await asyncio.create_subprocess_shell(
        command,
        cwd=cwd,
        env=env,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate()
    return proc, stdout, stderr


class ShellRunner:
    """Runs command lines through the host shell, output fully buffered."""

    async def run(
        self,
        command: str,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> ProcessResult:
        try:
            proc, stdout, stderr = await _run_subprocess(command, cwd, env)
        except OSError as e:
            return ProcessResult(
                exit_code=launch_failure_exit_code(e),
                stderr=f"Failed to launch {command!r}: {e}",
            )

        return ProcessResult(
            exit_code=proc.returncode if proc.returncode is not None else EXIT_LAUNCH_FAILED,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )
