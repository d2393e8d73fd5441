"""Process adapters."""

from concatenate.adapters.process.shell_runner import ShellRunner, launch_failure_exit_code

__all__ = ["ShellRunner", "launch_failure_exit_code"]
