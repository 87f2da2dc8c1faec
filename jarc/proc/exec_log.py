from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

MAX_ERROR_LINES = 10


class ExecLog(BaseModel):
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    duration: float = Field(0.0, description="The duration of the command/process run in seconds")
    cmd: str = Field(description="The full command (as executed in the shell)")
    cwd: str = Field(description="The working directory for the command")
    timeout: Optional[float] = Field(None, description="The command timeout in seconds (or None if no timeout)")
    status_code: Optional[int] = Field(
        description="The command return code, or None if the command timed out or couldn't be started"
    )
    stdout: str = Field("", description="The command standard output")
    stderr: str = Field("", description="The command standard error")

    @property
    def success(self) -> bool:
        """Whether the command ran to completion with a zero exit code."""
        return self.status_code == 0

    @property
    def error_message(self) -> str:
        """
        Human-readable description of why the command failed.

        Includes the tail of the standard error output (or standard output,
        if stderr is empty), as the last lines usually explain the failure.
        """
        if self.status_code is None:
            reason = "Command did not complete"
        else:
            reason = f"Command failed with exit code {self.status_code}"

        output = (self.stderr or self.stdout).strip()
        if not output:
            return reason

        tail = "\n".join(output.splitlines()[-MAX_ERROR_LINES:])
        return f"{reason}:\n{tail}"


__all__ = ["ExecLog"]
