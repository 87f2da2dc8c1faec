from enum import Enum
from typing import TYPE_CHECKING, Optional

from jarc.proc.exec_log import ExecLog

if TYPE_CHECKING:
    from jarc.steps.base import BaseStep


class StepStatus(str, Enum):
    DONE = "done"
    """Step has finished successfully."""

    FAILED = "failed"
    """Step failed; the orchestrator decides whether to continue."""

    SKIPPED = "skipped"
    """There was nothing for the step to do."""


class StepResult:
    status: StepStatus = StepStatus.DONE
    step: "BaseStep"
    message: Optional[str]
    exec_log: Optional[ExecLog]

    def __init__(
        self,
        status: StepStatus,
        step: "BaseStep",
        message: Optional[str] = None,
        exec_log: Optional[ExecLog] = None,
    ):
        self.status = status
        self.step = step
        self.message = message
        self.exec_log = exec_log

    def __repr__(self) -> str:
        return f"<StepResult status={self.status.value} step={self.step}>"

    @property
    def failed(self) -> bool:
        return self.status == StepStatus.FAILED

    @staticmethod
    def done(step: "BaseStep", message: Optional[str] = None) -> "StepResult":
        return StepResult(StepStatus.DONE, step, message=message)

    @staticmethod
    def skipped(step: "BaseStep", message: Optional[str] = None) -> "StepResult":
        return StepResult(StepStatus.SKIPPED, step, message=message)

    @staticmethod
    def error(step: "BaseStep", message: str, exec_log: Optional[ExecLog] = None) -> "StepResult":
        return StepResult(StepStatus.FAILED, step, message=message, exec_log=exec_log)

    @staticmethod
    def from_exec_log(step: "BaseStep", exec_log: ExecLog) -> "StepResult":
        if exec_log.success:
            return StepResult.done(step)
        return StepResult.error(step, exec_log.error_message, exec_log=exec_log)


__all__ = ["StepStatus", "StepResult"]
