import shlex
import subprocess
import sys
from dataclasses import dataclass
from os.path import abspath, join
from typing import Optional

from jarc.config import Config, Platform
from jarc.log import get_logger
from jarc.proc.exec_log import ExecLog
from jarc.proc.process_manager import ProcessManager
from jarc.project.answers import Answers
from jarc.steps.response import StepResult
from jarc.ui.base import UIBase

log = get_logger(__name__)

IDE_NAMES = {
    Platform.ANDROID: "Android Studio",
    Platform.IOS: "Xcode",
}


def is_macos() -> bool:
    return sys.platform == "darwin"


def quote_arg(arg: str) -> str:
    """Quote a single command-line argument for the platform shell."""
    if sys.platform == "win32":
        return subprocess.list2cmdline([arg])
    return shlex.quote(arg)


@dataclass
class StepContext:
    """
    Everything a step needs to do its job.

    The project root is passed explicitly; steps never rely on (or change)
    the process working directory.
    """

    project_root: str
    invocation_dir: str
    ui: UIBase
    process_manager: ProcessManager
    config: Config
    answers: Optional[Answers] = None

    @classmethod
    def for_project(
        cls,
        answers: Answers,
        invocation_dir: str,
        ui: UIBase,
        process_manager: ProcessManager,
        config: Config,
    ) -> "StepContext":
        return cls(
            project_root=abspath(join(invocation_dir, answers.name)),
            invocation_dir=abspath(invocation_dir),
            ui=ui,
            process_manager=process_manager,
            config=config,
            answers=answers,
        )


class BaseStep:
    """
    Base class for pipeline steps.

    A step does one thing (create a directory, run a command, ...) and
    reports how it went as a `StepResult`. Failures are returned, not
    raised; a failure of a `critical` step stops the pipeline.
    """

    name: str
    display_name: str
    critical: bool = False

    def __init__(self, context: StepContext):
        self.context = context

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"

    @property
    def ui(self) -> UIBase:
        return self.context.ui

    @property
    def config(self) -> Config:
        return self.context.config

    @property
    def answers(self) -> Optional[Answers]:
        return self.context.answers

    async def send_message(self, message: str):
        await self.ui.send_message(message)

    async def send_warning(self, message: str):
        await self.ui.send_warning(message)

    def package_manager_cmd(self, *args: str) -> str:
        return " ".join([self.config.bridge.package_manager, *args])

    def bridge_cmd(self, *args: str) -> str:
        return " ".join([self.config.bridge.bridge_cli, *args])

    async def run_command(self, cmd: str) -> ExecLog:
        """
        Run a command in the project root, echoing it to the user first.

        :param cmd: Command to run.
        :return: Execution log of the command.
        """
        await self.send_message(f"\n$: {cmd}")
        exec_log = await self.context.process_manager.run_command(cmd, cwd=self.context.project_root)
        # Terminate any partial output line
        await self.ui.send_stream_chunk(None)
        return exec_log

    async def run(self) -> StepResult:
        raise NotImplementedError()


class CommandStep(BaseStep):
    """
    Step that runs one or more external commands in sequence.

    Stops at the first failing command.
    """

    message: Optional[str] = None

    def get_commands(self) -> list[str]:
        raise NotImplementedError()

    async def run(self) -> StepResult:
        commands = self.get_commands()
        if not commands:
            return StepResult.skipped(self)

        if self.message:
            await self.send_message(f"\n{self.message}")

        for cmd in commands:
            exec_log = await self.run_command(cmd)
            if not exec_log.success:
                return StepResult.from_exec_log(self, exec_log)

        return StepResult.done(self)


__all__ = ["StepContext", "BaseStep", "CommandStep", "IDE_NAMES", "is_macos", "quote_arg"]
