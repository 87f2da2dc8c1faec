from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from jarc.config import Config, Platform, loader
from jarc.proc.exec_log import ExecLog
from jarc.project.answers import Answers
from jarc.steps.base import StepContext


class FakeProcessManager:
    """
    Stand-in for ProcessManager that records the commands instead of running them.

    Commands starting with one of the `failures` prefixes fail with the given
    exit code, all other commands succeed.
    """

    def __init__(self, failures: Optional[dict[str, int]] = None):
        self.failures = failures or {}
        self.calls = []

    @property
    def commands(self) -> list[str]:
        return [cmd for cmd, _ in self.calls]

    async def run_command(self, cmd: str, *, cwd: Optional[str] = None, **kwargs) -> ExecLog:
        self.calls.append((cmd, cwd))
        for prefix, status_code in self.failures.items():
            if cmd.startswith(prefix):
                return ExecLog(cmd=cmd, cwd=cwd or ".", status_code=status_code, stderr=f"{prefix} failed")
        return ExecLog(cmd=cmd, cwd=cwd or ".", status_code=0, stdout="ok")


@pytest.fixture(autouse=True)
def default_config():
    loader.config = Config()
    loader.config_path = None
    yield loader.config


@pytest.fixture
def mock_ui():
    return MagicMock(
        start=AsyncMock(return_value=True),
        stop=AsyncMock(),
        send_message=AsyncMock(),
        send_warning=AsyncMock(),
        send_stream_chunk=AsyncMock(),
        ask_question=AsyncMock(),
        ask_choices=AsyncMock(),
    )


@pytest.fixture
def answers():
    return Answers(
        name="myapp",
        app_id="com.example.myapp",
        platforms={Platform.ANDROID},
        plugins=[],
    )


@pytest.fixture
def make_context(tmp_path, mock_ui):
    """
    Build a step context rooted in a temporary directory.

    Returns a function taking optional answers, process manager and config.
    """

    def _make(answers: Optional[Answers] = None, pm=None, config: Optional[Config] = None) -> StepContext:
        pm = pm or FakeProcessManager()
        config = config or Config()
        if answers:
            return StepContext.for_project(answers, str(tmp_path), mock_ui, pm, config)
        return StepContext(
            project_root=str(tmp_path),
            invocation_dir=str(tmp_path),
            ui=mock_ui,
            process_manager=pm,
            config=config,
        )

    return _make


def sent_messages(ui) -> str:
    """All messages and warnings sent to a mock UI, as a single string."""
    calls = ui.send_message.call_args_list + ui.send_warning.call_args_list
    return "\n".join(str(call[0][0]) for call in calls)


@pytest.fixture
def fake_pm():
    """Factory for fake process managers: `fake_pm(failures={"npm init": 1})`."""
    return FakeProcessManager


@pytest.fixture
def ui_output():
    """Function returning everything sent to a mock UI."""
    return sent_messages
