import asyncio
import signal
import sys
import time
from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime, timezone
from os import environ
from os.path import abspath
from typing import Awaitable, Callable, Optional

import psutil

from jarc.log import get_logger
from jarc.proc.exec_log import ExecLog

log = get_logger(__name__)

NONBLOCK_READ_TIMEOUT = 0.01
BUSY_WAIT_INTERVAL = 0.1
READ_CHUNK_SIZE = 4096

OutputHandler = Callable[[str, str], Awaitable[None]]


@dataclass
class LocalProcess:
    cmd: str
    cwd: str
    env: dict[str, str]
    stdout: str
    stderr: str
    _process: asyncio.subprocess.Process

    @staticmethod
    async def start(
        cmd: str,
        *,
        cwd: str,
        env: dict[str, str],
    ) -> "LocalProcess":
        log.debug(f"Starting process: {cmd} (cwd={cwd})")
        _process = await asyncio.create_subprocess_shell(
            cmd,
            cwd=cwd,
            env=env,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

        return LocalProcess(
            cmd=cmd,
            cwd=cwd,
            env=env,
            stdout="",
            stderr="",
            _process=_process,
        )

    async def wait(self) -> int:
        return await self._process.wait()

    @staticmethod
    async def _nonblock_read(reader: asyncio.StreamReader, timeout: float) -> str:
        """
        Reads data from a stream reader without blocking (for long).

        This wraps the read in a (short) timeout to avoid blocking the event loop for too long.

        :param reader: Async stream reader to read from.
        :param timeout: Timeout for the read operation (should not be too long).
        :return: Data read from the stream reader, or empty string.
        """
        buffer = b""
        while True:
            try:
                data = await asyncio.wait_for(reader.read(READ_CHUNK_SIZE), timeout)
            except asyncio.TimeoutError:
                break
            if not data:
                break
            buffer += data

        return buffer.decode("utf-8", errors="ignore")

    async def read_output(self, timeout: float = NONBLOCK_READ_TIMEOUT) -> tuple[str, str]:
        new_stdout = await self._nonblock_read(self._process.stdout, timeout)
        new_stderr = await self._nonblock_read(self._process.stderr, timeout)
        self.stdout += new_stdout
        self.stderr += new_stderr
        return (new_stdout, new_stderr)

    async def _terminate_process_tree(self, sig: int):
        # Children first, then the shell process itself
        try:
            shell_process = psutil.Process(self._process.pid)
            processes = shell_process.children(recursive=True)
        except psutil.NoSuchProcess:
            return

        processes.append(shell_process)
        for proc in processes:
            try:
                proc.send_signal(sig)
            except psutil.NoSuchProcess:
                pass

        psutil.wait_procs(processes, timeout=1)

    async def terminate(self, kill: bool = True):
        if kill and sys.platform != "win32":
            await self._terminate_process_tree(signal.SIGKILL)
        else:
            # Windows doesn't have SIGKILL
            await self._terminate_process_tree(signal.SIGTERM)

    @property
    def is_running(self) -> bool:
        return self._process.returncode is None

    @property
    def pid(self) -> int:
        return self._process.pid


class ProcessManager:
    """
    Runs external commands, one at a time, in a given directory.

    Command output is passed to the output handler (if set) as it arrives,
    and the complete result is returned as an `ExecLog`. Failures (non-zero
    exit code, command that can't be started, timeout) are reported in the
    returned log, not raised.
    """

    def __init__(
        self,
        *,
        root_dir: str,
        env: Optional[dict[str, str]] = None,
        output_handler: Optional[OutputHandler] = None,
    ):
        if env is None:
            env = deepcopy(dict(environ))
        self.default_env = env
        self.root_dir = abspath(root_dir)
        self.output_handler = output_handler

    async def _handle_output(self, out: str, err: str, show_output: bool):
        if self.output_handler and (out or err) and show_output:
            await self.output_handler(out, err)

    async def run_command(
        self,
        cmd: str,
        *,
        cwd: Optional[str] = None,
        env: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
        show_output: bool = True,
    ) -> ExecLog:
        """
        Run command and wait for it to finish.

        :param cmd: Command to run (in the shell).
        :param cwd: Working directory (defaults to the root directory).
        :param env: Extra environment variables.
        :param timeout: Timeout in seconds (None for no timeout).
        :param show_output: Pass the output to the output handler.
        :return: Execution log of the command.
        """
        env = {**self.default_env, **(env or {})}
        abs_cwd = abspath(cwd or self.root_dir)
        started_at = datetime.now(timezone.utc)
        t0 = time.time()

        log.info(f"Running command `{cmd}` in {abs_cwd}")
        try:
            process = await LocalProcess.start(cmd, cwd=abs_cwd, env=env)
        except OSError as err:
            log.warning(f"Could not start command `{cmd}`: {err}")
            return ExecLog(
                started_at=started_at,
                cmd=cmd,
                cwd=abs_cwd,
                timeout=timeout,
                status_code=None,
                stderr=str(err),
            )

        terminated = False
        try:
            while process.is_running and (timeout is None or (time.time() - t0) < timeout):
                out, err = await process.read_output(BUSY_WAIT_INTERVAL)
                if not out and not err:
                    # Output pipes may be closed while the process is still running
                    await asyncio.sleep(NONBLOCK_READ_TIMEOUT)
                await self._handle_output(out, err, show_output)

            if process.is_running:
                log.debug(f"Process {cmd} still running after {timeout}s, terminating")
                await process.terminate()
                terminated = True

            await process.wait()
        except (asyncio.CancelledError, KeyboardInterrupt):
            log.info(f"Interrupted while running `{cmd}`, terminating")
            await process.terminate()
            raise

        out, err = await process.read_output()
        await self._handle_output(out, err, show_output)

        exec_log = ExecLog(
            started_at=started_at,
            duration=time.time() - t0,
            cmd=cmd,
            cwd=abs_cwd,
            timeout=timeout,
            status_code=None if terminated else (process._process.returncode or 0),
            stdout=process.stdout,
            stderr=process.stderr,
        )
        if exec_log.success:
            log.debug(f"Command `{cmd}` finished in {exec_log.duration:.1f}s")
        else:
            log.warning(f"Command `{cmd}` failed with status {exec_log.status_code}")
        return exec_log


__all__ = ["LocalProcess", "ProcessManager"]
