import os
import sys
from argparse import Namespace
from asyncio import run
from typing import Optional

from jarc.cli.helpers import init, show_config
from jarc.cli.wizard import collect_answers
from jarc.config import Config, Platform, get_config
from jarc.log import get_logger
from jarc.proc.process_manager import ProcessManager
from jarc.steps.base import StepContext
from jarc.steps.orchestrator import Orchestrator
from jarc.ui.base import UIBase, UIClosedError, cmd_output_source

log = get_logger(__name__)

BANNER = "\n".join(
    [
        "-------------------------------------",
        "🚀 Welcome to JARC 🚀",
        "-------------------------------------",
    ]
)


def create_process_manager(ui: UIBase, root_dir: str) -> ProcessManager:
    """
    Create a process manager streaming command output to the UI.
    """

    async def output_handler(out: str, err: str):
        await ui.send_stream_chunk(out, source=cmd_output_source)
        await ui.send_stream_chunk(err, source=cmd_output_source)

    return ProcessManager(root_dir=root_dir, output_handler=output_handler)


async def create_new_project(ui: UIBase, config: Config, invocation_dir: str) -> bool:
    """
    Run the project creation wizard and create the project.

    :param ui: User interface.
    :param config: Configuration.
    :param invocation_dir: Directory in which the project is created.
    :return: True if the project was created successfully, False otherwise.
    :raises UIClosedError: If the user cancelled the wizard.
    """
    await ui.send_message(BANNER)

    answers = await collect_answers(ui, config)
    context = StepContext.for_project(
        answers,
        invocation_dir,
        ui,
        create_process_manager(ui, invocation_dir),
        config,
    )
    return await Orchestrator(context).create_project()


async def run_project_command(ui: UIBase, config: Config, command: str, platform: Platform, project_dir: str) -> bool:
    """
    Run the `update` or `open` command for an existing project.

    The commands are best effort: failures are reported to the user
    but not treated as errors.

    :param ui: User interface.
    :param config: Configuration.
    :param command: Either "update" or "open".
    :param platform: Platform to run the command for.
    :param project_dir: Project root directory.
    :return: Always True.
    """
    context = StepContext(
        project_root=project_dir,
        invocation_dir=project_dir,
        ui=ui,
        process_manager=create_process_manager(ui, project_dir),
        config=config,
    )
    orca = Orchestrator(context)

    if command == "update":
        await orca.update_project(platform)
    else:
        await orca.open_project(platform)

    return True


async def async_main(ui: UIBase, args: Namespace, cwd: Optional[str] = None) -> bool:
    """
    Main application coroutine.

    :param ui: User interface.
    :param args: Command-line arguments.
    :param cwd: Working directory (defaults to the process working directory).
    :return: True if the application ran successfully, False otherwise.
    """
    if args.show_config:
        show_config()
        return True

    config = get_config()
    cwd = os.path.abspath(cwd or os.getcwd())
    command = (args.command or "").lower()

    ui_started = await ui.start()
    if not ui_started:
        return False

    try:
        if command in ("update", "open"):
            platform = Platform.parse(args.platform)
            log.info(f"Running `{command}` for {platform.value} in {cwd}")
            return await run_project_command(ui, config, command, platform, cwd)

        if command:
            await ui.send_message(f"\nUnrecognized command: '{args.command}'. Starting the project creation flow.")
        return await create_new_project(ui, config, cwd)
    except UIClosedError:
        log.info("Interrupted by user")
        await ui.send_message("\nInterrupted by user.")
        return False
    except Exception as err:
        log.error(f"Uncaught exception: {err}", exc_info=True)
        await ui.send_message(f"\nStopping JARC due to an unexpected error: {err}")
        return False
    finally:
        await ui.stop()


def run_jarc(argv: Optional[list[str]] = None) -> int:
    ui, args = init(argv)
    if not ui:
        return 1

    try:
        success = run(async_main(ui, args))
    except KeyboardInterrupt:
        log.info("Interrupted by user")
        print("\nInterrupted by user.", file=sys.stderr)
        return 1

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(run_jarc())
