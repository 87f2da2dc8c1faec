from jarc.config import Platform
from jarc.log import get_logger
from jarc.steps.base import BaseStep, StepContext, is_macos
from jarc.steps.bridge import (
    AddPlatform,
    InitBridge,
    InitManifest,
    InstallBridge,
    InstallPlugins,
    OpenIDE,
    SyncAssets,
)
from jarc.steps.response import StepResult, StepStatus
from jarc.steps.scaffold import ProjectDirectory, WebAssets
from jarc.steps.summary import project_summary

log = get_logger(__name__)

REMEDIATION_HINT = "💡 Make sure you are in the root directory of your JARC project."


class Orchestrator:
    """
    Runs the pipeline steps in order and applies the error policy.

    A failure of a critical step stops the pipeline. Failures of other
    steps are reported (with a hint on how to recover) and the pipeline
    continues with the next step.
    """

    def __init__(self, context: StepContext):
        self.context = context
        self.results: list[StepResult] = []

    @property
    def ui(self):
        return self.context.ui

    def create_project_steps(self) -> list[BaseStep]:
        """
        Build the ordered list of steps for creating a new project.
        """
        ctx = self.context
        answers = ctx.answers

        steps = [
            ProjectDirectory(ctx),
            WebAssets(ctx),
            InitManifest(ctx),
            InstallBridge(ctx),
            InitBridge(ctx),
        ]
        steps.extend(AddPlatform(ctx, platform) for platform in answers.ordered_platforms)
        steps.append(InstallPlugins(ctx))
        steps.append(SyncAssets(ctx))

        if answers.has_platform(Platform.ANDROID):
            steps.append(OpenIDE(ctx, Platform.ANDROID))
        # Xcode is only available on macOS
        if answers.has_platform(Platform.IOS) and is_macos():
            steps.append(OpenIDE(ctx, Platform.IOS))

        return steps

    async def report_failure(self, result: StepResult):
        if result.exec_log:
            await self.ui.send_message(f"\n❌ Error running the command: {result.exec_log.cmd}")
            await self.ui.send_message(result.message)
        else:
            await self.ui.send_message(f"\n❌ {result.step.display_name} failed: {result.message}")

        if not result.step.critical:
            await self.ui.send_message(f"\n{REMEDIATION_HINT}")

    async def run_steps(self, steps: list[BaseStep]) -> bool:
        """
        Run the steps in order.

        :param steps: Steps to run.
        :return: False if a critical step failed, True otherwise.
        """
        for step in steps:
            log.debug(f"Running step {step.name}")
            result = await step.run()
            self.results.append(result)

            if result.status == StepStatus.SKIPPED:
                log.debug(f"Step {step.name} skipped")
                continue

            if not result.failed:
                log.info(f"Step {step.name} done")
                continue

            await self.report_failure(result)
            if step.critical:
                log.error(f"Critical step {step.name} failed: {result.message}")
                return False

            log.warning(f"Step {step.name} failed, continuing: {result.message}")

        return True

    @property
    def opened_ide(self) -> bool:
        return any(isinstance(r.step, OpenIDE) and r.status == StepStatus.DONE for r in self.results)

    async def create_project(self) -> bool:
        """
        Create a new project from the wizard answers.

        :return: True if the project was created, False if a critical step failed.
        """
        answers = self.context.answers
        log.info(f"Creating project {answers.name} ({answers.app_id}) in {self.context.project_root}")

        success = await self.run_steps(self.create_project_steps())
        if not success:
            await self.ui.send_message("\n🚨🚨🚨 An error occurred while creating the project. 🚨🚨🚨")
            await self.ui.send_message("Check the messages above for details.")
            return False

        await self.ui.send_message(
            project_summary(answers, self.opened_ide, is_macos(), self.context.config.bridge.web_dir)
        )
        return True

    async def update_project(self, platform: Platform) -> bool:
        """
        Synchronize the web assets of the project for a single platform.
        """
        return await self.run_steps([SyncAssets(self.context, platform)])

    async def open_project(self, platform: Platform) -> bool:
        """
        Open the project in the native IDE for a single platform.
        """
        return await self.run_steps([OpenIDE(self.context, platform)])


__all__ = ["Orchestrator", "REMEDIATION_HINT"]
