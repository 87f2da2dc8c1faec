from jarc.disk.scaffold import WebAssetSource, materialize_web_assets, setup_project_directory
from jarc.log import get_logger
from jarc.steps.base import BaseStep
from jarc.steps.response import StepResult

log = get_logger(__name__)


class ProjectDirectory(BaseStep):
    """
    Create the project directory (or reuse an existing one).
    """

    name = "project-directory"
    display_name = "Project directory"
    critical = True

    async def run(self) -> StepResult:
        await self.send_message(f"\nCreating the project directory at: {self.context.project_root}")
        try:
            _, existed = setup_project_directory(self.answers.name, self.context.invocation_dir)
        except OSError as err:
            log.error(f"Error creating project directory: {err}", exc_info=True)
            return StepResult.error(self, f"Could not create the project directory: {err}")

        if existed:
            await self.send_warning(f"The directory '{self.answers.name}' already exists. Continuing inside it.")

        return StepResult.done(self)


class WebAssets(BaseStep):
    """
    Copy the web assets found next to the invocation point, or generate
    a starter web asset tree.
    """

    name = "web-assets"
    display_name = "Web assets"
    critical = True

    async def run(self) -> StepResult:
        web_dir = self.config.bridge.web_dir
        try:
            source, details = materialize_web_assets(
                self.answers.name,
                self.context.invocation_dir,
                self.context.project_root,
                web_dir,
            )
        except OSError as err:
            log.error(f"Error setting up web assets: {err}", exc_info=True)
            return StepResult.error(self, f"Could not set up the '{web_dir}' folder: {err}")

        if source == WebAssetSource.COPIED:
            await self.send_message(f"\n📦 Copied the existing web project from '{details}'.")
        else:
            await self.send_message(f"\n🌐 No '{web_dir}' folder found in the current directory. Created a basic one.")
            await self.send_message(details.rstrip())

        return StepResult.done(self)


__all__ = ["ProjectDirectory", "WebAssets"]
