from typing import Optional

from jarc.config import Platform
from jarc.log import get_logger
from jarc.steps.base import IDE_NAMES, BaseStep, CommandStep, StepContext, is_macos, quote_arg
from jarc.steps.response import StepResult

log = get_logger(__name__)

IOS_REQUIREMENTS_WARNING = "To build and run iOS apps you need macOS and Xcode."


class InitManifest(CommandStep):
    name = "init-manifest"
    display_name = "Initialize package manifest"
    critical = True
    message = "Initializing the package manifest..."

    def get_commands(self) -> list[str]:
        return [self.package_manager_cmd("init", "-y")]


class InstallBridge(CommandStep):
    name = "install-bridge"
    display_name = "Install native bridge"
    message = "Installing the native bridge CLI and core..."

    def get_commands(self) -> list[str]:
        packages = self.config.bridge.core_packages
        if not packages:
            return []
        return [self.package_manager_cmd("install", *packages)]


class InitBridge(CommandStep):
    name = "init-bridge"
    display_name = "Initialize native bridge"
    critical = True
    message = "Initializing the native bridge in the project..."

    def get_commands(self) -> list[str]:
        return [
            self.bridge_cmd(
                "init",
                quote_arg(self.answers.name),
                quote_arg(self.answers.app_id),
                f"--web-dir={quote_arg(self.config.bridge.web_dir)}",
            )
        ]


class AddPlatform(CommandStep):
    """
    Install the platform package and add the native project for it.
    """

    critical = False

    def __init__(self, context: StepContext, platform: Platform):
        super().__init__(context)
        self.platform = platform
        self.name = f"add-{platform.value}"
        self.display_name = f"Add {platform.value} platform"
        icon = "🤖" if platform == Platform.ANDROID else "🍏"
        self.message = f"{icon} Adding the {platform.value} platform..."

    def get_commands(self) -> list[str]:
        return [
            self.package_manager_cmd("install", self.config.bridge.platform_package(self.platform)),
            self.bridge_cmd("add", self.platform.value),
        ]

    async def run(self) -> StepResult:
        if self.platform == Platform.IOS and not is_macos():
            await self.send_warning(IOS_REQUIREMENTS_WARNING)
        return await super().run()


class InstallPlugins(CommandStep):
    name = "install-plugins"
    display_name = "Install plugins"
    message = "🔌 Installing the selected plugins..."

    def get_commands(self) -> list[str]:
        if not self.answers.plugins:
            return []
        return [self.package_manager_cmd("install", *self.answers.plugins)]


class SyncAssets(CommandStep):
    """
    Copy the web assets into the native projects and update plugins.

    Without a platform, all the platforms added to the project are synchronized.
    """

    name = "sync"
    display_name = "Synchronize"

    def __init__(self, context: StepContext, platform: Optional[Platform] = None):
        super().__init__(context)
        self.platform = platform
        if platform:
            self.message = f"🔄 Synchronizing the native bridge project for {platform.value}..."
        else:
            self.message = "🔄 Synchronizing the project (copying web assets, updating plugins)..."

    def get_commands(self) -> list[str]:
        if self.platform:
            return [self.bridge_cmd("sync", self.platform.value)]
        return [self.bridge_cmd("sync")]


class OpenIDE(BaseStep):
    """
    Open the native project in the platform IDE (best effort).
    """

    def __init__(self, context: StepContext, platform: Platform):
        super().__init__(context)
        self.platform = platform
        self.name = f"open-{platform.value}"
        self.display_name = f"Open {IDE_NAMES[platform]}"

    async def run(self) -> StepResult:
        ide = IDE_NAMES[self.platform]
        await self.send_message(f"\nOpening the project in {ide}...")
        if self.platform == Platform.IOS and not is_macos():
            await self.send_warning("To open and work on the iOS project you need macOS and Xcode.")

        exec_log = await self.run_command(self.bridge_cmd("open", self.platform.value))
        result = StepResult.from_exec_log(self, exec_log)
        if result.failed:
            await self.send_warning(
                f"Could not open {ide} automatically. Make sure it is installed and available, "
                f"or open it manually with 'jarc open {self.platform.value}'."
            )
        return result


__all__ = [
    "InitManifest",
    "InstallBridge",
    "InitBridge",
    "AddPlatform",
    "InstallPlugins",
    "SyncAssets",
    "OpenIDE",
]
