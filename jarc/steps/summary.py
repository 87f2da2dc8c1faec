from jarc.config import DEFAULT_WEB_DIR, Platform
from jarc.project.answers import Answers
from jarc.steps.base import quote_arg


def next_steps(answers: Answers, opened_ide: bool, macos: bool, web_dir: str = DEFAULT_WEB_DIR) -> list[str]:
    """
    Build the numbered list of suggested next steps shown after a project is created.

    :param answers: Wizard answers.
    :param opened_ide: Whether a native IDE was opened automatically.
    :param macos: Whether we're running on macOS (Xcode is only suggested there).
    :param web_dir: Name of the web asset directory.
    :return: Lines of the list, numbered from 1.
    """
    items = [f"Enter the directory: cd {quote_arg(answers.name)}"]

    if opened_ide:
        items.append("Tried to open the project in the native IDE. If it didn't open, use 'jarc open [android|ios]'.")
    else:
        if answers.has_platform(Platform.ANDROID):
            items.append("To open it in Android Studio manually: jarc open")
        if answers.has_platform(Platform.IOS) and macos:
            items.append("To open it in Xcode (on macOS) manually: jarc open ios")

    items.append("To sync web changes: jarc update [android|ios]")
    items.append(f"Start developing your app in the '{web_dir}' folder!")
    items.append("Run it on an emulator/device from Android Studio or Xcode.")

    return [f"   {i}. {item}" for i, item in enumerate(items, start=1)]


def project_summary(answers: Answers, opened_ide: bool, macos: bool, web_dir: str = DEFAULT_WEB_DIR) -> str:
    """
    Final message shown after a project has been created.
    """
    lines = [
        "",
        "-----------------------------------------",
        "✅ Your JARC project has been created successfully!",
        "",
        f"➡️ Project directory: ./{answers.name}",
        "",
        "Suggested next steps:",
        *next_steps(answers, opened_ide, macos, web_dir),
        "-----------------------------------------",
    ]
    return "\n".join(lines)


__all__ = ["next_steps", "project_summary"]
