from jarc.config import DEFAULT_PROJECT_NAME, Config, Platform
from jarc.log import get_logger
from jarc.project.answers import Answers, default_app_id, validate_app_id, validate_name
from jarc.steps.base import is_macos
from jarc.ui.base import UIBase, UIClosedError, UserInput

log = get_logger(__name__)

PLATFORM_LABELS = {
    Platform.ANDROID.value: "Android",
    Platform.IOS.value: "iOS",
}


def check_cancelled(user_input: UserInput) -> UserInput:
    if user_input.cancelled:
        log.info("Project wizard cancelled by user")
        raise UIClosedError()
    return user_input


async def ask_project_name(ui: UIBase) -> str:
    while True:
        user_input = check_cancelled(
            await ui.ask_question(
                "What do you want to call your mobile app (directory name)?",
                default=DEFAULT_PROJECT_NAME,
            )
        )
        error = validate_name(user_input.text)
        if not error:
            return user_input.text.strip()
        await ui.send_message(error)


async def ask_app_id(ui: UIBase, name: str) -> str:
    while True:
        user_input = check_cancelled(
            await ui.ask_question(
                "What will your app's package ID be (eg. com.mycompany.myapp)?",
                default=default_app_id(name),
            )
        )
        app_id = (user_input.text or "").strip()
        error = validate_app_id(app_id)
        if not error:
            return app_id
        await ui.send_message(error)


async def ask_platforms(ui: UIBase) -> list[str]:
    user_input = check_cancelled(
        await ui.ask_choices(
            "Which native platforms do you want to add?",
            PLATFORM_LABELS,
            defaults=[Platform.ANDROID.value],
            hint="Remember that iOS requires a Mac with Xcode installed.",
        )
    )
    return user_input.choices


async def ask_plugins(ui: UIBase, config: Config) -> list[str]:
    if not config.plugins:
        return []

    user_input = check_cancelled(
        await ui.ask_choices(
            "Do you want to add some common plugins?",
            {p.package: p.name for p in config.plugins},
            defaults=[],
        )
    )
    return user_input.choices


async def collect_answers(ui: UIBase, config: Config) -> Answers:
    """
    Ask the user about the project to create.

    Questions are repeated until a valid answer is given. Nothing is
    written to disk or executed here.

    :param ui: User interface.
    :param config: Configuration (plugin catalog).
    :return: Validated answers.
    :raises UIClosedError: If the user cancelled the wizard.
    """
    name = await ask_project_name(ui)
    app_id = await ask_app_id(ui, name)

    platforms = await ask_platforms(ui)
    if Platform.IOS.value in platforms and not is_macos():
        await ui.send_warning("To build and run iOS apps you need macOS and Xcode.")

    plugins = await ask_plugins(ui, config)

    answers = Answers(
        name=name,
        app_id=app_id,
        platforms={Platform(p) for p in platforms},
        plugins=plugins,
    )
    log.debug(f"Collected answers: {answers.model_dump_json()}")
    return answers


__all__ = ["collect_answers"]
