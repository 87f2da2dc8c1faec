from typing import Optional

from pydantic import BaseModel


class UIClosedError(Exception):
    """The user interface has been closed (user stopped JARC)."""


class UISource:
    """
    Source for UI messages.

    Attributes:
    * `display_name`: Human-readable name of the source.
    * `type_name`: Type name of the source
    """

    display_name: str
    type_name: str

    def __init__(self, display_name: str, type_name: str):
        """
        Create a new UI source.

        :param display_name: Human-readable name of the source.
        :param type_name: Type name of the source
        """
        self.display_name = display_name
        self.type_name = type_name

    def __str__(self) -> str:
        return self.display_name


class UserInput(BaseModel):
    """
    Represents user input.

    See also: `UIBase.ask_question()`, `UIBase.ask_choices()`

    Attributes:
    * `text`: User-provided text (if any).
    * `choices`: Keys of the options the user selected in a multi-choice question.
    * `cancelled`: Whether the user cancelled the input.
    """

    text: Optional[str] = None
    choices: list[str] = []
    cancelled: bool = False


class UIBase:
    """
    Base class for UI adapters.
    """

    async def start(self) -> bool:
        """
        Start the UI adapter.

        :return: Whether the UI was started successfully.
        """
        raise NotImplementedError()

    async def stop(self):
        """
        Stop the UI adapter.
        """
        raise NotImplementedError()

    async def send_stream_chunk(self, chunk: Optional[str], *, source: Optional[UISource] = None):
        """
        Send a chunk of the stream to the UI.

        :param chunk: Chunk of the stream (None marks the end of the stream).
        :param source: Source of the stream (if any).
        """
        raise NotImplementedError()

    async def send_message(self, message: str, *, source: Optional[UISource] = None):
        """
        Send a complete message to the UI.

        :param message: Message content.
        :param source: Source of the message (if any).
        """
        raise NotImplementedError()

    async def send_warning(self, message: str, *, source: Optional[UISource] = None):
        """
        Send a warning to the UI.

        :param message: Warning content.
        :param source: Source of the warning (if any).
        """
        raise NotImplementedError()

    async def ask_question(
        self,
        question: str,
        *,
        default: Optional[str] = None,
        hint: Optional[str] = None,
        source: Optional[UISource] = None,
    ) -> UserInput:
        """
        Ask the user a free-text question.

        After the user answers, constructs a `UserInput` object
        with the entered text. If the user cancels the input,
        the `cancelled` attribute should be set to True.

        :param question: Question to ask.
        :param default: Text to use if the user enters nothing.
        :param hint: Text to display below the question.
        :param source: Source of the question (if any).
        :return: User input.
        """
        raise NotImplementedError()

    async def ask_choices(
        self,
        question: str,
        options: dict[str, str],
        *,
        defaults: Optional[list[str]] = None,
        hint: Optional[str] = None,
        source: Optional[UISource] = None,
    ) -> UserInput:
        """
        Ask the user to pick zero or more options.

        Option keys are the values returned in `UserInput.choices`, option
        values are the labels shown to the user. The selected keys are
        returned in the order the options were given.

        :param question: Question to ask.
        :param options: Available options (key => label).
        :param defaults: Keys of the options selected if the user enters nothing.
        :param hint: Text to display below the question.
        :param source: Source of the question (if any).
        :return: User input.
        """
        raise NotImplementedError()


jarc_source = UISource("JARC", "jarc")
cmd_output_source = UISource("Command output", "cli-output")


__all__ = [
    "UISource",
    "UserInput",
    "UIBase",
    "UIClosedError",
    "jarc_source",
    "cmd_output_source",
]
