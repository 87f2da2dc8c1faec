import re
from typing import Optional

from prompt_toolkit.shortcuts import PromptSession

from jarc.log import get_logger
from jarc.ui.base import UIBase, UIClosedError, UISource, UserInput

log = get_logger(__name__)


def parse_choices(answer: str, options: dict[str, str]) -> Optional[list[str]]:
    """
    Parse a multi-choice answer.

    The answer is a comma- or space-separated list of option keys or
    1-based option numbers, eg. "android, ios" or "1 2".

    :param answer: Text entered by the user.
    :param options: Available options (key => label).
    :return: Selected keys in option order, or None if the answer is invalid.
    """
    keys = list(options.keys())
    selected = set()

    for token in re.split(r"[,\s]+", answer.strip()):
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(keys):
            selected.add(keys[int(token) - 1])
        elif token in options:
            selected.add(token)
        else:
            return None

    return [k for k in keys if k in selected]


class PlainConsoleUI(UIBase):
    """
    UI adapter for plain (no color) console output.
    """

    async def start(self) -> bool:
        log.debug("Starting console UI")
        return True

    async def stop(self):
        log.debug("Stopping console UI")

    async def send_stream_chunk(self, chunk: Optional[str], *, source: Optional[UISource] = None):
        if chunk is None:
            # end of stream
            print("", flush=True)
        else:
            print(chunk, end="", flush=True)

    async def send_message(self, message: str, *, source: Optional[UISource] = None):
        if source:
            print(f"[{source}] {message}")
        else:
            print(message)

    async def send_warning(self, message: str, *, source: Optional[UISource] = None):
        await self.send_message(f"⚠️ {message}", source=source)

    async def _prompt(self, default: str = "") -> str:
        session = PromptSession("> ")
        try:
            answer = await session.prompt_async(default=default)
        except (KeyboardInterrupt, EOFError):
            raise UIClosedError()
        return answer.strip()

    async def ask_question(
        self,
        question: str,
        *,
        default: Optional[str] = None,
        hint: Optional[str] = None,
        source: Optional[UISource] = None,
    ) -> UserInput:
        if source:
            print(f"[{source}] {question}")
        else:
            print(f"{question}")

        if hint:
            print(f"  {hint}")

        if default:
            print(f"  (default: {default})")

        while True:
            answer = await self._prompt()
            if not answer and default:
                answer = default
            if answer:
                return UserInput(text=answer)
            print("Please provide a valid input")

    async def ask_choices(
        self,
        question: str,
        options: dict[str, str],
        *,
        defaults: Optional[list[str]] = None,
        hint: Optional[str] = None,
        source: Optional[UISource] = None,
    ) -> UserInput:
        defaults = defaults or []

        if source:
            print(f"[{source}] {question}")
        else:
            print(f"{question}")

        if hint:
            print(f"  {hint}")

        for i, (k, v) in enumerate(options.items(), start=1):
            mark = "x" if k in defaults else " "
            print(f"  {i}. [{mark}] {v} ({k})")
        print("  Enter numbers or names separated by commas, '-' for none, empty for the marked ones.")

        while True:
            answer = await self._prompt()
            if not answer:
                return UserInput(choices=[k for k in options if k in defaults])
            if answer == "-":
                return UserInput(choices=[])
            choices = parse_choices(answer, options)
            if choices is not None:
                return UserInput(choices=choices)
            print("Please choose from the available options")


__all__ = ["PlainConsoleUI", "parse_choices"]
