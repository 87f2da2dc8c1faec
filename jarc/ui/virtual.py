from typing import Optional

from jarc.log import get_logger
from jarc.ui.base import UIBase, UISource, UserInput

log = get_logger(__name__)


class VirtualUI(UIBase):
    """
    Scripted UI adapter.

    Answers are replayed from a predefined list of inputs. Once the inputs
    are exhausted, questions are answered with their defaults.
    """

    def __init__(self, inputs: list[dict]):
        self.virtual_inputs = [UserInput(**input) for input in inputs]

    async def start(self) -> bool:
        log.debug("Starting virtual UI")
        return True

    async def stop(self):
        log.debug("Stopping virtual UI")

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

    def _next_input(self) -> Optional[UserInput]:
        if not self.virtual_inputs:
            return None
        ret = self.virtual_inputs[0]
        self.virtual_inputs = self.virtual_inputs[1:]
        return ret

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

        ret = self._next_input()
        if ret:
            return ret

        return UserInput(text=default or "")

    async def ask_choices(
        self,
        question: str,
        options: dict[str, str],
        *,
        defaults: Optional[list[str]] = None,
        hint: Optional[str] = None,
        source: Optional[UISource] = None,
    ) -> UserInput:
        if source:
            print(f"[{source}] {question}")
        else:
            print(f"{question}")

        ret = self._next_input()
        if ret:
            return ret

        return UserInput(choices=[k for k in options if k in (defaults or [])])


__all__ = ["VirtualUI"]
