from unittest.mock import AsyncMock, patch

import pytest

from jarc.ui.base import UIClosedError, jarc_source
from jarc.ui.console import PlainConsoleUI, parse_choices

OPTIONS = {"android": "Android", "ios": "iOS"}


@pytest.mark.asyncio
async def test_send_message(capsys):
    ui = PlainConsoleUI()

    connected = await ui.start()
    assert connected is True
    await ui.send_message("Hello from JARC ♫", source=jarc_source)
    await ui.send_warning("Careful")

    captured = capsys.readouterr()
    assert captured.out == "[JARC] Hello from JARC ♫\n⚠️ Careful\n"
    await ui.stop()


@pytest.mark.asyncio
async def test_stream(capsys):
    ui = PlainConsoleUI()

    await ui.start()
    for chunk in ["added ", "42 ", "packages"]:
        await ui.send_stream_chunk(chunk)
    await ui.send_stream_chunk(None)

    captured = capsys.readouterr()
    assert captured.out == "added 42 packages\n"
    await ui.stop()


@pytest.mark.asyncio
@patch("jarc.ui.console.PromptSession")
async def test_ask_question_simple(mock_PromptSession):
    prompt_async = mock_PromptSession.return_value.prompt_async = AsyncMock(return_value=" myapp ")
    ui = PlainConsoleUI()

    input = await ui.ask_question("What do you want to call your mobile app?")

    assert input.cancelled is False
    assert input.text == "myapp"
    prompt_async.assert_awaited_once()


@pytest.mark.asyncio
@patch("jarc.ui.console.PromptSession")
async def test_ask_question_default(mock_PromptSession, capsys):
    mock_PromptSession.return_value.prompt_async = AsyncMock(return_value="")
    ui = PlainConsoleUI()

    input = await ui.ask_question("Name?", default="mi-app-jarc")

    assert input.text == "mi-app-jarc"
    assert "(default: mi-app-jarc)" in capsys.readouterr().out


@pytest.mark.asyncio
@patch("jarc.ui.console.PromptSession")
async def test_ask_question_empty_is_asked_again(mock_PromptSession):
    prompt_async = mock_PromptSession.return_value.prompt_async = AsyncMock(side_effect=["", "second"])
    ui = PlainConsoleUI()

    input = await ui.ask_question("Name?")

    assert input.text == "second"
    assert prompt_async.await_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
@patch("jarc.ui.console.PromptSession")
async def test_ask_question_interrupted(mock_PromptSession, error):
    mock_PromptSession.return_value.prompt_async = AsyncMock(side_effect=error)
    ui = PlainConsoleUI()

    with pytest.raises(UIClosedError):
        await ui.ask_question("Name?")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("", ["android"]),
        ("-", []),
        ("ios", ["ios"]),
        ("2, 1", ["android", "ios"]),
        ("ios android", ["android", "ios"]),
    ],
)
@patch("jarc.ui.console.PromptSession")
async def test_ask_choices(mock_PromptSession, answer, expected, capsys):
    mock_PromptSession.return_value.prompt_async = AsyncMock(return_value=answer)
    ui = PlainConsoleUI()

    input = await ui.ask_choices("Which platforms?", OPTIONS, defaults=["android"], hint="iOS needs a Mac")

    assert input.choices == expected
    out = capsys.readouterr().out
    assert "  1. [x] Android (android)" in out
    assert "  2. [ ] iOS (ios)" in out
    assert "iOS needs a Mac" in out


@pytest.mark.asyncio
@patch("jarc.ui.console.PromptSession")
async def test_ask_choices_invalid_is_asked_again(mock_PromptSession, capsys):
    prompt_async = mock_PromptSession.return_value.prompt_async = AsyncMock(side_effect=["windows", "3", "1"])
    ui = PlainConsoleUI()

    input = await ui.ask_choices("Which platforms?", OPTIONS)

    assert input.choices == ["android"]
    assert prompt_async.await_count == 3
    assert capsys.readouterr().out.count("Please choose from the available options") == 2


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("android", ["android"]),
        ("ios,android", ["android", "ios"]),
        ("1,1", ["android"]),
        (" 2 ", ["ios"]),
        ("0", None),
        ("web", None),
    ],
)
def test_parse_choices(answer, expected):
    assert parse_choices(answer, OPTIONS) == expected
