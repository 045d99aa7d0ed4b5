"""
Tests for the command line front end and application lifespan
"""
import io
from unittest.mock import AsyncMock, patch

import pytest

from kanna.cli import build_parser, parse_interactive_line, run
from kanna.main import lifespan
from tests.helpers import youdao_payload


@pytest.mark.parametrize("line, expected", [
    ("", None),
    ("   \n", None),
    ("q\n", ("quit", "")),
    ("EXIT", ("quit", "")),
    ("w hello\n", ("w", "hello")),
    ("wl 3", ("wl", "3")),
    ("wl", ("wl", "")),
    ("serendipity\n", ("w", "serendipity")),
    ("ice cream", ("w", "ice cream")),
])
def test_parse_interactive_line(line, expected):
    assert parse_interactive_line(line) == expected


def test_parser_accepts_repeated_lookups_and_list():
    args = build_parser().parse_args(["-w", "cat", "-w", "dog", "-wl"])

    assert args.words == ["cat", "dog"]
    assert args.list_count == "5"


def test_parser_list_count():
    args = build_parser().parse_args(["-wl", "12", "--order", "frequent"])

    assert args.words is None
    assert args.list_count == "12"
    assert args.order == "frequent"


@pytest.fixture
def project_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROJECT_DIR", str(tmp_path))
    monkeypatch.setenv("YOUDAO_KEY", "test-key")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SPEECH_DIR", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    return tmp_path


async def test_lifespan_wires_a_working_dispatcher(settings):
    output = io.StringIO()

    async with lifespan(settings, output, setup_logging=False) as context:
        with patch.object(context.provider, "fetch", new=AsyncMock(return_value=youdao_payload("cat"))) as fetch:
            await context.dispatcher.lookup("cat")
            await context.dispatcher.lookup("cat")
            await context.dispatcher.join()

    assert fetch.await_count == 1
    assert output.getvalue().count("----  cat  ----") == 2
    assert settings.SPEECH_DIR.is_dir()


async def test_run_looks_up_words_from_arguments(project_env):
    output = io.StringIO()
    args = build_parser().parse_args(["-w", "cat", "-wl", "--no-audio"])

    with patch("kanna.main.configure_logging"), \
         patch("kanna.services.translation.youdao.YoudaoClient.fetch",
               new=AsyncMock(return_value=youdao_payload("cat"))):
        assert await run(args, stdout=output) == 0

    text = output.getvalue()
    assert text.index("----  cat  ----") < text.index("1 ---- cat")
    assert (project_env / "kanna.db").exists()


async def test_run_interactive_until_quit(project_env):
    output = io.StringIO()
    stdin = io.StringIO("w cat\nwl 1\nq\nw never\n")
    args = build_parser().parse_args(["--no-audio"])

    fetch = AsyncMock(return_value=youdao_payload("cat"))
    with patch("kanna.main.configure_logging"), \
         patch("kanna.services.translation.youdao.YoudaoClient.fetch", new=fetch):
        assert await run(args, stdin=stdin, stdout=output) == 0

    assert fetch.await_count == 1
    text = output.getvalue()
    assert "----  cat  ----" in text
    assert "1 ---- cat" in text
    assert "never" not in text


async def test_run_init_db(project_env):
    output = io.StringIO()
    args = build_parser().parse_args(["--init-db"])

    assert await run(args, stdout=output) == 0

    assert (project_env / "kanna.db").exists()
    assert "Database ready" in output.getvalue()
