from __future__ import annotations

import io
import sys

import pytest
from fastapi.testclient import TestClient

from modules.case_transform.tool.app import app
from modules.case_transform.tool.cli import main


def test_converts_arguments(capsys):
    assert main(["kebab", "userName"]) == 0
    assert capsys.readouterr().out == "user-name\n"


def test_joins_words_with_spaces(capsys):
    assert main(["camel", "hello", "world"]) == 0
    assert capsys.readouterr().out == "helloWorld\n"


def test_reads_lines_from_stdin(capsys):
    stdin = io.StringIO("foo bar\nbazQux\n\n")
    assert main(["snake"], stdin=stdin) == 0
    assert capsys.readouterr().out == "foo_bar\nbaz_qux\n\n"


def test_rejects_unknown_style(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["title", "hello"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_error_responses_still_log_after_stderr_is_closed(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stderr", stream)
    assert main(["kebab", "userName"]) == 0
    monkeypatch.undo()
    stream.close()

    client = TestClient(app)
    response = client.post("/convert/title", data={"text": "hello"})
    assert response.status_code == 404
    response = client.post("/convert/camel")
    assert response.status_code == 400
