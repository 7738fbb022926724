"""Shared test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def no_debug(monkeypatch):
    """Tests run in capture mode unless they set NPMCTL_DEBUG themselves."""
    monkeypatch.delenv("NPMCTL_DEBUG", raising=False)
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a temporary project directory."""
    from npmctl.config import Settings

    runtime = tmp_path / "runtime"
    return Settings(
        root_path=str(tmp_path / "project"),
        node_path=str(runtime / "bin" / "node"),
        npm_path=str(runtime / "lib" / "npm" / "bin" / "npm-cli.js"),
        registry="https://registry.example.test/",
    )


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run and process.run_streaming for tests."""
    from npmctl import process

    calls = []
    responses = []
    exit_codes = []

    def fake_run(args, env=None, cwd=None):
        calls.append(("run", args, env, cwd))
        if responses:
            return responses.pop(0)
        return process.Result(returncode=0, stdout="", stderr="")

    def fake_run_streaming(args, env=None, cwd=None, stdout=None, stderr=None):
        calls.append(("run_streaming", args, env, cwd))
        if exit_codes:
            return exit_codes.pop(0)
        return 0

    monkeypatch.setattr(process, "run", fake_run)
    monkeypatch.setattr(process, "run_streaming", fake_run_streaming)

    return type(
        "MockProcess", (), {"calls": calls, "responses": responses, "exit_codes": exit_codes}
    )()
