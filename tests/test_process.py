"""Tests for process.py: subprocess wrapper."""

import os

from npmctl.process import Result, run, run_streaming


def test_result_dataclass():
    r = Result(returncode=0, stdout="hello", stderr="")
    assert r.returncode == 0
    assert r.stdout == "hello"
    assert r.stderr == ""
    assert r.ok


def test_result_not_ok():
    assert not Result(returncode=1, stdout="", stderr="").ok


def test_run_captures_output():
    result = run(["echo", "hello"])
    assert result.returncode == 0
    assert result.stdout.strip() == "hello"
    assert result.stderr == ""


def test_run_captures_stderr():
    result = run(["sh", "-c", "echo err >&2"])
    assert result.stderr.strip() == "err"


def test_run_returns_nonzero():
    result = run(["sh", "-c", "exit 42"])
    assert result.returncode == 42


def test_run_env_is_not_merged(monkeypatch):
    monkeypatch.setenv("AMBIENT_VAR", "leaked")
    env = {"PATH": os.environ.get("PATH", ""), "TEST_VAR": "works"}
    result = run(["sh", "-c", "echo ${TEST_VAR}:${AMBIENT_VAR:-unset}"], env=env)
    assert result.stdout.strip() == "works:unset"


def test_run_with_cwd(tmp_path):
    result = run(["pwd"], cwd=str(tmp_path))
    assert os.path.realpath(result.stdout.strip()) == os.path.realpath(tmp_path)


def test_run_streaming_returns_exit_code():
    code = run_streaming(["true"])
    assert code == 0


def test_run_streaming_nonzero():
    code = run_streaming(["false"])
    assert code != 0


def test_run_streaming_to_target(tmp_path):
    out_path = tmp_path / "out.txt"
    err_path = tmp_path / "err.txt"
    with open(out_path, "w") as out, open(err_path, "w") as err:
        code = run_streaming(["sh", "-c", "echo live; echo oops >&2"], stdout=out, stderr=err)
    assert code == 0
    assert out_path.read_text() == "live\n"
    assert err_path.read_text() == "oops\n"
