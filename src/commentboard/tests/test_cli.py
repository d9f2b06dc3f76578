from click.testing import CliRunner
from pytest import fixture

from commentboard.app import Application
from commentboard.cli import main


@fixture
def runs(monkeypatch):
    calls = []

    def fake_run(self, **kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(Application, "run", fake_run)
    monkeypatch.delenv("PORT", raising=False)
    return calls


def test_run_default_port(runs):
    result = CliRunner().invoke(main, ["run"])
    assert result.exit_code == 0, result.output
    assert "http://localhost:3003" in result.output
    assert runs == [
        {"host": "127.0.0.1", "port": 3003, "debug": False, "use_reloader": False}
    ]


def test_run_port_from_environment(runs, monkeypatch):
    monkeypatch.setenv("PORT", "4004")
    result = CliRunner().invoke(main, ["run"])
    assert result.exit_code == 0, result.output
    assert runs[0]["port"] == 4004


def test_run_port_option(runs, monkeypatch):
    monkeypatch.setenv("PORT", "4004")
    result = CliRunner().invoke(main, ["run", "--port", "5005", "--host", "0.0.0.0"])
    assert result.exit_code == 0, result.output
    assert runs[0]["port"] == 5005
    assert runs[0]["host"] == "0.0.0.0"


def test_run_port_zero(runs, monkeypatch):
    monkeypatch.setenv("PORT", "4004")
    result = CliRunner().invoke(main, ["run", "--port", "0"])
    assert result.exit_code == 0, result.output
    assert runs[0]["port"] == 0
