import nox

PYTHON_VERSIONS = ["3.9", "3.10", "3.11", "3.12"]
PACKAGE = "commentboard"

nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ("pytest",)


@nox.session(python=PYTHON_VERSIONS)
def pytest(session):
    session.install("-e", ".[tests]")
    session.run("pip", "check")
    session.run("pytest", "-q", *session.posargs)


@nox.session(python="3.12")
def coverage(session):
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", f"--cov={PACKAGE}", "--cov-report=term-missing")
