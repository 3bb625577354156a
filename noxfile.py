import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]
SAMPLE_SCHEMA = "tests/data/blog.graphql"

nox.options.default_venv_backend = "uv"
nox.options.sessions = ["tests"]


def sync(session: nox.Session) -> None:
    session.run_install(
        "uv",
        "sync",
        env={"UV_PROJECT_ENVIRONMENT": session.virtualenv.location},
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    sync(session)
    session.run(
        "pytest",
        "--cov=sdl_decompose",
        "--cov-report=term-missing",
        "--cov-fail-under=90",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def smoke(session: nox.Session) -> None:
    """Decompose every root operation of the sample schema through the installed CLI."""
    sync(session)
    operations = [
        ("query", "getUser"),
        ("query", "search"),
        ("mutation", "createPost"),
        ("subscription", "commentAdded"),
    ]
    for operation_kind, operation_name in operations:
        session.run("sdl-decompose", "-s", SAMPLE_SCHEMA, "-t", operation_kind, "-o", operation_name, silent=True)
