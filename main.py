# main.py
"""Development launcher: runs uvicorn from the project venv with settings-driven options."""

from pathlib import Path
from subprocess import run

from bloglist.configs import settings


def uvicorn_command() -> list[str]:
    uvicorn_path = Path(__file__).resolve().parent / ".venv" / "bin" / "uvicorn"
    cmmd = [
        f"{uvicorn_path}",
        "bloglist.main:app",
        "--host",
        settings.HOST,
        "--port",
        str(settings.PORT),
        "--log-level",
        settings.LOG_LEVEL.lower(),
    ]
    if settings.ENVIRONMENT == "development":
        cmmd.append("--reload")
    return cmmd


def main() -> None:
    run(uvicorn_command(), check=True)


if __name__ == "__main__":
    main()
