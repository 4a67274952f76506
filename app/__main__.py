"""Run the API with uvicorn: python -m app"""

import uvicorn

from .config import get_host, get_port, get_log_level


def main() -> None:
    uvicorn.run("app.main:app", host=get_host(), port=get_port(), log_level=get_log_level().lower())


if __name__ == "__main__":
    main()
