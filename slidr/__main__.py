"""Run the API with uvicorn: ``python -m slidr``.

Host and port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``8080``).
"""
import uvicorn

from . import config


def main() -> None:
    uvicorn.run("slidr.main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
