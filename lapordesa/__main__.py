"""Run the API server: ``python -m lapordesa``."""

import uvicorn

from lapordesa.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "lapordesa.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
