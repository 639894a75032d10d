"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from nutri_coach.config import Settings


def main() -> None:
    """Run the API server on the configured host and port."""
    settings = Settings()
    uvicorn.run("nutri_coach.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
