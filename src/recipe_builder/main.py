"""Command-line entrypoint that serves the API."""

import uvicorn

from recipe_builder.api.app import create_app
from recipe_builder.config import Settings
from recipe_builder.containers import build_container


def main() -> None:
    """Run the API server on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
