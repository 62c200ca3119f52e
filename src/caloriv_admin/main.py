"""Console entry point for the admin dashboard."""

from caloriv_admin.config import Settings


def main() -> None:
    """Serve the dashboard with uvicorn on the configured address."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "caloriv_admin.api.asgi:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
    )


if __name__ == "__main__":
    main()
