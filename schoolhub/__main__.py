"""
Run the API with uvicorn: ``python -m schoolhub``.
"""
import uvicorn

from .config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "schoolhub.main:app",
        host="0.0.0.0",
        port=settings.server_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
