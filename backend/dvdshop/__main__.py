"""Server Entry Point — runs the FastAPI app under uvicorn.

Invariants:
    - Host and port come from Settings (HOST / PORT env vars)
    - Usable as `python -m dvdshop` or the `dvdshop` console script
"""

import uvicorn

from dvdshop.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "dvdshop.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
