"""
Run the API with uvicorn: `python -m notekeeper` or the `notekeeper` script.

Host and port come from Settings (HOST / PORT, default 0.0.0.0:5000).
"""

import uvicorn

from notekeeper.config import settings


def main() -> None:
    # Single worker: the note store lives in this process's memory
    uvicorn.run(
        "notekeeper.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        workers=1,
    )


if __name__ == "__main__":
    main()
