"""Run the API with uvicorn: ``python -m transfer_orders``."""

import uvicorn

from transfer_orders.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "transfer_orders.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
