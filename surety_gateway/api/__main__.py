"""Serve the gateway with uvicorn: ``python -m surety_gateway.api`` or ``surety-gateway``"""

import uvicorn

from surety_gateway.config import settings


def main() -> None:
    uvicorn.run(
        "surety_gateway.api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the JSON root logger
    )


if __name__ == "__main__":
    main()
