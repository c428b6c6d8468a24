"""Process entry point: bind the port and serve the static root."""

from typing import Optional

import uvicorn

from e2e_server.app import create_app
from e2e_server.config import Settings, get_settings


class Server(uvicorn.Server):
    """uvicorn server that announces itself on stdout once bound.

    If the bind fails uvicorn logs the error and exits with status 1
    before this ever prints.
    """

    def __init__(self, config: uvicorn.Config, listen_address: str):
        super().__init__(config)
        self.listen_address = listen_address

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            print(f"Listening at {self.listen_address}", flush=True)


def run(settings: Optional[Settings] = None) -> None:
    """Serve until the process is terminated."""
    settings = settings or get_settings()
    config = uvicorn.Config(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        access_log=False,
    )
    Server(config, settings.listen_address).run()


if __name__ == "__main__":
    run()
