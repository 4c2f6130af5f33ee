import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import config
from .funfact import router as funfact_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Fun Fact Relay", version="1.0.0")

# Browsers only get the allow-origin header back for these origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_methods=config.ALLOWED_METHODS,
)

app.include_router(funfact_router)

# Mounted last so /funfact wins; html=True serves index.html for "/"
app.mount("/", StaticFiles(directory=str(config.PUBLIC_DIR), html=True), name="static")


class RelayServer(uvicorn.Server):
    """uvicorn server that confirms startup once the socket is bound."""

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running at http://localhost:%d", self.config.port)


def run():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    server = RelayServer(uvicorn.Config(app, host=config.HOST, port=config.PORT))
    server.run()
