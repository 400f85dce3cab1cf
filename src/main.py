import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.routers import greeting
from src.load_secrets import environment, host, log_level, port, uvicorn_log_level

logging.basicConfig(level=log_level)


@asynccontextmanager
async def lifespan(app):
    """Log start and stop of the server.
    The greeting route keeps no state, so there is nothing else to set up.
    """
    logging.info(f"Running on port {port} (environment: {environment})")
    try:
        yield
    finally:
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.include_router(greeting.greeting_router)


def run():
    uvicorn.run(app, host=host, port=port, log_level=uvicorn_log_level)


if __name__ == "__main__":
    run()
