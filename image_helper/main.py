from __future__ import annotations

import logging

from fastapi import FastAPI

from image_helper.config import get_settings
from image_helper.handlers import image_handler

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Image Helper API")

app.include_router(image_handler.router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
