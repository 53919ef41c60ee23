from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_pms.api.routes import auth, bookings, guests, hotels, rooms
from hotel_pms.core.config import get_settings
from hotel_pms.core.logging import setup_logging
from hotel_pms.db.store import get_store
from hotel_pms.middleware.request_logger import RequestLoggerMiddleware

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    RequestLoggerMiddleware,
    slow_threshold_ms=settings.log_slow_request_threshold_ms,
)


@app.api_route("/ping", methods=["GET", "HEAD", "OPTIONS"], tags=["public"])
async def ping() -> dict[str, str]:
    return {"status": "ok"}


# Routers: auth
app.include_router(auth.router)

# Routers: hotel domain
app.include_router(hotels.router)
app.include_router(rooms.router)
app.include_router(guests.router)
app.include_router(bookings.router)


@app.on_event("startup")
async def _load_store() -> None:
    # Seed the in-memory store before the first request hits it.
    get_store()


@app.get("/", tags=["public"])
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.app_name}"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
