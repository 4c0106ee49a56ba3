# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.database import init_db
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging
from app.ticket.routes import router as ticket_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

init_db()

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(ticket_router)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
