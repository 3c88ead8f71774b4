# helpdesk/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helpdesk.core.config import get_settings
from helpdesk.core.database import Base, engine
from helpdesk.core.errors import register_error_handlers
from helpdesk.notification.routes import router as notification_router
from helpdesk.ticket.routes import router as ticket_router
from helpdesk.user.routes import router as user_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

Base.metadata.create_all(bind=engine)

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
app.include_router(ticket_router, prefix="/api")
app.include_router(user_router, prefix="/api")
app.include_router(notification_router, prefix="/api")

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
