import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from edolog.core.config import settings
from edolog.core.errors import install_error_handlers
from edolog.core.logging import configure_logging
from edolog.db.base import Base
from edolog.db.session import engine
from edolog.models.spend import Spend  # noqa: F401
from edolog.models.income import Income  # noqa: F401
from edolog.api.routes.health import router as health_router
from edolog.api.routes.spends import router as spends_router
from edolog.api.routes.sectors import router as sectors_router
from edolog.api.routes.incomes import router as incomes_router

configure_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="Edolog API")

origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(health_router)
app.include_router(spends_router)
app.include_router(sectors_router)
app.include_router(incomes_router)

@app.on_event("startup")
def _create_tables():
    if settings.create_tables:
        Base.metadata.create_all(engine)
    log.info("edolog started on port %s", settings.port)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.server_host, port=settings.port)
