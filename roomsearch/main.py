from fastapi import FastAPI
from roomsearch.db import Base, engine
from roomsearch.api.routes import router as api_router
from roomsearch.utils import logger
import roomsearch.models  # noqa: F401 ensure models are imported so tables are known

# create FastAPI instance
app = FastAPI(title="Room search")
app.include_router(api_router)


@app.on_event("startup")
def on_startup_create_tables():
    # Ensure database tables are created on startup
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        # migrations may own the schema; keep serving
        logger.warning("Could not create tables on startup: %s", e)
