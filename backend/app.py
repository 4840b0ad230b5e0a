import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.routes import pages_router, router
from sentinels_setup.config import get_config
from sentinels_setup.data import load_engine

load_dotenv(Path(__file__).parent.parent / ".env")


def create_app(data_file: Path | None = None, config_file: Path | None = None) -> FastAPI:
    config = get_config(config_file)
    resolved = data_file or (Path(os.environ["DATA_FILE"]) if os.getenv("DATA_FILE") else None)

    app = FastAPI(title="Sentinels Setup")
    # Shared read-only by every request; never mutated after startup.
    app.state.config = config
    app.state.engine = load_engine(resolved, config)

    app.include_router(router, prefix="/api")
    app.include_router(pages_router)
    return app


# Default app instance for uvicorn (uses DATA_FILE / SENTINELS_CONFIG env vars)
app = create_app()
