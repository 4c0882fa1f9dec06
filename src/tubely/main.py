"""FastAPI application entry point."""

from fastapi import FastAPI

from .config import AppConfig, load_config
from .dependencies import include_routers
from .logging import configure_logging
from .media.media_probe import Prober
from .media.media_transcode import Transcoder
from .middleware import UploadLimitMiddleware
from .storage.object_store import ObjectStore


def create_app(
    config: AppConfig | None = None,
    *,
    object_store: ObjectStore | None = None,
    transcoder: Transcoder | None = None,
    prober: Prober | None = None,
) -> FastAPI:
    """Build FastAPI instance with configured dependencies."""
    cfg = config or load_config()
    configure_logging(cfg.log_level)
    app = FastAPI(title="Tubely")
    app.add_middleware(UploadLimitMiddleware, max_bytes=cfg.upload_limits.max_upload_bytes)
    include_routers(
        app, cfg, object_store=object_store, transcoder=transcoder, prober=prober
    )
    return app


app = create_app()
