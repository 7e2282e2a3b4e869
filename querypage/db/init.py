from typing import Sequence

import certifi
from beanie import Document, init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from querypage.core.config import get_settings
from querypage.core.logging import get_logger

log = get_logger(__name__)


def _use_tls(uri: str) -> bool:
    """True if URI uses TLS (Atlas or explicit tls=true)."""
    return "mongodb+srv://" in uri or "tls=true" in uri.lower()


async def init_db(document_models: Sequence[type[Document]]) -> None:
    """Bind `document_models` to the configured database so BeanieSource can query them."""
    settings = get_settings()
    kwargs = {}
    if _use_tls(settings.mongodb_uri):
        kwargs["tlsCAFile"] = certifi.where()
        kwargs["tlsDisableOCSPEndpointCheck"] = True
    client = AsyncIOMotorClient(settings.mongodb_uri, **kwargs)
    database = client[settings.mongodb_db_name]
    await init_beanie(database=database, document_models=list(document_models))
    log.info("db_initialised", db=settings.mongodb_db_name, models=[m.__name__ for m in document_models])
