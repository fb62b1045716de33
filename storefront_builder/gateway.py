"""
Persistence gateway — stockage durable des documents de page.

Clé : (owner_id, page_slug). save() remplace entièrement le document stocké.
Toute erreur I/O est remontée en PersistenceFailure (récupérable, retry possible).
"""
import asyncio
import copy
import json
import logging
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .core.errors import PersistenceFailure
from .core.schemas import PageSchema
from .database import SessionLocal, db_get_page, db_upsert_page, jd

log = logging.getLogger(__name__)


@runtime_checkable
class PersistenceGateway(Protocol):
    async def save(self, owner_id: str, page_slug: str, schema: PageSchema) -> None: ...
    async def load(self, owner_id: str, page_slug: str) -> Optional[Any]: ...


class InMemoryGateway:
    """Stockage en mémoire (tests, prévisualisation)."""

    def __init__(self):
        self._pages: Dict[Tuple[str, str], dict] = {}

    async def save(self, owner_id: str, page_slug: str, schema: PageSchema) -> None:
        self._pages[(owner_id, page_slug)] = schema.to_document()

    async def load(self, owner_id: str, page_slug: str) -> Optional[dict]:
        document = self._pages.get((owner_id, page_slug))
        return copy.deepcopy(document) if document is not None else None

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._pages


class SqlGateway:
    """
    Table store_pages via SQLAlchemy. Les appels bloquants tournent
    dans un thread (asyncio.to_thread) pour ne pas geler la boucle.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal, publish: bool = True):
        self._session_factory = session_factory
        self._publish = publish

    def _save_sync(self, owner_id: str, page_slug: str, document: dict):
        with self._session_factory() as db:
            db_upsert_page(db, owner_id, page_slug, document, is_published=self._publish)

    def _load_sync(self, owner_id: str, page_slug: str) -> Optional[Any]:
        with self._session_factory() as db:
            page = db_get_page(db, owner_id, page_slug)
            if page is None:
                return None
            try:
                return jd(page.content)
            except json.JSONDecodeError as e:
                log.warning("Document %s/%s illisible : %s", owner_id, page_slug, e)
                # Texte brut : le loader le rejettera en MalformedSchema
                return page.content

    async def save(self, owner_id: str, page_slug: str, schema: PageSchema) -> None:
        document = schema.to_document()
        try:
            await asyncio.to_thread(self._save_sync, owner_id, page_slug, document)
        except SQLAlchemyError as e:
            log.warning("Sauvegarde %s/%s échouée : %s", owner_id, page_slug, e)
            raise PersistenceFailure(str(e)) from e
        log.info("Page sauvegardée : %s/%s (%d sections)", owner_id, page_slug, len(schema.sections))

    async def load(self, owner_id: str, page_slug: str) -> Optional[Any]:
        """Document brut stocké, None si absent. Le contrôle de forme est fait par l'appelant."""
        try:
            return await asyncio.to_thread(self._load_sync, owner_id, page_slug)
        except SQLAlchemyError as e:
            raise PersistenceFailure(str(e)) from e
