"""SQLite — engine + session + helpers store_pages"""
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import DB_URL
from .models import Base, StorePageDB


def make_engine(url: str = DB_URL) -> Engine:
    if url.startswith("sqlite:///"):
        db_path = url[len("sqlite:///"):]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


ENGINE       = make_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=ENGINE)


def init_db(engine: Engine = ENGINE):
    Base.metadata.create_all(bind=engine)


# ── JSON helpers ──
def jd(s: Optional[str]) -> Optional[dict]:
    """JSON texte → dict ; None si vide. Lève json.JSONDecodeError si illisible."""
    if not s:
        return None
    return json.loads(s)


# ── StorePage ──
def db_get_page(db: Session, store_id: str, slug: str) -> Optional[StorePageDB]:
    return db.query(StorePageDB).filter_by(store_id=store_id, slug=slug).first()


def db_upsert_page(db: Session, store_id: str, slug: str, content: dict,
                   is_published: bool = True) -> StorePageDB:
    """Remplace entièrement le document de la page (créée si absente)."""
    page = db_get_page(db, store_id, slug)
    if page is None:
        page = StorePageDB(store_id=store_id, slug=slug)
        db.add(page)
    page.content = json.dumps(content, ensure_ascii=False)
    page.is_published = is_published
    page.updated_at = datetime.utcnow()
    db.commit(); db.refresh(page); return page
