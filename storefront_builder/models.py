"""
Modèle persistant — une ligne par page de boutique (store_id, slug).
SQLAlchemy 2.0 (SQLite par défaut). Le document de page est stocké en JSON texte.
"""
import uuid
from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class StorePageDB(Base):
    __tablename__ = "store_pages"
    __table_args__ = (sa.UniqueConstraint("store_id", "slug", name="uq_store_pages_store_slug"),)

    page_id:      Mapped[str]      = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    store_id:     Mapped[str]      = mapped_column(sa.String, nullable=False, index=True)
    slug:         Mapped[str]      = mapped_column(sa.String, nullable=False)
    content:      Mapped[str]      = mapped_column(sa.Text, default="{}")
    is_published: Mapped[bool]     = mapped_column(sa.Boolean, default=True)
    created_at:   Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:   Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow)
