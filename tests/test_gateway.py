"""
Tests persistence gateway — mémoire + SQLite temporaire (table store_pages).
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio

import pytest
from sqlalchemy.orm import sessionmaker

from storefront_builder.core.errors import PersistenceFailure
from storefront_builder.database import init_db, make_engine
from storefront_builder.gateway import InMemoryGateway, PersistenceGateway, SqlGateway
from storefront_builder.layouts import default_checkout_layout, load_or_synthesize
from storefront_builder.models import StorePageDB


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def session_factory(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path}/pages.db")
    init_db(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def sql_gateway(session_factory):
    return SqlGateway(session_factory)


# ── InMemoryGateway ───────────────────────────────────────────────────────

def test_memory_gateway_satisfies_protocol():
    assert isinstance(InMemoryGateway(), PersistenceGateway)
    assert isinstance(SqlGateway(), PersistenceGateway)


def test_memory_missing_page_is_none():
    assert asyncio.run(InMemoryGateway().load("store-1", "home")) is None


def test_memory_save_then_load():
    gateway = InMemoryGateway()
    schema = default_checkout_layout()
    asyncio.run(gateway.save("store-1", "checkout", schema))
    document = asyncio.run(gateway.load("store-1", "checkout"))
    assert document == schema.to_document()
    assert "globalSettings" in document


def test_memory_load_returns_copy():
    gateway = InMemoryGateway()
    asyncio.run(gateway.save("store-1", "checkout", default_checkout_layout()))
    document = asyncio.run(gateway.load("store-1", "checkout"))
    document["sections"].clear()
    assert len(asyncio.run(gateway.load("store-1", "checkout"))["sections"]) == 4


def test_memory_pages_keyed_by_owner_and_slug():
    gateway = InMemoryGateway()
    asyncio.run(gateway.save("store-1", "checkout", default_checkout_layout()))
    assert ("store-1", "checkout") in gateway
    assert ("store-2", "checkout") not in gateway
    assert ("store-1", "home") not in gateway


# ── SqlGateway ────────────────────────────────────────────────────────────

def test_sql_missing_page_is_none(sql_gateway):
    assert asyncio.run(sql_gateway.load("store-1", "home")) is None


def test_sql_save_then_load(sql_gateway):
    schema = default_checkout_layout()
    asyncio.run(sql_gateway.save("store-1", "checkout", schema))
    document = asyncio.run(sql_gateway.load("store-1", "checkout"))
    assert document == schema.to_document()
    # Texte arabe conservé tel quel
    assert document["sections"][0]["content"]["storeName"]["ar"] == "متجري"


def test_sql_save_replaces_document(sql_gateway, session_factory):
    schema = default_checkout_layout()
    asyncio.run(sql_gateway.save("store-1", "checkout", schema))
    schema.sections.pop()
    asyncio.run(sql_gateway.save("store-1", "checkout", schema))

    document = asyncio.run(sql_gateway.load("store-1", "checkout"))
    assert [s["id"] for s in document["sections"]] == ["header-1", "form-1", "summary-1"]
    with session_factory() as db:
        assert db.query(StorePageDB).filter_by(store_id="store-1", slug="checkout").count() == 1


def test_sql_pages_isolated_per_owner(sql_gateway):
    asyncio.run(sql_gateway.save("store-1", "checkout", default_checkout_layout()))
    assert asyncio.run(sql_gateway.load("store-2", "checkout")) is None


def test_sql_publish_flag(session_factory):
    asyncio.run(SqlGateway(session_factory, publish=False).save("store-1", "home", default_checkout_layout()))
    with session_factory() as db:
        page = db.query(StorePageDB).filter_by(store_id="store-1", slug="home").one()
        assert page.is_published is False


def test_sql_malformed_content_falls_back_to_default(sql_gateway, session_factory):
    with session_factory() as db:
        db.add(StorePageDB(store_id="store-1", slug="checkout", content="{pas du json"))
        db.commit()

    raw = asyncio.run(sql_gateway.load("store-1", "checkout"))
    assert raw == "{pas du json"
    schema, stored = load_or_synthesize(raw, "checkout")
    assert not stored
    assert schema.section_ids == ["header-1", "form-1", "summary-1", "badges-1"]


def test_sql_error_raises_persistence_failure(tmp_path):
    # Base sans table store_pages
    engine = make_engine(f"sqlite:///{tmp_path}/empty.db")
    gateway = SqlGateway(sessionmaker(bind=engine))
    with pytest.raises(PersistenceFailure):
        asyncio.run(gateway.load("store-1", "home"))
    with pytest.raises(PersistenceFailure):
        asyncio.run(gateway.save("store-1", "home", default_checkout_layout()))
