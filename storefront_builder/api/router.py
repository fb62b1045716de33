"""
Router FastAPI — endpoints storefront builder.

GET  /page-builder/catalog?page=           → types ajoutables + défauts + JSON schemas
POST /page-builder/render?mode=&lang=      → PageSchema → HTMLResponse
POST /page-builder/validate                → document brut → {"valid": bool, "error"?}
GET  /page-builder/pages/{owner_id}/{slug} → document stocké ou layout par défaut
PUT  /page-builder/pages/{owner_id}/{slug} → upsert du document
GET  /page-builder/templates               → catalogue des templates
GET  /page-builder/s/{owner_id}/{slug}     → page publique (mode vue)
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse

from ..config import DEFAULT_CURRENCY, DEFAULT_LANGUAGE
from ..core.errors import MalformedSchema, PersistenceFailure
from ..core.i18n import SUPPORTED_LANGUAGES
from ..core.registry import addable_types, defaults_for
from ..core.schemas import PageSchema
from ..gateway import PersistenceGateway, SqlGateway
from ..layouts import STORE_TEMPLATES, load_or_synthesize, parse_document
from ..renderer import RenderContext, RenderMode, render_document
from ..sections import SECTION_MODELS

router = APIRouter(prefix="/page-builder", tags=["page_builder"])


def get_gateway() -> PersistenceGateway:
    return SqlGateway()


def _check_lang(lang: str) -> str:
    if lang not in SUPPORTED_LANGUAGES:
        raise HTTPException(422, f"Langue '{lang}' non supportée")
    return lang


@router.get("/catalog", summary="Sections ajoutables sur une page + défauts + schemas")
def catalog(page: str = Query("home")) -> JSONResponse:
    data = [
        {
            "type":     section_type,
            "defaults": defaults_for(section_type),
            "schema":   SECTION_MODELS[section_type].model_json_schema(),
        }
        for section_type in addable_types(page)
    ]
    return JSONResponse({"page": page, "sections": data})


@router.post("/render", response_class=HTMLResponse, summary="Rend un PageSchema en HTML")
def render(
    schema: PageSchema,
    mode: RenderMode = Query(RenderMode.VIEW),
    lang: str = Query(DEFAULT_LANGUAGE),
    currency: str = Query(DEFAULT_CURRENCY),
) -> HTMLResponse:
    ctx = RenderContext(language=_check_lang(lang), currency=currency)
    return HTMLResponse(content=render_document(schema, mode, ctx))


@router.post("/validate", summary="Valide un document de page sans le rendre")
def validate(document: Dict[str, Any] = Body(...)) -> dict:
    try:
        schema = parse_document(document)
    except MalformedSchema as e:
        return {"valid": False, "error": str(e)}
    unknown = [s.type for s in schema.sections if s.type not in SECTION_MODELS]
    if unknown:
        return {"valid": True, "warnings": [f"Type inconnu : {t}" for t in unknown]}
    return {"valid": True}


@router.get("/pages/{owner_id}/{slug}", summary="Document de page (stocké ou par défaut)")
async def get_page(owner_id: str, slug: str, gateway: PersistenceGateway = Depends(get_gateway)) -> dict:
    try:
        raw = await gateway.load(owner_id, slug)
    except PersistenceFailure as e:
        raise HTTPException(503, f"Stockage indisponible : {e.reason}")
    schema, stored = load_or_synthesize(raw, slug)
    return {"schema": schema.to_document(), "stored": stored}


@router.put("/pages/{owner_id}/{slug}", summary="Enregistre le document de page (remplacement complet)")
async def put_page(owner_id: str, slug: str, schema: PageSchema,
                   gateway: PersistenceGateway = Depends(get_gateway)) -> dict:
    try:
        await gateway.save(owner_id, slug, schema)
    except PersistenceFailure as e:
        raise HTTPException(503, {"success": False, "result": None, "message": "Sauvegarde échouée", "error": e.reason})
    return {
        "success": True,
        "result":  {"owner_id": owner_id, "slug": slug, "sections": len(schema.sections)},
        "message": "Page enregistrée",
        "error":   None,
    }


@router.get("/templates", summary="Catalogue des templates de boutique")
def templates() -> JSONResponse:
    return JSONResponse({"templates": [t.summary() for t in STORE_TEMPLATES.values()]})


@router.get("/s/{owner_id}/{slug}", response_class=HTMLResponse, summary="Page publique")
async def public_page(
    owner_id: str,
    slug: str,
    lang: str = Query(DEFAULT_LANGUAGE),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> HTMLResponse:
    try:
        raw = await gateway.load(owner_id, slug)
    except PersistenceFailure as e:
        raise HTTPException(503, f"Stockage indisponible : {e.reason}")
    schema, _ = load_or_synthesize(raw, slug)
    ctx = RenderContext(store_id=owner_id, store_slug=slug, language=_check_lang(lang))
    return HTMLResponse(content=render_document(schema, RenderMode.VIEW, ctx))
