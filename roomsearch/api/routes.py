# roomsearch/api/routes.py
from pathlib import Path
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from .. import schemas
from ..db import get_db
from ..services import search_room_listings

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def hostname(url):
    try:
        return urlparse(url).hostname or url
    except ValueError:
        return url

templates.env.filters["hostname"] = hostname


def search_params(
    keyword: str | None = Query(None),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    city: str | None = Query(None),
    type: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
):
    params = {
        "keyword": keyword,
        "minPrice": min_price,
        "maxPrice": max_price,
        "city": city,
        "type": type,
        "sortBy": sort_by,
    }
    return {k: v for k, v in params.items() if v is not None}


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/api/listings", response_model=schemas.SearchResult, response_model_exclude_unset=True)
def listings(params: dict = Depends(search_params), db: Session = Depends(get_db)):
    return search_room_listings(db, params)


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {})


@router.get("/tenant", response_class=HTMLResponse)
def tenant_search(request: Request, params: dict = Depends(search_params), db: Session = Depends(get_db)):
    result = search_room_listings(db, params)
    return templates.TemplateResponse(request, "tenant.html", {"result": result, "params": params})
