"""Website CRUD and history API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..models import Website
from ..schemas.uptime import CheckResponse, UptimeStatsResponse
from ..schemas.website import (
    DeleteResponse,
    WebsiteCreate,
    WebsiteResponse,
    WebsiteUpdate,
)
from ..services.history import HistoryStore
from ..services.registry import InvalidWebsiteError, WebsiteRegistry
from ..state import get_history, get_registry
from .uptime import stats_response

router = APIRouter(prefix="/api/websites", tags=["websites"])


def _to_response(website: Website) -> WebsiteResponse:
    return WebsiteResponse(
        id=website.id,
        url=website.url,
        name=website.name,
        interval=website.interval,
        is_active=website.is_active,
        created_at=website.created_at,
    )


def _get_or_404(registry: WebsiteRegistry, website_id: str) -> Website:
    website = registry.get(website_id)
    if website is None:
        raise HTTPException(status_code=404, detail="Website not found")
    return website


@router.get("", response_model=List[WebsiteResponse])
async def list_websites(registry: WebsiteRegistry = Depends(get_registry)):
    """List all registered websites."""
    return [_to_response(w) for w in registry.list()]


@router.post("", response_model=WebsiteResponse, status_code=201)
async def create_website(
    website: WebsiteCreate,
    registry: WebsiteRegistry = Depends(get_registry),
):
    """Register a new website. It is probed from the next tick on."""
    try:
        created = registry.add(
            website.name,
            website.url,
            interval=website.interval,
            is_active=website.is_active,
        )
    except InvalidWebsiteError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(created)


@router.get("/{website_id}", response_model=WebsiteResponse)
async def get_website(website_id: str, registry: WebsiteRegistry = Depends(get_registry)):
    """Get a specific website by ID."""
    return _to_response(_get_or_404(registry, website_id))


@router.put("/{website_id}", response_model=WebsiteResponse)
async def update_website(
    website_id: str,
    update: WebsiteUpdate,
    registry: WebsiteRegistry = Depends(get_registry),
):
    """Update only the fields present in the request body."""
    try:
        updated = registry.update(website_id, update.model_dump(exclude_unset=True))
    except InvalidWebsiteError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Website not found")
    return _to_response(updated)


@router.delete("/{website_id}", response_model=DeleteResponse)
async def delete_website(website_id: str, registry: WebsiteRegistry = Depends(get_registry)):
    """Delete a website and its check history."""
    if not registry.delete(website_id):
        raise HTTPException(status_code=404, detail="Website not found")
    return DeleteResponse(success=True)


@router.get("/{website_id}/checks", response_model=List[CheckResponse])
async def get_website_checks(
    website_id: str,
    limit: Optional[int] = Query(default=None, ge=1),
    registry: WebsiteRegistry = Depends(get_registry),
    history: HistoryStore = Depends(get_history),
):
    """Check history for a website, oldest first."""
    _get_or_404(registry, website_id)
    return [
        CheckResponse(
            id=check.id,
            website_id=check.website_id,
            timestamp=check.timestamp,
            status=check.status,
            response_time=check.response_time,
        )
        for check in history.recent(website_id, limit)
    ]


@router.get("/{website_id}/stats", response_model=UptimeStatsResponse)
async def get_website_stats(
    website_id: str,
    registry: WebsiteRegistry = Depends(get_registry),
    history: HistoryStore = Depends(get_history),
):
    """Uptime stats over a website's retained history."""
    _get_or_404(registry, website_id)
    return stats_response(history.recent(website_id))
