"""SecurityScorecard passthrough endpoint."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..services.scorecard import ScorecardClient, UpstreamUnavailableError
from ..state import get_scorecard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/securityscorecard", tags=["scorecard"])


@router.get("")
async def get_scorecard_events(scorecard: ScorecardClient = Depends(get_scorecard)):
    """Proxy SecurityScorecard history events unchanged."""
    try:
        return await scorecard.fetch_events()
    except UpstreamUnavailableError as e:
        logger.error(f"SecurityScorecard unavailable: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch data from SecurityScorecard"},
        )
