"""
Leaderboard API routes
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query, Request, Response

from ...core.container import Container
from ...core.exceptions import LeaderboardError
from ...domain.leaderboard import LeaderboardSummaryService
from ...domain.leaderboard.models import LeaderboardEntry

logger = logging.getLogger(__name__)

router = APIRouter()


def _container(request: Request) -> Container:
    return request.app.state.container


async def _load_entries(
    request: Request,
    response: Response,
    refresh: bool
) -> List[LeaderboardEntry]:
    """Read the leaderboard through the result cache and tag the response."""
    cache = _container(request).result_cache()

    try:
        entries, from_cache = await cache.get(force_refresh=refresh)
    except LeaderboardError as e:
        logger.error(f"Leaderboard pass failed: {e}")
        raise
    except Exception as e:
        logger.exception("Unexpected error while building leaderboard")
        raise LeaderboardError(
            "Failed to fetch leaderboard data",
            details={"type": type(e).__name__},
            original_exception=e
        )

    response.headers["X-Cache"] = "HIT" if from_cache else "MISS"
    if cache.record is not None:
        response.headers["X-Cache-Computed-At"] = cache.record.computed_at.isoformat()

    return entries


@router.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy", "service": "guild-leaderboard"}


@router.get("/config")
async def get_config(request: Request) -> Dict[str, str]:
    """Guild name, realm and region the leaderboard is built for"""
    settings = _container(request).settings()
    return settings.public_config()


@router.get("/leaderboard")
async def get_leaderboard(
    request: Request,
    response: Response,
    refresh: bool = False,
    search: Optional[str] = None,
    class_name: Optional[str] = Query(default=None, alias="class")
) -> List[Dict[str, Any]]:
    """
    Ranked guild members.

    Args:
        refresh: Ignore the cached result and run a new pass
        search: Case-insensitive substring of name or spec
        class_name: Exact class name
    """
    entries = await _load_entries(request, response, refresh)
    filtered = LeaderboardSummaryService.filter_entries(entries, search, class_name)

    if search or class_name:
        logger.info(f"Filtered leaderboard to {len(filtered)} of {len(entries)} entries")

    return [entry.to_dict() for entry in filtered]


@router.get("/leaderboard/summary")
async def get_leaderboard_summary(
    request: Request,
    response: Response,
    refresh: bool = False
) -> Dict[str, Any]:
    """Guild averages, per-boss averages and class list"""
    entries = await _load_entries(request, response, refresh)
    return LeaderboardSummaryService.summarize(entries).to_dict()

