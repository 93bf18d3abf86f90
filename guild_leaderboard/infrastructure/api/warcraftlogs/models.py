"""
Warcraft Logs API Models

Pydantic models for the JSON-scalar fields of the character query, and the
decode step that turns them into a RankingResult.
"""

import json
import logging
import math
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, Field, ValidationError

from ....core.exceptions import RankingParseError
from ....domain.leaderboard.models import (
    BestPerformance,
    RankingResult,
    UNKNOWN_SPEC,
    round_score,
)

logger = logging.getLogger(__name__)


class Encounter(BaseModel):
    """Encounter reference inside a ranking."""
    name: str


class EncounterRanking(BaseModel):
    """One encounter's best parse."""
    encounter: Optional[Encounter] = None
    rank_percent: Optional[float] = Field(None, alias="rankPercent")
    report_id: Optional[str] = Field(None, alias="reportID")
    fight_id: Optional[int] = Field(None, alias="fightID")


class ZoneRankings(BaseModel):
    """The ``zoneRankings`` scalar."""
    best_performance_average: Optional[float] = Field(
        None,
        alias="bestPerformanceAverage"
    )
    spec: Optional[str] = None
    spec_id: Optional[int] = Field(None, alias="specID")
    total_kills: Optional[int] = Field(None, alias="totalKills")
    total_bosses: Optional[int] = Field(None, alias="totalBosses")
    rankings: Optional[List[EncounterRanking]] = None


class CharacterGameData(BaseModel):
    """The ``gameData`` scalar; only item level is used."""
    item_level: Optional[float] = Field(None, alias="itemLevel")


def decode_json_scalar(value: Any, field: str) -> Optional[Dict[str, Any]]:
    """
    Normalize a JSON scalar that arrives either parsed or as a string.

    Raises:
        RankingParseError: Undecodable string or not a JSON object
    """
    if value is None:
        return None

    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError as e:
            raise RankingParseError(
                f"Invalid JSON in {field}: {e}",
                field=field,
                original_exception=e
            )
        if value is None:
            return None

    if not isinstance(value, dict):
        raise RankingParseError(
            f"Expected an object in {field}, got {type(value).__name__}",
            field=field
        )

    return value


def _parse(model, value: Any, field: str):
    data = decode_json_scalar(value, field)
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RankingParseError(
            f"Unexpected shape in {field}: {e}",
            field=field,
            original_exception=e
        )


def parse_zone_rankings(value: Any, field: str = "zoneRankings") -> Optional[ZoneRankings]:
    return _parse(ZoneRankings, value, field)


def parse_game_data(value: Any) -> Optional[CharacterGameData]:
    return _parse(CharacterGameData, value, "gameData")


def _finite(value: Optional[float]) -> float:
    """The value itself, or 0 when missing, negative or not a finite number."""
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _apply_zone_rankings(result: RankingResult, zone: ZoneRankings) -> None:
    result.score = _finite(zone.best_performance_average)
    result.spec = zone.spec or UNKNOWN_SPEC
    result.spec_id = zone.spec_id
    result.total_kills = zone.total_kills
    result.total_bosses = zone.total_bosses

    for ranking in zone.rankings or []:
        if not _finite(ranking.rank_percent) or ranking.encounter is None:
            continue

        score = round_score(ranking.rank_percent)
        result.boss_scores[ranking.encounter.name] = score
        result.best_performances.append(
            BestPerformance(
                boss=ranking.encounter.name,
                score=score,
                report_id=ranking.report_id,
                fight_id=ranking.fight_id,
            )
        )


def decode_character_rankings(
    character: Any,
    character_name: str = ""
) -> RankingResult:
    """
    Decode the ``character`` object of the rankings query.

    Each scalar is decoded on its own: a broken ``zoneRankings`` leaves the
    ranking fields zeroed, a broken ``gameData`` leaves item level at 0.

    Args:
        character: ``characterData.character`` from the response; anything
            other than an object is treated as no data
        character_name: Used for log messages only

    Returns:
        RankingResult, never raises for bad payloads
    """
    result = RankingResult.empty()
    if not isinstance(character, dict):
        if character:
            logger.error(
                f"Unexpected character payload for {character_name}: "
                f"{type(character).__name__}"
            )
        return result

    try:
        zone = parse_zone_rankings(character.get("zoneRankings"))
    except RankingParseError as e:
        logger.error(f"Failed to parse rankings for {character_name}: {e}")
        zone = None

    if zone is not None:
        _apply_zone_rankings(result, zone)

    if not result.spec or result.spec == UNKNOWN_SPEC:
        try:
            spec_rankings = parse_zone_rankings(
                character.get("specRankings"),
                field="specRankings"
            )
        except RankingParseError as e:
            logger.error(f"Failed to parse spec data for {character_name}: {e}")
            spec_rankings = None

        if spec_rankings is not None and spec_rankings.spec:
            result.spec = spec_rankings.spec

    try:
        game_data = parse_game_data(character.get("gameData"))
    except RankingParseError as e:
        logger.error(f"Failed to parse game data for {character_name}: {e}")
        game_data = None

    if game_data is not None:
        result.item_level = _finite(game_data.item_level)

    return result
