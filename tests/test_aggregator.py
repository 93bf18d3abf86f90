"""Tests for merging roster, catalog and rankings into the leaderboard."""

from guild_leaderboard.domain.leaderboard import LeaderboardAggregator, spec_slug
from guild_leaderboard.domain.leaderboard.models import (
    BestPerformance,
    ClassCatalog,
    GuildMember,
    RankingResult,
)
from guild_leaderboard.infrastructure.api.warcraftlogs import decode_character_rankings

from tests.helpers import GAME_CLASSES, encounter, roster_member, zone_rankings


def members(*raw):
    return [GuildMember.model_validate(item) for item in raw]


def test_end_to_end_single_member():
    roster = members({
        "id": 1,
        "name": "Foo",
        "classID": 8,
        "hidden": False,
        "server": {"slug": "x", "name": "X", "region": {"slug": "eu"}},
    })
    catalog = ClassCatalog.from_game_data([
        {
            "id": 8,
            "name": "Mage",
            "slug": "mage",
            "specs": [{"id": 64, "name": "Frost", "slug": "frost"}],
        }
    ])
    ranking = decode_character_rankings({
        "zoneRankings": {
            "bestPerformanceAverage": 87.6,
            "spec": "Frost",
            "specID": 64,
            "totalKills": 7,
            "totalBosses": 9,
            "rankings": [
                {"encounter": {"name": "Boss1"}, "rankPercent": 87.6, "reportID": "r1", "fightID": 2}
            ],
        }
    })

    entries = LeaderboardAggregator.aggregate(roster, catalog, {1: ranking})

    assert len(entries) == 1
    entry = entries[0].to_dict()
    assert entry["id"] == 1
    assert entry["name"] == "Foo"
    assert entry["class"] == "Mage"
    assert entry["classSlug"] == "mage"
    assert entry["spec"] == "Frost"
    assert entry["specSlug"] == "frost"
    assert entry["score"] == 88
    assert entry["progress"] == "7/9"
    assert entry["server"] == "X"
    assert entry["bossScores"] == {"Boss1": 88}
    assert entry["bestPerformances"] == [
        {"boss": "Boss1", "score": 88, "reportID": "r1", "fightID": 2}
    ]


def test_hidden_members_are_excluded():
    roster = members(
        roster_member(1, "Alpha"),
        roster_member(2, "Bravo", hidden=True),
        roster_member(3, "Charlie"),
    )
    rankings = {
        1: RankingResult(score=50),
        2: RankingResult(score=99),
        3: RankingResult(score=60),
    }

    entries = LeaderboardAggregator.aggregate(roster, ClassCatalog.empty(), rankings)

    assert [entry.name for entry in entries] == ["Charlie", "Alpha"]


def test_sort_is_descending_and_stable():
    roster = members(*(roster_member(i, f"Member{i}") for i in range(1, 7)))
    scores = {1: 40.0, 2: 90.0, 3: 40.2, 4: 90.4, 5: 10.0, 6: 39.6}
    rankings = {member_id: RankingResult(score=score) for member_id, score in scores.items()}

    entries = LeaderboardAggregator.aggregate(roster, ClassCatalog.empty(), rankings)

    # 90.0 and 90.4 round to 90; 40.0, 40.2 and 39.6 round to 40
    assert [entry.id for entry in entries] == [2, 4, 1, 3, 6, 5]
    assert [entry.score for entry in entries] == [90, 90, 40, 40, 40, 10]


def test_members_without_rankings_become_not_fetched_placeholders():
    roster = members(*(roster_member(i, f"Member{i}") for i in range(1, 31)))
    rankings = {i: RankingResult(score=50 + i) for i in range(1, 26)}

    entries = LeaderboardAggregator.aggregate(roster, ClassCatalog.empty(), rankings)

    assert len(entries) == 30
    tail = entries[-5:]
    assert [entry.id for entry in tail] == [26, 27, 28, 29, 30]
    for entry in tail:
        assert entry.spec == "Not fetched"
        assert entry.spec_slug == "not-fetched"
        assert entry.score == 0
        assert entry.progress == "0/9"


def test_unknown_class_and_raw_spec_fallback():
    roster = members(roster_member(1, "Stranger", class_id=99))
    ranking = RankingResult(score=70, spec="Beast Mastery", spec_id=253)

    entry = LeaderboardAggregator.aggregate(roster, ClassCatalog.empty(), {1: ranking})[0]

    assert entry.class_name == "Unknown"
    assert entry.class_slug == "unknown"
    assert entry.spec == "Beast Mastery"
    assert entry.spec_slug == "beast-mastery"


def test_catalog_spec_wins_when_spec_id_is_known():
    roster = members(roster_member(1, "Tank", class_id=3))
    catalog = ClassCatalog.from_game_data(GAME_CLASSES)
    ranking = RankingResult(score=70, spec="blood", spec_id=250)

    entry = LeaderboardAggregator.aggregate(roster, catalog, {1: ranking})[0]

    assert entry.class_name == "Death Knight"
    assert entry.class_slug == "death-knight"
    assert entry.spec == "Blood"
    assert entry.spec_slug == "blood"


def test_spec_id_outside_class_uses_raw_spec():
    roster = members(roster_member(1, "Mixed", class_id=8))
    catalog = ClassCatalog.from_game_data(GAME_CLASSES)
    ranking = RankingResult(score=70, spec="Frost", spec_id=251)

    entry = LeaderboardAggregator.aggregate(roster, catalog, {1: ranking})[0]

    assert entry.class_name == "Mage"
    assert entry.spec == "Frost"
    assert entry.spec_slug == "frost"


def test_best_performances_keep_top_three():
    roster = members(roster_member(1, "Alpha"))
    ranking = decode_character_rankings({
        "zoneRankings": zone_rankings(
            80,
            encounters=[
                encounter("A", 50, fight=1),
                encounter("B", 95, fight=2),
                encounter("C", 70, fight=3),
                encounter("D", 88, fight=4),
            ],
        )
    })

    entry = LeaderboardAggregator.aggregate(roster, ClassCatalog.empty(), {1: ranking})[0]

    assert [p.boss for p in entry.best_performances] == ["B", "D", "C"]
    assert entry.boss_scores == {"A": 50, "B": 95, "C": 70, "D": 88}
    assert isinstance(entry.best_performances[0], BestPerformance)


def test_spec_slug_collapses_whitespace():
    assert spec_slug("Beast  Mastery") == "beast-mastery"
    assert spec_slug("Unknown") == "unknown"
