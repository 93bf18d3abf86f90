"""
Mock leaderboard data for running without API credentials
"""

import logging
import random
import string
from typing import List, Optional

from ...domain.leaderboard.models import BestPerformance, LeaderboardEntry

logger = logging.getLogger(__name__)

MOCK_BOSSES = [
    "Vael'thyz the Corruptor",
    "Delerium Dreadsmoke",
    "Volcoross",
    "Slegix the Cruel",
    "Tindral Sageswift",
    "Primordial Elements",
    "Smolderon",
    "Tyr, the Infinite Keeper",
    "Fyrakk",
]

# (name, class, class id, class slug, spec, spec slug, score, item level, progress)
MOCK_PLAYERS = [
    ("Powerhealer", "Priest", 7, "priest", "Holy", "holy", 97, 489, "9/9"),
    ("Tankbuster", "Warrior", 12, "warrior", "Protection", "protection", 94, 487, "9/9"),
    ("Shadowmaster", "Warlock", 11, "warlock", "Destruction", "destruction", 91, 486, "8/9"),
    ("Arrowstorm", "Hunter", 4, "hunter", "Marksmanship", "marksmanship", 89, 485, "9/9"),
    ("Frostbite", "Mage", 5, "mage", "Frost", "frost", 88, 484, "8/9"),
    ("Lightbringer", "Paladin", 6, "paladin", "Retribution", "retribution", 85, 483, "7/9"),
    ("Windwalker", "Monk", 9, "monk", "Windwalker", "windwalker", 83, 482, "8/9"),
    ("Stormcaller", "Shaman", 10, "shaman", "Elemental", "elemental", 80, 480, "7/9"),
    ("Moonfire", "Druid", 2, "druid", "Balance", "balance", 77, 479, "6/9"),
    ("Deathstrike", "Death Knight", 1, "death-knight", "Blood", "blood", 75, 478, "7/9"),
    ("Chaoshunter", "Demon Hunter", 3, "demon-hunter", "Havoc", "havoc", 72, 477, "6/9"),
    ("Firebreather", "Evoker", 13, "evoker", "Devastation", "devastation", 70, 476, "5/9"),
    ("Backstabber", "Rogue", 8, "rogue", "Subtlety", "subtlety", 67, 475, "6/9"),
    ("Soulstealer", "Warlock", 11, "warlock", "Affliction", "affliction", 64, 474, "5/9"),
    ("Berserker", "Warrior", 12, "warrior", "Fury", "fury", 60, 473, "4/9"),
    ("Healbot", "Shaman", 10, "shaman", "Restoration", "restoration", 55, 471, "4/9"),
    ("Arcanist", "Mage", 5, "mage", "Arcane", "arcane", 50, 468, "3/9"),
    ("Lifegiver", "Druid", 2, "druid", "Restoration", "restoration", 45, 465, "3/9"),
    ("Vengeance", "Demon Hunter", 3, "demon-hunter", "Vengeance", "vengeance", 40, 462, "2/9"),
    ("Shadowpriest", "Priest", 7, "priest", "Shadow", "shadow", 35, 458, "2/9"),
]


class MockLeaderboardSource:
    """Generates a plausible leaderboard with per-boss variation."""

    def __init__(self, seed: Optional[int] = None, server: str = "YourServer"):
        self.seed = seed
        self.server = server

    def generate(self) -> List[LeaderboardEntry]:
        logger.info("Generating mock data for quick testing")
        rng = random.Random(self.seed)

        entries = []
        for index, player in enumerate(MOCK_PLAYERS, start=1):
            name, class_name, class_id, class_slug, spec, slug, score, item_level, progress = player

            boss_scores = {}
            performances = []
            for boss in MOCK_BOSSES:
                # Player's overall score with +/-10 variation, clamped to 1..99
                boss_score = min(99, max(1, round(score + (rng.random() * 20 - 10))))
                boss_scores[boss] = boss_score
                performances.append(
                    BestPerformance(
                        boss=boss,
                        score=boss_score,
                        report_id="report-" + "".join(
                            rng.choices(string.ascii_lowercase + string.digits, k=8)
                        ),
                        fight_id=rng.randrange(100),
                    )
                )

            performances.sort(key=lambda p: p.score, reverse=True)

            entries.append(
                LeaderboardEntry(
                    id=index,
                    name=name,
                    class_name=class_name,
                    class_id=class_id,
                    class_slug=class_slug,
                    spec=spec,
                    spec_slug=slug,
                    score=score,
                    item_level=item_level,
                    server=self.server,
                    progress=progress,
                    boss_scores=boss_scores,
                    best_performances=performances[:3],
                )
            )

        return sorted(entries, key=lambda entry: entry.score, reverse=True)
