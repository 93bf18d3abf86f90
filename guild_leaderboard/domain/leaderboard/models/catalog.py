"""
Class Catalog Models

Static class -> spec mapping used to decorate roster entries.
"""

from typing import Dict, List, Any, Optional

from pydantic import BaseModel, Field


UNKNOWN_CLASS_NAME = "Unknown"
UNKNOWN_CLASS_SLUG = "unknown"


class SpecInfo(BaseModel):
    """Specialization name and slug."""
    name: str
    slug: str


class ClassCatalogEntry(BaseModel):
    """One playable class and its specs keyed by spec id."""
    name: str
    slug: str
    specs: Dict[int, SpecInfo] = Field(default_factory=dict)

    def spec(self, spec_id: Optional[int]) -> Optional[SpecInfo]:
        if spec_id is None:
            return None
        return self.specs.get(spec_id)


UNKNOWN_CLASS = ClassCatalogEntry(
    name=UNKNOWN_CLASS_NAME,
    slug=UNKNOWN_CLASS_SLUG,
)


class ClassCatalog(BaseModel):
    """Class id -> catalog entry."""
    classes: Dict[int, ClassCatalogEntry] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ClassCatalog":
        return cls()

    @classmethod
    def from_game_data(cls, game_classes: List[Dict[str, Any]]) -> "ClassCatalog":
        """
        Build the catalog from the ``gameData.classes`` list.

        Args:
            game_classes: Raw class objects with nested ``specs``

        Returns:
            Catalog keyed by class id
        """
        classes = {}
        for game_class in game_classes:
            specs = {
                spec["id"]: SpecInfo(name=spec["name"], slug=spec["slug"])
                for spec in game_class.get("specs") or []
            }
            classes[game_class["id"]] = ClassCatalogEntry(
                name=game_class["name"],
                slug=game_class["slug"],
                specs=specs,
            )
        return cls(classes=classes)

    def lookup(self, class_id: int) -> ClassCatalogEntry:
        """Resolve a class id, defaulting to the unknown class."""
        return self.classes.get(class_id, UNKNOWN_CLASS)

    def __len__(self) -> int:
        return len(self.classes)
