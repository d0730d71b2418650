"""Pydantic models for gig-builder domain objects."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

WILDCARD = "all"

# Display order of chord chart sections
SECTION_ORDER = ["intro", "verse", "preChorus", "chorus", "bridge", "outro"]


def _as_text(value) -> str:
    """Scalars become their string form; None and containers become blank."""
    if value is None or isinstance(value, (dict, list)):
        return ""
    return value if isinstance(value, str) else str(value)


def _text_items(values: list) -> list[str]:
    return [_as_text(v) for v in values if v is not None and not isinstance(v, (dict, list))]


class SortMode(str, Enum):
    DEFAULT = "default"
    POPULARITY_DESC = "popularityDesc"
    POPULARITY_ASC = "popularityAsc"
    ENERGY_ASC = "energyAsc"
    ENERGY_DESC = "energyDesc"


class Song(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | int | None = None
    title: str = ""
    artist: str = ""
    era: str = ""
    key: str = ""
    capo: str | int = ""
    energy: int = 0  # 1 - 5
    popularity: float = 0.0
    tags: list[str] = []
    chords: dict[str, list[str]] = {}
    chord_link: str | None = Field(default=None, alias="chordLink")

    @field_validator("title", "artist", "era", "key", mode="before")
    @classmethod
    def _text_field(cls, value):
        return _as_text(value)

    @field_validator("capo", mode="before")
    @classmethod
    def _capo_blank(cls, value):
        return "" if value is None else value

    @field_validator("energy", "popularity", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return 0 if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_must_be_list(cls, value):
        return _text_items(value) if isinstance(value, list) else []

    @field_validator("chords", mode="before")
    @classmethod
    def _drop_non_list_sections(cls, value):
        if not isinstance(value, dict):
            return {}
        return {str(name): _text_items(chords) for name, chords in value.items() if isinstance(chords, list)}

    @property
    def key_id(self) -> str:
        """String form of the id; songs are matched on this everywhere."""
        return "" if self.id is None else str(self.id).strip()

    @property
    def display_name(self) -> str:
        if self.title and self.artist:
            return f"{self.title} - {self.artist}"
        return self.title or self.artist or self.key_id or "Unknown"


class FilterCriteria(BaseModel):
    query: str = ""
    era: str = WILDCARD
    artist: str = WILDCARD
    tag: str = WILDCARD
    sort: str = SortMode.DEFAULT.value

    @field_validator("query", mode="before")
    @classmethod
    def _blank_query(cls, value):
        return _as_text(value).strip()

    @field_validator("era", "artist", "tag", mode="before")
    @classmethod
    def _blank_is_wildcard(cls, value):
        text = _as_text(value)
        return text if text.strip() else WILDCARD

    @field_validator("sort", mode="before")
    @classmethod
    def _sort_value(cls, value):
        if isinstance(value, SortMode):
            return value.value
        return _as_text(value).strip() or SortMode.DEFAULT.value

    @property
    def sort_mode(self) -> SortMode:
        try:
            return SortMode(self.sort)
        except ValueError:
            return SortMode.DEFAULT

    @property
    def is_unfiltered(self) -> bool:
        return not self.query and self.era == self.artist == self.tag == WILDCARD


class SavedSet(BaseModel):
    id: int | None = None
    name: str
    song_ids: list[str] = []
