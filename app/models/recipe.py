"""Recipe extraction data model."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RawDocument:
    """Raw HTML text plus the URL it was retrieved from."""
    html: str
    url: str


@dataclass
class NormalizedRecipe:
    """
    A recipe read from a page's structured data.

    Extractors may return partially empty records; the pipeline decides
    whether the record is usable and attaches `source`.
    """
    title: str = ""
    image: Optional[str] = None
    servings_yield: Optional[str] = None  # free-form, e.g. "4 servings"
    total_time: Optional[str] = None  # ISO 8601, e.g. PT1H30M
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    source: Optional[str] = None

    @property
    def has_content(self) -> bool:
        """A recipe needs ingredients or instructions to be worth returning."""
        return bool(self.ingredients or self.instructions)


@dataclass
class ExtractionFailure:
    """Typed extraction failure."""
    kind: str  # not_found
    message: str
