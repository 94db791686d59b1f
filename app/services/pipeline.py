"""
Recipe extraction pipeline.

Runs the structured-data extractors in priority order over a parsed page:
1. JSON-LD structured data (Schema.org Recipe) - preferred, very reliable
2. Microdata attributes - fallback for older sites

The first extractor that finds a recipe wins. No network I/O happens here.
"""

from typing import Callable, Optional, Union
from urllib.parse import urlparse

import sentry_sdk
from bs4 import BeautifulSoup

from app.models.recipe import ExtractionFailure, NormalizedRecipe, RawDocument
from app.services.jsonld import extract_jsonld_recipe
from app.services.microdata import extract_microdata_recipe

Extractor = Callable[[BeautifulSoup], Optional[NormalizedRecipe]]

# User-friendly error messages
ERROR_MESSAGES = {
    "not_found": "No recipe data found on this page",
}


def get_domain(url: str) -> str:
    """Extract domain from URL for logging."""
    try:
        parsed = urlparse(url)
        return parsed.netloc.lower().replace("www.", "") or "unknown"
    except ValueError:
        return "unknown"


class RecipeExtractionPipeline:
    """Picks the first structured-data extractor that yields a usable recipe."""

    DEFAULT_EXTRACTORS: tuple[Extractor, ...] = (
        extract_jsonld_recipe,
        extract_microdata_recipe,
    )

    def __init__(self, extractors: Optional[tuple[Extractor, ...]] = None):
        self.extractors = tuple(extractors) if extractors is not None else self.DEFAULT_EXTRACTORS

    def extract(self, raw_html: str, source_url: str) -> Union[NormalizedRecipe, ExtractionFailure]:
        """
        Extract a recipe from raw HTML.

        Returns the NormalizedRecipe with `source` attached, or an
        ExtractionFailure of kind "not_found".
        """
        return self.extract_document(RawDocument(html=raw_html or "", url=source_url))

    def extract_document(self, document: RawDocument) -> Union[NormalizedRecipe, ExtractionFailure]:
        # lxml tolerates malformed markup, a best-effort tree is always built
        soup = BeautifulSoup(document.html, 'lxml')

        recipe = None
        for extractor in self.extractors:
            recipe = extractor(soup)
            if recipe is not None:
                break

        if recipe is None or not recipe.has_content:
            domain = get_domain(document.url)
            print(f"⚠️ No usable recipe data found on {domain}")
            sentry_sdk.capture_message(
                "Recipe extraction failed: not_found",
                level="warning",
                tags={
                    "feature": "recipe_extraction",
                    "error_type": "not_found",
                    "domain": domain,
                },
            )
            return ExtractionFailure(kind="not_found", message=ERROR_MESSAGES["not_found"])

        recipe.source = document.url
        return recipe


recipe_pipeline = RecipeExtractionPipeline()


def extract_recipe(raw_html: str, source_url: str) -> Union[NormalizedRecipe, ExtractionFailure]:
    """Extract a recipe using the default extractor order."""
    return recipe_pipeline.extract(raw_html, source_url)
