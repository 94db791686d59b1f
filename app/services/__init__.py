"""Services module for recipe extraction."""

from .pipeline import recipe_pipeline, RecipeExtractionPipeline, extract_recipe
from .loader import document_loader, DocumentLoader

__all__ = [
    "recipe_pipeline",
    "RecipeExtractionPipeline",
    "extract_recipe",
    "document_loader",
    "DocumentLoader",
]
