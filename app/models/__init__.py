from .recipe import NormalizedRecipe, RawDocument, ExtractionFailure

__all__ = [
    "NormalizedRecipe",
    "RawDocument",
    "ExtractionFailure",
]
