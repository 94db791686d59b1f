import json
import unittest

from app.models.recipe import ExtractionFailure, NormalizedRecipe
from app.services.pipeline import RecipeExtractionPipeline, extract_recipe, get_domain

SOURCE = "https://www.example.com/recipes/soup"


def _jsonld_page(data) -> str:
    return (
        "<html><head>"
        f'<script type="application/ld+json">{json.dumps(data)}</script>'
        "</head><body><h1>Soup</h1></body></html>"
    )


MICRODATA_ONLY = """
<html><body>
  <article itemscope itemtype="https://schema.org/Recipe">
    <h1 itemprop="name">Grandma's Stew</h1>
    <p itemprop="recipeIngredient">1 kg beef</p>
    <p itemprop="recipeIngredient">3 carrots</p>
    <div itemprop="recipeInstructions">Braise for three hours.</div>
  </article>
</body></html>
"""


class PipelineTests(unittest.TestCase):
    def test_jsonld_recipe_gets_source(self) -> None:
        result = extract_recipe(
            _jsonld_page({
                "@type": "Recipe",
                "name": "Soup",
                "recipeIngredient": ["water", "stones"],
                "recipeInstructions": "Boil.",
            }),
            SOURCE,
        )
        self.assertIsInstance(result, NormalizedRecipe)
        self.assertEqual(result.title, "Soup")
        self.assertEqual(result.source, SOURCE)
        self.assertIsNone(result.servings_yield)

    def test_microdata_fallback(self) -> None:
        result = extract_recipe(MICRODATA_ONLY, SOURCE)
        self.assertIsInstance(result, NormalizedRecipe)
        self.assertEqual(result.title, "Grandma's Stew")
        self.assertEqual(result.ingredients, ["1 kg beef", "3 carrots"])
        self.assertEqual(result.instructions, ["Braise for three hours."])
        self.assertIsNone(result.total_time)
        self.assertEqual(result.source, SOURCE)

    def test_jsonld_preferred_over_microdata(self) -> None:
        page = MICRODATA_ONLY.replace(
            "<html>",
            "<html><head>"
            + '<script type="application/ld+json">'
            + json.dumps({"@type": "Recipe", "name": "From JSON-LD", "recipeIngredient": ["x"]})
            + "</script></head>",
        )
        result = extract_recipe(page, SOURCE)
        self.assertEqual(result.title, "From JSON-LD")

    def test_no_structured_data_is_not_found(self) -> None:
        result = extract_recipe("<html><body><p>Just a blog post.</p></body></html>", SOURCE)
        self.assertIsInstance(result, ExtractionFailure)
        self.assertEqual(result.kind, "not_found")
        self.assertEqual(result.message, "No recipe data found on this page")

    def test_title_only_recipe_is_not_found(self) -> None:
        result = extract_recipe(
            _jsonld_page({"@type": "Recipe", "name": "Mystery", "recipeIngredient": [], "recipeInstructions": []}),
            SOURCE,
        )
        self.assertIsInstance(result, ExtractionFailure)
        self.assertEqual(result.kind, "not_found")

    def test_empty_jsonld_recipe_does_not_fall_back_to_microdata(self) -> None:
        page = MICRODATA_ONLY.replace(
            "<html>",
            "<html><head>"
            + '<script type="application/ld+json">'
            + json.dumps({"@type": "Recipe", "name": "Stub", "recipeIngredient": []})
            + "</script></head>",
        )
        result = extract_recipe(page, SOURCE)
        self.assertIsInstance(result, ExtractionFailure)
        self.assertEqual(result.kind, "not_found")

    def test_deeply_nested_jsonld_falls_back_to_microdata(self) -> None:
        page = MICRODATA_ONLY.replace(
            "<html>",
            "<html><head>"
            + '<script type="application/ld+json">'
            + "[" * 100000 + "]" * 100000
            + "</script></head>",
        )
        result = extract_recipe(page, SOURCE)
        self.assertIsInstance(result, NormalizedRecipe)
        self.assertEqual(result.title, "Grandma's Stew")
        self.assertEqual(result.ingredients, ["1 kg beef", "3 carrots"])

    def test_malformed_input_never_raises(self) -> None:
        for html in ["", "<<<>>>", "<script type='application/ld+json'>[1, 2,</script>", None]:
            result = extract_recipe(html, SOURCE)
            self.assertIsInstance(result, ExtractionFailure)

    def test_first_non_empty_extractor_wins(self) -> None:
        calls = []

        def empty(soup):
            calls.append("empty")
            return None

        def found(soup):
            calls.append("found")
            return NormalizedRecipe(title="custom", instructions=["step"])

        def never(soup):
            calls.append("never")
            return None

        pipeline = RecipeExtractionPipeline(extractors=(empty, found, never))
        result = pipeline.extract("<p></p>", SOURCE)
        self.assertEqual(result.title, "custom")
        self.assertEqual(calls, ["empty", "found"])

    def test_calls_do_not_share_records(self) -> None:
        page = _jsonld_page({"@type": "Recipe", "recipeIngredient": ["salt"]})
        first = extract_recipe(page, "https://a.example/1")
        second = extract_recipe(page, "https://b.example/2")
        self.assertIsNot(first, second)
        self.assertEqual(first.source, "https://a.example/1")
        self.assertEqual(second.source, "https://b.example/2")


class GetDomainTests(unittest.TestCase):
    def test_strips_www(self) -> None:
        self.assertEqual(get_domain("https://www.Example.com/a"), "example.com")

    def test_unknown(self) -> None:
        self.assertEqual(get_domain("not a url"), "unknown")
