"""
JSON-LD recipe extraction.

Reads every <script type="application/ld+json"> block on the page and picks
the first node typed as a schema.org Recipe, looking inside @graph
containers as well.
"""

import json
from typing import Any, Optional

from bs4 import BeautifulSoup

from app.models.recipe import NormalizedRecipe
from app.services.normalizers import (
    clean_text_list,
    first_value,
    has_schema_type,
    parse_instructions,
    strip_html,
)


def collect_jsonld_candidates(soup: BeautifulSoup) -> list[Any]:
    """Parse every JSON-LD block, flattening arrays, in document order."""
    candidates = []

    for script in soup.find_all('script', type='application/ld+json'):
        try:
            data = json.loads(script.string or script.get_text())
        except (json.JSONDecodeError, TypeError, ValueError, RecursionError):
            # Malformed or absurdly nested third-party markup, skip the block
            continue

        # Handle array format
        if isinstance(data, list):
            candidates.extend(data)
        else:
            candidates.append(data)

    return candidates


def find_recipe_node(candidates: list[Any]) -> Optional[dict]:
    """Return the first Recipe-typed node, searching @graph containers too."""
    for item in candidates:
        if not isinstance(item, dict):
            continue

        # Direct Recipe type
        if has_schema_type(item, 'Recipe'):
            return item

        # Handle @graph format (common with Yoast and similar plugins)
        graph = item.get('@graph')
        if isinstance(graph, list):
            for graph_item in graph:
                if has_schema_type(graph_item, 'Recipe'):
                    return graph_item

    return None


def convert_jsonld_recipe(node: dict) -> NormalizedRecipe:
    """Map a JSON-LD Recipe node onto a NormalizedRecipe."""
    ingredients = node.get('recipeIngredient')
    if ingredients is None:
        # Older schema.org property name
        ingredients = node.get('ingredients')

    total_time = node.get('totalTime')
    if not isinstance(total_time, str) or not total_time:
        total_time = None

    instructions = [strip_html(step) for step in parse_instructions(node.get('recipeInstructions'))]

    return NormalizedRecipe(
        title=strip_html(first_value(node.get('name'), object_key='@value') or ''),
        image=first_value(node.get('image'), object_key='url', allow_numbers=False),
        servings_yield=first_value(node.get('recipeYield'), object_key='value'),
        total_time=total_time,
        ingredients=clean_text_list(ingredients),
        instructions=[step for step in instructions if step],
    )


def extract_jsonld_recipe(soup: BeautifulSoup) -> Optional[NormalizedRecipe]:
    """Extract a recipe from the page's JSON-LD blocks, or None if there isn't one."""
    node = find_recipe_node(collect_jsonld_candidates(soup))
    if node is None:
        return None

    recipe = convert_jsonld_recipe(node)
    print(f"✅ Found JSON-LD recipe schema: {recipe.title or 'untitled'}")
    return recipe
