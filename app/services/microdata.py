"""Microdata (itemtype/itemprop) recipe extraction."""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from app.models.recipe import NormalizedRecipe

RECIPE_SELECTOR = '[itemtype*="schema.org/Recipe"]'
INGREDIENT_SELECTOR = '[itemprop~="recipeIngredient"], [itemprop~="ingredients"]'
INSTRUCTION_SELECTOR = '[itemprop~="recipeInstructions"]'


def _first_text(root: Tag, selector: str) -> Optional[str]:
    element = root.select_one(selector)
    if element is None:
        return None
    return element.get_text().strip() or None


def _all_texts(root: Tag, selector: str) -> list[str]:
    texts = []
    for element in root.select(selector):
        text = element.get_text().strip()
        if text:
            texts.append(text)
    return texts


def _image_url(root: Tag) -> Optional[str]:
    element = root.select_one('[itemprop~="image"]')
    if element is None:
        return None
    # <img src>, or <meta>/<link> forms carrying the URL in content
    for attr in ('src', 'content'):
        value = element.get(attr)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def extract_microdata_recipe(soup: BeautifulSoup) -> Optional[NormalizedRecipe]:
    """
    Extract a recipe from schema.org microdata attributes.

    Only the first Recipe-typed element is considered. Total time is never
    read from microdata.
    """
    recipe_el = soup.select_one(RECIPE_SELECTOR)
    if recipe_el is None:
        return None

    ingredients = _all_texts(recipe_el, INGREDIENT_SELECTOR)
    instructions = _all_texts(recipe_el, INSTRUCTION_SELECTOR)

    if not ingredients and not instructions:
        print("⚠️ Microdata recipe element has no ingredients or instructions")
        return None

    print(f"✅ Found microdata recipe: {len(ingredients)} ingredients, {len(instructions)} steps")
    return NormalizedRecipe(
        title=_first_text(recipe_el, '[itemprop~="name"]') or "",
        image=_image_url(recipe_el),
        servings_yield=_first_text(recipe_el, '[itemprop~="recipeYield"]'),
        total_time=None,
        ingredients=ingredients,
        instructions=instructions,
    )
