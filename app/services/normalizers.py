"""
Field normalizers shared by the recipe extractors.

Every reader here is lenient: third-party markup is never trusted, so a
value that can't be read comes back as None / "" / [] instead of raising.
"""

import re
from typing import Any, Optional

from bs4 import BeautifulSoup

# "PT1H30M", "PT45M", "PT2H" (days and seconds are ignored for display)
DURATION_PATTERN = re.compile(r'PT(?:(\d+)H)?(?:(\d+)M)?')


def has_schema_type(item: Any, type_name: str) -> bool:
    """Check if a JSON-LD node is tagged with the given @type."""
    if not isinstance(item, dict):
        return False
    item_type = item.get('@type', '')
    # Handle both string and list types
    if isinstance(item_type, list):
        return type_name in item_type
    return item_type == type_name


def strip_html(text: Any) -> str:
    """Render text as an HTML fragment and return its plain text content."""
    if text is None or isinstance(text, (dict, list, bool)):
        return ""
    if not isinstance(text, str):
        text = str(text)
    if '<' not in text and '&' not in text:
        return text.strip()

    # The fragment is the whole document, so its text is the field's text
    fragment = BeautifulSoup(f"<span>{text}</span>", 'lxml')
    return fragment.get_text().strip()


def first_value(value: Any, object_key: str = 'url', allow_numbers: bool = True) -> Optional[str]:
    """
    Collapse a shape-flexible JSON-LD field to a single string.

    Accepts a plain string, a number (unless `allow_numbers` is off), a
    list (first element wins) or an object (its `object_key` sub-field).
    Anything else reads as None.
    """
    if isinstance(value, list):
        if not value:
            return None
        value = value[0]

    if isinstance(value, dict):
        value = value.get(object_key)

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value) if allow_numbers else None
    if isinstance(value, str):
        return value or None
    return None


def clean_text_list(values: Any) -> list[str]:
    """HTML-strip each entry of a list field, dropping empty results."""
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, list):
        return []

    cleaned = []
    for value in values:
        text = strip_html(value)
        if text:
            cleaned.append(text)
    return cleaned


def _section_steps(section: dict) -> list[str]:
    children = section.get('itemListElement') or []
    if isinstance(children, (str, dict)):
        children = [children]
    if not isinstance(children, list):
        return []

    steps = []
    for child in children:
        if isinstance(child, str):
            steps.append(child.strip())
        elif isinstance(child, dict):
            text = child.get('text')
            if isinstance(text, str):
                steps.append(text.strip())
    return steps


def parse_instructions(raw: Any) -> list[str]:
    """
    Normalize recipeInstructions into a flat list of step strings.

    Handles a newline separated string, a list of strings, HowToStep
    objects and HowToSection groups. Section labels are dropped and their
    child steps are inlined in order.
    """
    if not raw:
        return []

    if isinstance(raw, str):
        return [step.strip() for step in re.split(r'\n+', raw) if step.strip()]

    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        return []

    steps = []
    for item in raw:
        if isinstance(item, str):
            steps.append(item.strip())
        elif has_schema_type(item, 'HowToStep'):
            text = item.get('text')
            if isinstance(text, str):
                steps.append(text.strip())
        elif has_schema_type(item, 'HowToSection'):
            steps.extend(_section_steps(item))

    return [step for step in steps if step]


def format_duration(duration: Optional[str]) -> Optional[str]:
    """Format an ISO 8601 duration (PT1H30M) for display (1h 30m)."""
    if not duration or not isinstance(duration, str):
        return None

    match = DURATION_PATTERN.search(duration)
    if not match:
        return None

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)

    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    if minutes:
        return f"{minutes}m"
    return None
