"""
Placeholder substitution for TagSite pages.

Templates are plain HTML strings. The only recognized tokens are the three
members of :class:`Placeholder`; everything else in the template is copied
through untouched.
"""

from enum import Enum
from typing import Dict


class Placeholder(Enum):
    """Tokens recognized in the base template."""
    CONTENT = '$CONTENT'
    TITLE = '$TITLE'
    NAVCLOUD = '$NAVCLOUD'


def render(template: str, values: Dict[Placeholder, str]) -> str:
    """
    Replace every occurrence of each placeholder token with its value.

    Each key is applied once across the whole string, in enumeration order.
    Inserted values are not scanned again for the same key, and tokens with
    no entry in ``values`` are left as they are.

    Args:
        template: Template text
        values: Mapping of placeholder to replacement text

    Returns:
        The rendered text
    """
    for key in values:
        if not isinstance(key, Placeholder):
            raise TypeError(f"Unknown placeholder key: {key!r}")

    result = template
    # Later keys also match tokens inside earlier inserted values
    for placeholder in Placeholder:
        if placeholder in values:
            result = result.replace(placeholder.value, values[placeholder])
    return result


def page_values(content: str, title: str, navcloud: str = '') -> Dict[Placeholder, str]:
    """Build the full placeholder map used for a page."""
    return {
        Placeholder.CONTENT: content,
        Placeholder.TITLE: title,
        Placeholder.NAVCLOUD: navcloud,
    }
