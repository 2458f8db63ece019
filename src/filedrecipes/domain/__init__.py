from .models import Ingredient, Recipe
from .recipe_file import (
    SECTION_INGREDIENTS,
    SECTION_INSTRUCTIONS,
    SECTION_RECIPE,
    ReadStatus,
    check_writable,
    format_ingredient,
    format_recipes,
    parse_ingredient,
    parse_recipes,
)

__all__ = [
    "Ingredient",
    "ReadStatus",
    "Recipe",
    "SECTION_INGREDIENTS",
    "SECTION_INSTRUCTIONS",
    "SECTION_RECIPE",
    "check_writable",
    "format_ingredient",
    "format_recipes",
    "parse_ingredient",
    "parse_recipes",
]
