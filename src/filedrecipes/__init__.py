from .domain import Ingredient, Recipe
from .errors import (
    ConfigError,
    FiledRecipesError,
    InvalidPathError,
    OutOfRangeError,
    RecipeFormatError,
    StorageError,
)
from .repository import RecipeRepository

__all__ = [
    "ConfigError",
    "FiledRecipesError",
    "Ingredient",
    "InvalidPathError",
    "OutOfRangeError",
    "Recipe",
    "RecipeFormatError",
    "RecipeRepository",
    "StorageError",
]
