from __future__ import annotations

from collections.abc import Iterable
import json
from typing import Any

import yaml

from .domain import Recipe


FORMATS = ("json", "yaml")


def recipe_to_dict(recipe: Recipe) -> dict[str, Any]:
    return {
        "name": recipe.name,
        "ingredients": [
            {"amount": i.amount, "measure": i.measure, "name": i.name}
            for i in recipe.ingredients
        ],
        "instructions": list(recipe.instructions),
    }


def export_recipes(recipes: Iterable[Recipe], output_format: str = "json") -> str:
    data = [recipe_to_dict(recipe) for recipe in recipes]
    if output_format == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    if output_format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unsupported export format: {output_format!r}")
