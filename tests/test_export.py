from __future__ import annotations

import json

import pytest
import yaml

from filedrecipes.domain import Ingredient, Recipe
from filedrecipes.export import export_recipes, recipe_to_dict


def _recipes() -> list[Recipe]:
    return [Recipe("Äppelkaka", [Ingredient("3", "st", "äpplen")], ["Skiva.", "Grädda."])]


def test_recipe_to_dict() -> None:
    data = recipe_to_dict(_recipes()[0])
    assert data == {
        "name": "Äppelkaka",
        "ingredients": [{"amount": "3", "measure": "st", "name": "äpplen"}],
        "instructions": ["Skiva.", "Grädda."],
    }


def test_export_json() -> None:
    text = export_recipes(_recipes(), "json")
    assert "Äppelkaka" in text
    assert json.loads(text)[0]["instructions"] == ["Skiva.", "Grädda."]


def test_export_yaml() -> None:
    text = export_recipes(_recipes(), "yaml")
    assert text.startswith("- name: Äppelkaka")
    assert yaml.safe_load(text) == [recipe_to_dict(_recipes()[0])]


def test_export_unknown_format() -> None:
    with pytest.raises(ValueError):
        export_recipes(_recipes(), "xml")
