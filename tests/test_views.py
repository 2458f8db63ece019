from __future__ import annotations

import io

from filedrecipes.domain import Ingredient, Recipe
from filedrecipes.views import ACK_PROMPT, RecipeView, render_header, render_recipe


def _pancakes() -> Recipe:
    return Recipe(
        "Pancakes",
        [Ingredient("2", "dl", "flour"), Ingredient("1", "st", "egg"), Ingredient("1/2", "tsk", "salt")],
        ["Mix ingredients.", "Fry until golden."],
    )


def test_render_recipe_layout() -> None:
    text = render_recipe(_pancakes())
    lines = text.splitlines()
    assert "Pancakes" in lines[1]
    assert "  2 dl  flour" in lines
    assert "1/2 tsk salt" in lines
    index = lines.index("Mix ingredients.")
    assert lines[index + 1] == ""
    assert lines[index + 3] == "Fry until golden."
    assert text.endswith("Fry until golden.\n\n")


def test_render_header_fits_long_names() -> None:
    title = "x" * 80
    header = render_header(title)
    assert len(header[0]) == 84
    assert header[1] == f"| {title} |"


def test_render_recipe_without_ingredients() -> None:
    text = render_recipe(Recipe("Tea", [], ["Steep."]))
    assert "Steep." in text


def test_show_waits_once() -> None:
    out = io.StringIO()
    prompts: list[str] = []
    RecipeView(out=out, acknowledge=prompts.append).show(_pancakes())
    assert "Pancakes" in out.getvalue()
    assert prompts == [ACK_PROMPT]


def test_show_all_waits_after_full_list() -> None:
    out = io.StringIO()
    prompts: list[str] = []
    recipes = [_pancakes(), Recipe("Tea", [], ["Steep."])]
    RecipeView(out=out, acknowledge=prompts.append).show_all(recipes)
    text = out.getvalue()
    assert text.index("Pancakes") < text.index("Tea")
    assert prompts == [ACK_PROMPT]


def test_show_without_acknowledge() -> None:
    out = io.StringIO()
    RecipeView(out=out, acknowledge=None).show(_pancakes())
    assert "Fry until golden." in out.getvalue()
