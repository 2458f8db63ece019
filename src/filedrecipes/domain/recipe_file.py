from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
import logging

from ..errors import RecipeFormatError
from .models import Ingredient, Recipe


logger = logging.getLogger(__name__)

SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"
FIELD_SEPARATOR = ";"


class ReadStatus(Enum):
    INDEFINITE = "indefinite"
    NEW = "new"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


def parse_recipes(lines: Iterable[str], source: str = "<string>") -> list[Recipe]:
    """Parse recipe blocks into a list sorted by name.

    Each block is collected into a complete ``Recipe`` first and committed at
    the next ``[Recept]`` marker or at the end of input. A block only counts
    once it has at least one instruction line. When two blocks share a name
    the later one wins.
    """
    committed: dict[str, Recipe] = {}
    current: Recipe | None = None
    status = ReadStatus.INDEFINITE

    def commit(recipe: Recipe | None) -> None:
        if recipe is None or not recipe.instructions:
            return
        if recipe.name in committed:
            logger.warning("%s: recipe %r defined more than once, keeping the last", source, recipe.name)
            del committed[recipe.name]
        committed[recipe.name] = recipe

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        marker = _section_marker(line)
        if marker is not None:
            if marker is ReadStatus.NEW:
                commit(current)
                current = None
            if marker is not status:
                logger.debug("%s:%d: %s -> %s", source, line_number, status.value, marker.value)
            status = marker
            continue

        if status is ReadStatus.NEW:
            commit(current)
            current = Recipe(line.strip())
        elif status is ReadStatus.INGREDIENT:
            _require_recipe(current, source, line_number)
            current.add_ingredient(parse_ingredient(line, source, line_number))
        elif status is ReadStatus.INSTRUCTION:
            _require_recipe(current, source, line_number)
            current.add_instruction(line)
        else:
            raise RecipeFormatError(f"{source}:{line_number}: content before any {SECTION_RECIPE} section")

    commit(current)
    return sorted(committed.values())


def parse_ingredient(line: str, source: str = "<string>", line_number: int = 0) -> Ingredient:
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < 3:
        raise RecipeFormatError(
            f"{source}:{line_number}: ingredient needs amount;measure;name, got {line.strip()!r}"
        )
    return Ingredient(amount=fields[0], measure=fields[1], name=fields[2])


def format_recipes(recipes: Iterable[Recipe], newline: str = "\n") -> str:
    """Serialize recipes to the section-delimited text format.

    Raises ``RecipeFormatError`` for any value that would not read back
    unchanged, before any text is produced.
    """
    lines: list[str] = []
    for recipe in recipes:
        check_writable(recipe)
        lines.append(SECTION_RECIPE)
        lines.append(recipe.name)
        lines.append(SECTION_INGREDIENTS)
        for ingredient in recipe.ingredients:
            lines.append(format_ingredient(ingredient))
        lines.append(SECTION_INSTRUCTIONS)
        lines.extend(recipe.instructions)
    if not lines:
        return ""
    return newline.join(lines) + newline


def format_ingredient(ingredient: Ingredient) -> str:
    return FIELD_SEPARATOR.join((ingredient.amount, ingredient.measure, ingredient.name))


def check_writable(recipe: Recipe) -> None:
    name = recipe.name
    if not name.strip() or name != name.strip():
        raise RecipeFormatError(f"Recipe name {name!r} must be non-empty without surrounding whitespace")
    _check_line(name, f"Recipe name {name!r}")
    if not recipe.instructions:
        raise RecipeFormatError(f"Recipe {name!r} needs at least one instruction")

    for ingredient in recipe.ingredients:
        for value in (ingredient.amount, ingredient.measure, ingredient.name):
            if FIELD_SEPARATOR in value:
                raise RecipeFormatError(
                    f"Recipe {name!r}: ingredient field {value!r} must not contain {FIELD_SEPARATOR!r}"
                )
            _check_line(value, f"Recipe {name!r}: ingredient field {value!r}")

    for instruction in recipe.instructions:
        if not instruction.strip():
            raise RecipeFormatError(f"Recipe {name!r}: instructions must not be blank")
        _check_line(instruction, f"Recipe {name!r}: instruction {instruction!r}")


def _check_line(value: str, what: str) -> None:
    if "\n" in value or "\r" in value:
        raise RecipeFormatError(f"{what} must fit on one line")
    if _section_marker(value) is not None:
        raise RecipeFormatError(f"{what} must not contain a section marker")


def _section_marker(line: str) -> ReadStatus | None:
    if SECTION_RECIPE in line:
        return ReadStatus.NEW
    if SECTION_INGREDIENTS in line:
        return ReadStatus.INGREDIENT
    if SECTION_INSTRUCTIONS in line:
        return ReadStatus.INSTRUCTION
    return None


def _require_recipe(recipe: Recipe | None, source: str, line_number: int) -> None:
    if recipe is None:
        raise RecipeFormatError(f"{source}:{line_number}: content outside of a named recipe")
