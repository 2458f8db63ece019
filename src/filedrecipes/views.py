from __future__ import annotations

from collections.abc import Callable, Iterable
import sys
from typing import TextIO

from .domain import Recipe


HEADER_WIDTH = 60
ACK_PROMPT = "Press Enter to continue..."


class RecipeView:
    """Plain-text rendering of recipes for a terminal."""

    def __init__(
        self,
        out: TextIO | None = None,
        acknowledge: Callable[[str], object] | None = input,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.acknowledge = acknowledge

    def show(self, recipe: Recipe) -> None:
        self.out.write(render_recipe(recipe))
        self._wait()

    def show_all(self, recipes: Iterable[Recipe]) -> None:
        for recipe in recipes:
            self.out.write(render_recipe(recipe))
        self._wait()

    def _wait(self) -> None:
        self.out.flush()
        if self.acknowledge is not None:
            self.acknowledge(ACK_PROMPT)


def render_recipe(recipe: Recipe) -> str:
    lines = render_header(recipe.name)
    lines.append("")
    lines.append("Ingredients")
    lines.append("-" * len("Ingredients"))
    lines.extend(render_ingredient_table(recipe))
    lines.append("")
    lines.append("Instructions")
    lines.append("-" * len("Instructions"))
    for number, instruction in enumerate(recipe.instructions, start=1):
        lines.append(f"<{number}>")
        lines.append(instruction)
        lines.append("")
    return "\n".join(lines) + "\n"


def render_header(title: str) -> list[str]:
    border = "=" * max(HEADER_WIDTH, len(title) + 4)
    return [border, f"| {title.center(len(border) - 4)} |", border]


def render_ingredient_table(recipe: Recipe) -> list[str]:
    if not recipe.ingredients:
        return []
    amount_width = max(len(i.amount) for i in recipe.ingredients)
    measure_width = max(len(i.measure) for i in recipe.ingredients)
    return [
        f"{i.amount:>{amount_width}} {i.measure:<{measure_width}} {i.name}".rstrip()
        for i in recipe.ingredients
    ]
