from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

from ..errors import RecipeFormatError


@dataclass(frozen=True)
class Ingredient:
    amount: str
    measure: str
    name: str

    def clone(self) -> Ingredient:
        return Ingredient(amount=self.amount, measure=self.measure, name=self.name)


@total_ordering
@dataclass(eq=False)
class Recipe:
    """A named recipe with ordered ingredients and instructions.

    Recipes are identified by name alone: equality, hashing and ordering all
    use ``name`` and ignore the ingredient and instruction lists. Do not rename
    a recipe while it is held in a set or used as a dict key; rename a copy
    and hand it to ``RecipeRepository.update`` instead.
    """

    name: str
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise RecipeFormatError("Recipe name must not be empty")
        self.name = self.name.strip()

    def add(self, item: Ingredient | str) -> None:
        if isinstance(item, Ingredient):
            self.add_ingredient(item)
        elif isinstance(item, str):
            self.add_instruction(item)
        else:
            raise RecipeFormatError(f"Cannot add {item!r} to recipe {self.name!r}")

    def add_ingredient(self, ingredient: Ingredient) -> None:
        if ingredient is None:
            raise RecipeFormatError(f"Cannot add a missing ingredient to recipe {self.name!r}")
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        if instruction is None:
            raise RecipeFormatError(f"Cannot add a missing instruction to recipe {self.name!r}")
        self.instructions.append(instruction)

    def clone(self) -> Recipe:
        return Recipe(
            name=self.name,
            ingredients=[ingredient.clone() for ingredient in self.ingredients],
            instructions=list(self.instructions),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)
