from __future__ import annotations

from bisect import insort
from collections.abc import Iterator
import logging
import os
from pathlib import Path

from .domain import Recipe, check_writable, format_recipes, parse_recipes
from .errors import InvalidPathError, OutOfRangeError, StorageError
from .events import Signal


logger = logging.getLogger(__name__)


class RecipeRepository:
    """Owns the recipe collection stored in a single text file.

    Callers only ever receive deep copies. Every successful ``load``, ``save``,
    ``delete``, ``add`` and ``update`` fires ``recipes_changed`` exactly once.
    """

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8", newline: str = "\n") -> None:
        self._path = _resolve_path(path)
        self._encoding = encoding
        self._newline = newline
        self._recipes: list[Recipe] = []
        self._modified = False
        self.recipes_changed = Signal()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_modified(self) -> bool:
        return self._modified

    def __len__(self) -> int:
        return len(self._recipes)

    def get_all(self) -> Iterator[Recipe]:
        return (recipe.clone() for recipe in self._recipes)

    def get_at(self, index: int) -> Recipe:
        return self._recipes[self._check_index(index)].clone()

    def find(self, name: str) -> Recipe | None:
        owned = self._find_owned(name)
        return owned.clone() if owned is not None else None

    def delete(self, recipe: Recipe | None) -> None:
        owned = None
        if recipe is not None:
            owned = next((r for r in self._recipes if r is recipe), None)
            if owned is None:
                owned = self._find_owned(recipe.name)
        if owned is not None:
            self._recipes.remove(owned)
            logger.debug("Deleted recipe %r", owned.name)
        else:
            logger.debug("Delete found no recipe matching %r", getattr(recipe, "name", None))
        self._changed(modified=True)

    def delete_at(self, index: int) -> None:
        self.delete(self._recipes[self._check_index(index)])

    def add(self, recipe: Recipe) -> None:
        check_writable(recipe)
        self._store(recipe.clone())
        self._changed(modified=True)

    def update(self, index: int, recipe: Recipe) -> None:
        index = self._check_index(index)
        check_writable(recipe)
        del self._recipes[index]
        self._store(recipe.clone())
        self._changed(modified=True)

    def load(self) -> None:
        try:
            with self._path.open("r", encoding=self._encoding, newline=None) as fh:
                recipes = parse_recipes(fh, source=str(self._path))
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise StorageError(f"Failed to read recipes: {self._path}") from exc

        self._recipes = recipes
        logger.info("Loaded %d recipes from %s", len(recipes), self._path)
        self._changed(modified=False)

    def save(self) -> None:
        text = format_recipes(self._recipes, newline=self._newline)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding=self._encoding, newline="") as fh:
                fh.write(text)
        except (OSError, UnicodeEncodeError, LookupError) as exc:
            raise StorageError(f"Failed to write recipes: {self._path}") from exc

        logger.info("Saved %d recipes to %s", len(self._recipes), self._path)
        self._changed(modified=False)

    def _store(self, recipe: Recipe) -> None:
        existing = self._find_owned(recipe.name)
        if existing is not None:
            self._recipes.remove(existing)
        insort(self._recipes, recipe)

    def _find_owned(self, name: str) -> Recipe | None:
        for recipe in self._recipes:
            if recipe.name == name:
                return recipe
        return None

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._recipes):
            raise OutOfRangeError(f"Recipe index {index} out of range (0..{len(self._recipes) - 1})")
        return index

    def _changed(self, modified: bool) -> None:
        self._modified = modified
        self.recipes_changed.emit()


def _resolve_path(path: str | os.PathLike[str]) -> Path:
    if path is None or not os.fspath(path).strip():
        raise InvalidPathError("Recipe file path must not be empty")
    try:
        return Path(path).expanduser().resolve()
    except (OSError, ValueError, RuntimeError) as exc:
        raise InvalidPathError(f"Invalid recipe file path: {path!r}") from exc
