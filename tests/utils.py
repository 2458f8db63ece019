from __future__ import annotations

from pathlib import Path


PANCAKES = """[Recept]
Pancakes
[Ingredienser]
2;dl;flour
1;st;egg
[Instruktioner]
Mix ingredients.
Fry until golden.
"""


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "filedrecipes"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_recipe_file(directory: Path, content: str, name: str = "recipes.txt") -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


def recipe_block(name: str, ingredients: list[str], instructions: list[str]) -> str:
    lines = ["[Recept]", name, "[Ingredienser]", *ingredients, "[Instruktioner]", *instructions]
    return "\n".join(lines) + "\n"
