from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from collections.abc import Callable

from .config import LOG_LEVELS, EffectiveConfig, config_to_toml, resolve_config
from .errors import (
    ConfigError,
    FiledRecipesError,
    InvalidPathError,
    OutOfRangeError,
    RecipeFormatError,
    StorageError,
)
from .export import FORMATS, export_recipes
from .repository import RecipeRepository
from .views import RecipeView


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "list": _cmd_list,
        "show": _cmd_show,
        "delete": _cmd_delete,
        "check": _cmd_check,
        "export": _cmd_export,
        "config": _cmd_config,
    }

    handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except FiledRecipesError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def setup_logging(level: str = "warning") -> None:
    logging.basicConfig(
        level=LOG_LEVELS.get(level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(LOG_LEVELS.get(level, logging.WARNING))


def _common_parser(top_level: bool) -> argparse.ArgumentParser:
    # Subcommand copies only set options given after the subcommand.
    value_default = None if top_level else argparse.SUPPRESS
    flag_default = False if top_level else argparse.SUPPRESS

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", dest="recipes_file", default=value_default)
    common.add_argument("--project", default=value_default)
    common.add_argument("--encoding", default=value_default)
    common.add_argument("--newline", choices=("lf", "crlf"), default=value_default)
    common.add_argument("--log-level", dest="log_level", choices=tuple(LOG_LEVELS), default=value_default)
    common.add_argument("--verbose", action="store_true", default=flag_default)
    return common


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="filedrecipes", parents=[_common_parser(top_level=True)])
    common = _common_parser(top_level=False)
    sub = parser.add_subparsers(dest="command")

    listing = sub.add_parser("list", parents=[common])
    listing.add_argument("--json", action="store_true")

    show = sub.add_parser("show", parents=[common])
    target = show.add_mutually_exclusive_group(required=True)
    target.add_argument("index", nargs="?", type=int)
    target.add_argument("--all", action="store_true")
    show.add_argument("--no-wait", action="store_true")

    delete = sub.add_parser("delete", parents=[common])
    delete.add_argument("index", type=int)

    sub.add_parser("check", parents=[common])

    export = sub.add_parser("export", parents=[common])
    export.add_argument("--format", dest="output_format", choices=FORMATS, default="json")
    export.add_argument("--output")

    sub.add_parser("config", parents=[common])

    return parser


def _cmd_list(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    names = [recipe.name for recipe in repo.get_all()]
    if args.json:
        print(json.dumps(names, indent=2, ensure_ascii=False))
    else:
        for index, name in enumerate(names):
            print(f"{index}: {name}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    view = RecipeView(acknowledge=None if args.no_wait else input)
    if args.all:
        view.show_all(repo.get_all())
    else:
        view.show(repo.get_at(args.index))
    return 0


def _cmd_delete(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    name = repo.get_at(args.index).name
    repo.delete_at(args.index)
    repo.save()
    print(f"Deleted {name}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    print(f"{repo.path}: {len(repo)} recipes")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    text = export_recipes(repo.get_all(), args.output_format)
    if args.output:
        path = Path(args.output)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to write export: {path}") from exc
        print(path)
    else:
        sys.stdout.write(text)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    cfg = resolve_config(_cli_args_dict(args))
    setup_logging("debug" if args.verbose else cfg.log_level)
    return cfg


def _open_repository(args: argparse.Namespace) -> RecipeRepository:
    cfg = _resolve_cfg(args)
    repo = RecipeRepository(cfg.recipes_path, encoding=cfg.encoding, newline=cfg.line_terminator)
    repo.load()
    return repo


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: FiledRecipesError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, InvalidPathError):
        return 3
    if isinstance(exc, RecipeFormatError):
        return 4
    if isinstance(exc, OutOfRangeError):
        return 5
    if isinstance(exc, StorageError):
        return 6
    return 1
