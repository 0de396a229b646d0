#!/usr/bin/env python3
"""Command line entry point for create-unity-template.

Commands:
    new NAME   Prompt for template metadata and build a template skeleton
    pack       Pack a finished build into a .tgz for the editor's template folder

Environment variables:
    LOG_LEVEL       Logging level (default: WARNING)
    UNITY_HUB_PATH  Overrides essentials.unity_hub_path from config.toml
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.text import Text

from . import __version__
from .bundle import build_template, editor_version_of, list_builds, pack_template
from .config import EssentialsConfig, load_config
from .constants import BUILDS_DIR, BUILDS_DIR_ENV, CONFIG_FILE, CONFIG_FILE_ENV, OUTPUTS_DIR, OUTPUTS_DIR_ENV
from .discovery import load_dependencies, load_dependencies_from, load_versions, merge_candidates
from .domain import Editor_Version
from .exceptions import TemplateToolError
from .prompts import collect_descriptor, select_build

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-unity-template",
        description="Build and pack project templates for the Unity Hub",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help=f"Config file (default: {CONFIG_FILE})")
    parser.add_argument("--builds-dir", default=None, help=f"Builds folder (default: {BUILDS_DIR})")
    sub = parser.add_subparsers(dest="cmd", required=True)

    new = sub.add_parser("new", help="Creates a new unity template")
    new.add_argument("name", help="Template name, e.g. my-template")

    pack = sub.add_parser("pack", help="Packs a unity template from a generated build")
    pack.add_argument("--build", default=None, help="Build folder name (default: prompt)")
    pack.add_argument("--outputs-dir", default=None, help=f"Outputs folder (default: {OUTPUTS_DIR})")
    return parser


def resolve_folders(args: argparse.Namespace) -> argparse.Namespace:
    """Fill unset folder options from the environment, then the built-in defaults.

    Runs after the .env file is loaded, so values placed there apply.
    """
    args.config = args.config or os.getenv(CONFIG_FILE_ENV) or CONFIG_FILE
    args.builds_dir = args.builds_dir or os.getenv(BUILDS_DIR_ENV) or BUILDS_DIR
    if hasattr(args, "outputs_dir"):
        args.outputs_dir = args.outputs_dir or os.getenv(OUTPUTS_DIR_ENV) or OUTPUTS_DIR
    return args


def _discover(config: EssentialsConfig):
    def discover(version: Editor_Version, project_path: Path):
        return merge_candidates(load_dependencies(config, version), load_dependencies_from(project_path))

    return discover


def create_project(args: argparse.Namespace, config: EssentialsConfig, console: Console) -> int:
    versions = load_versions(config)
    descriptor, project = collect_descriptor(args.name, config, versions, _discover(config), console=console)
    result = build_template(project, descriptor, args.builds_dir)

    console.print()
    console.print("Build folder is located at:")
    console.print(f"- {result.build_root}")
    console.print()
    console.print("To pack the template, run:")
    console.print("- create-unity-template pack")
    console.print()
    return 0


def pack_project(args: argparse.Namespace, config: EssentialsConfig, console: Console) -> int:
    builds = list_builds(args.builds_dir)
    if args.build:
        build_root = Path(args.builds_dir) / args.build
    else:
        build_root = select_build(builds, console=console)

    template_folder = config.get_template_folder(editor_version_of(build_root))
    result = pack_template(build_root, args.outputs_dir)

    console.print()
    console.print("Output .tgz is located at:")
    console.print(f"- {result.archive_path}")
    console.print()
    console.print("Copy the .tgz file into:")
    console.print(f"- {template_folder}")
    console.print()
    console.print("After copying, completely restart the Unity Hub.")
    console.print()
    return 0


def report_error(error: TemplateToolError, console: Console) -> None:
    text = Text()
    text.append("error", style="bold red")
    text.append(f"[{error.error_code}]: {error}")
    console.print(text, highlight=False)
    if error.path is not None:
        console.print(f"  at: {error.path}", markup=False, highlight=False)
    if error.__cause__ is not None:
        console.print(f"  > {error.__cause__}", markup=False, highlight=False)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()
    args = resolve_folders(build_parser().parse_args(argv))
    console = Console()
    err_console = Console(stderr=True)

    console.print("[create-unity-template]", markup=False)
    try:
        config = load_config(args.config)
        if args.cmd == "new":
            return create_project(args, config, console)
        if args.cmd == "pack":
            return pack_project(args, config, console)
    except TemplateToolError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        report_error(e, err_console)
        return 1

    err_console.print(f"Unknown command: {args.cmd}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
