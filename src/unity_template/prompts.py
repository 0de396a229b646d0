"""Interactive collection of build metadata.

Everything here talks to the user through ``rich``; the bundle pipeline
never imports this module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .config import EssentialsConfig
from .constants import CATEGORIES, DEFAULT_PACKAGE_VERSION
from .domain import Build_Descriptor, Built_In_Package, Dependency_Set, Editor_Version, Project_Location
from .domain.build_descriptor import display_name_from, normalize_identifier, parse_keywords
from .exceptions import ValidationFailureError

logger = logging.getLogger(__name__)

DependencyDiscovery = Callable[[Editor_Version, Path], List[Built_In_Package]]


def _console(console: Optional[Console]) -> Console:
    return console or Console(stderr=True)


def ask_text(label: str, default: str = "", allow_empty: bool = False, console: Optional[Console] = None) -> str:
    """Ask for one line of text.

    Raises:
        ValidationFailureError: If the answer is empty and ``allow_empty`` is False
    """
    if default:
        answer = Prompt.ask(label, default=default, console=_console(console))
    else:
        answer = Prompt.ask(label, console=_console(console))
    answer = answer.strip()
    if not answer and not allow_empty:
        raise ValidationFailureError(f"{label} is required")
    return answer


def select_one(label: str, items: Sequence[str], default: int = 0, console: Optional[Console] = None) -> int:
    """Show a numbered list and return the chosen index.

    Raises:
        ValidationFailureError: If there is nothing to choose from or no valid choice was made
    """
    console = _console(console)
    if not items:
        raise ValidationFailureError(f"Did not select a {label.lower()}: nothing to choose from")

    console.print(f"[bold]{label}[/bold]")
    for number, item in enumerate(items, start=1):
        console.print(f"  {number}) {escape(item)}")

    answer = Prompt.ask(label, default=str(default + 1), console=console).strip()
    try:
        index = int(answer) - 1
    except ValueError:
        raise ValidationFailureError(f"Did not select a {label.lower()}.") from None
    if not 0 <= index < len(items):
        raise ValidationFailureError(f"Did not select a {label.lower()}.")
    return index


def select_many(
    label: str,
    items: Sequence[str],
    defaults: Sequence[bool],
    console: Optional[Console] = None,
) -> List[int]:
    """Show a checklist and return the chosen indexes in list order.

    The answer is a comma separated list of item numbers; an empty answer
    keeps the preselected items.
    """
    console = _console(console)
    console.print(f"[bold]{label}[/bold]")
    for number, (item, checked) in enumerate(zip(items, defaults), start=1):
        mark = "x" if checked else " "
        console.print(escape(f"  [{mark}] {number}) {item}"))

    preselected = ",".join(str(i + 1) for i, checked in enumerate(defaults) if checked)
    answer = Prompt.ask(f"{label} (comma separated numbers)", default=preselected, console=console)

    chosen = set()
    for token in answer.split(","):
        token = token.strip()
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= len(items):
            raise ValidationFailureError(f"Invalid {label.lower()} selection: {token!r}")
        chosen.add(int(token) - 1)
    return sorted(chosen)


def collect_descriptor(
    raw_name: str,
    config: EssentialsConfig,
    versions: Sequence[Editor_Version],
    discover_dependencies: DependencyDiscovery,
    console: Optional[Console] = None,
) -> Tuple[Build_Descriptor, Project_Location]:
    """Prompt for everything a build needs.

    Args:
        raw_name: Name given on the command line, e.g. "my-template"
        config: Supplies the preselected dependencies
        versions: Installed editor versions to choose from
        discover_dependencies: Returns candidates for a version and project path

    Returns:
        The descriptor and the chosen source project
    """
    console = _console(console)
    name = normalize_identifier(raw_name)

    display_name = ask_text("Display name", default=display_name_from(raw_name), console=console)
    description = ask_text("Description", allow_empty=True, console=console)
    keywords = parse_keywords(ask_text("Keywords", allow_empty=True, console=console))

    category = CATEGORIES[select_one("Category", CATEGORIES, console=console)]

    version_index = select_one("Unity version", [v.full for v in versions], console=console)
    editor = versions[version_index]

    package_version = ask_text("Package version", default=DEFAULT_PACKAGE_VERSION, console=console)
    project = Project_Location(Path(ask_text("Project path", console=console)))

    candidates = discover_dependencies(editor, project.root)
    names = [candidate.name for candidate in candidates]
    defaults = [candidate_name in config.default_dependencies for candidate_name in names]
    chosen = select_many("Dependencies", names, defaults, console=console)
    dependencies = Dependency_Set.from_pairs((candidates[i].name, candidates[i].version) for i in chosen)
    logger.debug("Selected %d of %d dependencies", len(dependencies), len(candidates))

    descriptor = Build_Descriptor(
        name=name,
        display_name=display_name,
        version=package_version,
        unity=editor.major,
        unity_full=editor.full,
        keywords=keywords,
        category=category,
        description=description,
        dependencies=dependencies,
    )
    return descriptor, project


def select_build(builds: Sequence[Path], console: Optional[Console] = None) -> Path:
    """Choose one finished build to pack."""
    index = select_one("Project to build", [build.name for build in builds], console=console)
    return builds[index]
