"""Sorting, grouping and rendering tasks as a TaskPaper outline.

Output shape, one bucket per project:

    <project>:

    <TAB>- Title  @defer(...) @due(...)  @flagged @tags(...)
    <TAB><TAB>note line

Buckets and the entries inside them are separated by blank lines.
"""

from __future__ import annotations

import logging
from textwrap import indent
from typing import Iterable

from tick2paper.encoder import (
    defer_tag,
    done_tag,
    due_tag,
    flagged_tag,
    note_text,
    project_name,
    repeat_tag,
    tags_tag,
    title_text,
)
from tick2paper.models import TaskRecord

log = logging.getLogger(__name__)

INDENT = "\t"


def sort_tasks(tasks: Iterable[TaskRecord]) -> list[TaskRecord]:
    """Order by project name, then creation time. Stable for ties."""
    return sorted(tasks, key=lambda t: (project_name(t), t.created_time))


def render_task(task: TaskRecord, default_zone: str | None = None) -> str:
    """One dash entry with its note, indented under the project line."""
    dates = f" {defer_tag(task, default_zone)}{due_tag(task, default_zone)}{done_tag(task, default_zone)}"
    meta = f" {flagged_tag(task)}{repeat_tag(task)}{tags_tag(task)}"
    note = indent(note_text(task), INDENT)
    entry = f"\n- {title_text(task)}{dates}{meta}\n{note}".strip()
    return indent(entry, INDENT)


def group_by_project(
    tasks: Iterable[TaskRecord], default_zone: str | None = None
) -> dict[str, list[str]]:
    """Bucket rendered tasks by project in first-encounter order.

    Each bucket starts with its project header line.
    """
    projects: dict[str, list[str]] = {}
    for task in tasks:
        name = project_name(task)
        if name not in projects:
            projects[name] = [f"\n{name}:"]
        projects[name].append(render_task(task, default_zone))
    return projects


def sort_and_group(
    tasks: Iterable[TaskRecord], default_zone: str | None = None
) -> dict[str, list[str]]:
    projects = group_by_project(sort_tasks(tasks), default_zone)
    log.debug("Grouped tasks into %d projects", len(projects))
    return projects


def render_outline(projects: dict[str, list[str]]) -> str:
    return "\n\n".join("\n\n".join(blocks) for blocks in projects.values())
