"""TaskPaper tag encoders, one per task attribute.

Each tag encoder returns "" or a fragment with a leading space so the
fragments can be concatenated in a fixed order.

Reference for OmniFocus' TaskPaper tags:
https://support.omnigroup.com/omnifocus-taskpaper-reference/
"""

from __future__ import annotations

from tick2paper.dates import format_date
from tick2paper.models import TaskRecord

# Bullet characters TickTick puts at the start of note/checklist lines.
NOTE_BULLETS = ("-", "▪")


def done_tag(task: TaskRecord, default_zone: str | None = None) -> str:
    # A completed task with an unusable date gets no tag rather than @done().
    completed_at = format_date(task.completed_time, task.timezone, default_zone)
    return f" @done({completed_at})" if task.completed and completed_at else ""


def defer_tag(task: TaskRecord, default_zone: str | None = None) -> str:
    """Creation time doubles as the defer date."""
    defer_at = format_date(task.created_time, task.timezone, default_zone)
    return f" @defer({defer_at})" if defer_at else ""


def due_tag(task: TaskRecord, default_zone: str | None = None) -> str:
    due_at = format_date(task.due_date, task.timezone, default_zone)
    return f" @due({due_at})" if due_at else ""


def flagged_tag(task: TaskRecord) -> str:
    return " @flagged" if task.priority > 0 else ""


def repeat_tag(task: TaskRecord) -> str:
    if task.repeat is None:
        return ""
    return f" @repeat-method(fixed) @repeat-rule({task.repeat})"


def tags_tag(task: TaskRecord) -> str:
    """TickTick tags plus a ``priority-N`` tag for prioritized tasks."""
    parts = [p for p in (task.tags, f"priority-{task.priority}" if task.priority > 0 else "") if p]
    return f" @tags({', '.join(parts)})" if parts else ""


def note_text(task: TaskRecord) -> str:
    if not task.content:
        return ""
    lines = []
    for line in task.content.split("\n"):
        for bullet in NOTE_BULLETS:
            line = line.removeprefix(bullet)
        lines.append(line)
    return "\n".join(lines)


def title_text(task: TaskRecord) -> str:
    return task.title.strip()


def project_name(task: TaskRecord) -> str:
    return task.project.strip()
