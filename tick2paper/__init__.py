"""tick2paper core library — TickTick backup to TaskPaper conversion.

Public API re-exports for convenient imports:
    from tick2paper import convert_file, format_date, TaskRecord, ...
"""

# Models
from tick2paper.models import (
    FIELD_NAMES,
    TaskRecord,
    clean_optional,
    clean_string,
    normalize,
)

# Dates
from tick2paper.dates import (
    format_date,
    parse_instant,
    resolve_zone,
)

# Encoders
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

# Header detection
from tick2paper.header import (
    HeaderMatch,
    camel_case,
    data_rows,
    find_header,
    is_header_row,
)

# Outline
from tick2paper.outline import (
    group_by_project,
    render_outline,
    render_task,
    sort_and_group,
    sort_tasks,
)

# Pipeline
from tick2paper.pipeline import (
    ConversionResult,
    convert_file,
    convert_rows,
    convert_text,
    run,
)

# I/O collaborators
from tick2paper.rows import parse_rows
from tick2paper.sinks import clipboard_sink, file_sink, stdout_sink

# Config & errors
from tick2paper.config import Settings, config_path, load_settings
from tick2paper.errors import (
    ExtensionError,
    FormatError,
    PathError,
    SinkError,
    Tick2PaperError,
)
