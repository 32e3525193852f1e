"""Report Stage - Render classification records for human review.

Sinks:
- summarize: aggregate counts (ClassificationSummary)
- records_to_json: JSON array of records for structured dumps
- ConsoleReporter: indented console log of records, the inline object
  catalogue, and the summary table
"""

import json
from collections import Counter
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from chipscan.models import (
    ClassificationRecord,
    ClassificationSummary,
    ElementKind,
    InlineObjectTable,
)


def summarize(records: Iterable[ClassificationRecord]) -> ClassificationSummary:
    """Aggregate a record sequence into counts."""
    kind_counts: Counter = Counter()
    chip_count = 0
    unresolved_count = 0
    max_depth = 0
    total = 0

    for record in records:
        total += 1
        kind_counts[record.kind] += 1
        if record.is_chip:
            chip_count += 1
        if record.is_unresolved:
            unresolved_count += 1
        max_depth = max(max_depth, record.depth)

    return ClassificationSummary(
        total_records=total,
        kind_counts=dict(kind_counts),
        chip_count=chip_count,
        unresolved_count=unresolved_count,
        unknown_count=kind_counts[ElementKind.UNKNOWN],
        max_depth=max_depth,
    )


def records_to_json(
    records: Iterable[ClassificationRecord], indent: Optional[int] = 2
) -> str:
    """Serialize records as a JSON array."""
    return json.dumps(
        [record.model_dump(mode="json") for record in records],
        indent=indent,
        ensure_ascii=False,
    )


def _dump(value: Any, indent: int) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False, default=str)


class ConsoleReporter:
    """Writes records to a rich console, indented two spaces per depth level."""

    INDENT = "  "

    def __init__(self, console: Optional[Console] = None, json_indent: int = 2):
        self.console = console or Console()
        self.json_indent = json_indent

    def _line(self, depth: int, text: str) -> None:
        self.console.print(self.INDENT * depth + text, highlight=False)

    def _block(self, depth: int, label: str, value: Any) -> None:
        """Print a JSON dump with every line indented to ``depth``."""
        pad = self.INDENT * depth
        dumped = _dump(value, self.json_indent).replace("\n", "\n" + pad)
        self.console.print(f"{pad}{label}: {escape(dumped)}", highlight=False)

    def render_record(self, record: ClassificationRecord) -> None:
        """Render a single record."""
        depth = record.depth
        summary = record.payload_summary
        location = ".".join(str(i) for i in record.path)

        if record.kind == ElementKind.PARAGRAPH:
            text = summary.get("text", "")
            self._line(depth, f"[bold]Paragraph[/bold] [dim]{location}[/dim] {escape(text)}")

        elif record.kind == ElementKind.TABLE:
            self._line(depth, f"[bold cyan]Table[/bold cyan] [dim]{location}[/dim]")

        elif record.kind == ElementKind.TEXT_RUN:
            self._line(depth, f"Text: {escape(summary.get('text', ''))}")
            if "style" in summary:
                self._block(depth + 1, "Style", summary["style"])

        elif record.kind == ElementKind.RICH_LINK:
            self._line(depth, f"[bold green]RichLink detected[/bold green] [dim]{location}[/dim]")
            self._line(depth + 1, f"URL: {escape(summary.get('uri', ''))}")
            self._line(depth + 1, f"Title: {escape(summary.get('title', ''))}")
            if "mime_type" in summary:
                self._line(depth + 1, f"MIME type: {escape(summary['mime_type'])}")

        elif record.kind == ElementKind.INLINE_OBJECT_REF:
            self._line(
                depth, f"[bold green]InlineObject detected[/bold green] [dim]{location}[/dim]"
            )
            self._line(depth + 1, f"Object ID: {escape(summary.get('object_id', ''))}")
            definition = record.resolved_inline_object
            if definition is None:
                self._line(depth + 1, "[yellow]Unresolved: not in inline objects[/yellow]")
            else:
                self._line(depth + 1, f"Title: {escape(definition.title)}")
                self._line(depth + 1, f"Description: {escape(definition.description)}")
                self._block(depth + 1, "Referenced object", definition.embedded_payload)

        elif record.kind == ElementKind.PERSON_MENTION:
            line = f"[bold magenta]Person[/bold magenta]: {escape(summary.get('name', ''))}"
            if summary.get("email"):
                line += f" <{escape(summary['email'])}>"
            self._line(depth, line)

        else:
            tags = ", ".join(summary.get("tags", [])) or "(none)"
            self._line(
                depth,
                f"[bold red]Unknown[/bold red] [dim]{location}[/dim] types: {escape(tags)}",
            )
            self._block(depth + 1, "Raw", summary.get("raw", {}))

    def render_records(self, records: Iterable[ClassificationRecord]) -> list[ClassificationRecord]:
        """Render records as they arrive; returns them for summarizing."""
        rendered = []
        for record in records:
            self.render_record(record)
            rendered.append(record)
        return rendered

    def render_inline_objects(self, table: InlineObjectTable) -> None:
        """Render the inline object catalogue (dropdown candidates)."""
        self.console.print("[bold]Inline objects[/bold]")
        self._line(0, f"Total inline objects: {len(table)}")

        for object_id, definition in table.items():
            self.console.print()
            self._line(0, f"[bold]Object ID:[/bold] {escape(object_id)}")
            self._line(1, f"Title: {escape(definition.title)}")
            self._line(1, f"Description: {escape(definition.description)}")
            self._block(1, "Full object", definition.embedded_payload)

    def render_summary(self, summary: ClassificationSummary) -> None:
        """Render the summary as a table of counts."""
        table = RichTable(title="Classification summary")
        table.add_column("Kind")
        table.add_column("Count", justify="right")

        for kind in ElementKind:
            table.add_row(kind.value, str(summary.count(kind)))

        table.add_section()
        table.add_row("Chips", str(summary.chip_count))
        table.add_row("Unresolved references", str(summary.unresolved_count))
        table.add_row("Max depth", str(summary.max_depth))

        self.console.print(table)
