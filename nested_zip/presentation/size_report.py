"""Report generators for the size comparison."""
from __future__ import annotations

import csv
import io

from nested_zip.domain.results import ComparisonReport

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

# Tab padding from the console layout; the longest label gets a single tab.
_TABS = {
    "Total size of uncompressed files": "\t\t",
    "Directly compressed zip file size": "\t\t",
    "Non-compressed zip file size": "\t\t\t",
    "Compressed nested non-compressed zip file size": "\t",
}


def report_to_rows(report: ComparisonReport) -> list[dict[str, str]]:
    winners = report.winner_labels()
    rows: list[dict[str, str]] = []
    for measurement in report.iter_measurements():
        rows.append(
            {
                "label": measurement.label,
                "path": str(measurement.path),
                "bytes": str(measurement.size_bytes),
                "ratio": f"{report.ratio(measurement):.4f}",
                "smallest": "yes" if measurement.label in winners else "",
            }
        )
    return rows


def render_text(report: ComparisonReport, color: bool = False) -> str:
    winners = report.winner_labels()
    highlighted = {report.direct.label, report.compressed.label}
    lines = []
    for measurement in report.iter_measurements():
        padding = _TABS.get(measurement.label, "\t")
        line = f"{measurement.label}:{padding}{measurement.size_bytes:5} bytes."
        if color and measurement.label in highlighted:
            tint = GREEN if measurement.label in winners else RED
            line = f"{tint}{line}{RESET}"
        lines.append(line)
    lines.append(report.verdict.message)
    return "\n".join(lines)


def render_csv(report: ComparisonReport) -> bytes:
    rows = report_to_rows(report)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()))
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(report: ComparisonReport) -> str:
    rows = report_to_rows(report)
    header = "".join(f"<th>{col}</th>" for col in rows[0].keys())
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{value}</td>" for value in row.values()) + "</tr>")
    body_html = "".join(body_parts)
    return (
        f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"
        f"<p>{report.verdict.message}</p>"
    )
