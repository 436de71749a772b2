"""Serialize assigned links as JSON, CSV, SQL or a Markdown report."""

import csv
import io
import json
from collections.abc import Sequence

from ...utils.render_template import render_template
from .AffiliateLink import AffiliateLink
from .LinkOccurrence import LinkOccurrence

REPORT_FORMATS = ("json", "csv", "sql", "markdown")

CSV_HEADERS = ["slug", "name", "url", "is_affiliate", "network"]

MARKDOWN_TEMPLATE = """\
# Link Report

Total links found: {{ total }}

## Links by File

{% for file, file_links in by_file %}
### {{ file }}

{% for link in file_links %}
- Line {{ link.line }}: [{{ link.display_text }}]({{ link.url }})\
{% if link.is_affiliate %} (affiliate){% endif %}{% if link.network_id %} [{{ link.network_id }}]{% endif %}

{% endfor %}

{% endfor %}
## Summary

- Total links: {{ total }}
- Affiliate links: {{ affiliate }}
- Regular links: {{ total - affiliate }}
- Files scanned: {{ by_file | length }}
"""


def render_report(
    report_format: str,
    links: Sequence[AffiliateLink],
    occurrences: Sequence[LinkOccurrence] = (),
    table_name: str = "affiliate_links",
) -> str:
    """Render a report.

    Args:
        report_format: One of json, csv, sql, markdown
        links: Assigned records (json, csv, sql)
        occurrences: Raw occurrences (markdown)
        table_name: Target table for the SQL upsert

    Raises:
        ValueError: If the format is unknown
    """
    if report_format == "json":
        return json.dumps([link.to_record() for link in links], indent=2, ensure_ascii=False)
    if report_format == "csv":
        return _to_csv(links)
    if report_format == "sql":
        return _to_sql(links, table_name)
    if report_format == "markdown":
        return _to_markdown(occurrences)
    raise ValueError(f"Unknown format: {report_format} (supported: {', '.join(REPORT_FORMATS)})")


def _to_csv(links: Sequence[AffiliateLink]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for link in links:
        writer.writerow(
            [
                link.slug,
                link.display_name,
                link.canonical_url,
                "true" if link.is_affiliate else "false",
                link.network_id or "",
            ]
        )
    return buffer.getvalue().rstrip("\n")


def _sql_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _to_sql(links: Sequence[AffiliateLink], table_name: str) -> str:
    if not links:
        return "-- No links to insert"

    values = ",\n".join(
        f"  ({_sql_quote(link.slug)}, {_sql_quote(link.display_name)}, {_sql_quote(link.canonical_url)}, "
        f"{'true' if link.is_affiliate else 'false'}, "
        f"{_sql_quote(link.network_id) if link.network_id else 'NULL'})"
        for link in links
    )
    return (
        f"INSERT INTO {table_name} (slug, name, url, is_affiliate, network)\n"
        f"VALUES\n{values}\n"
        "ON CONFLICT (slug) DO UPDATE SET\n"
        "  name = EXCLUDED.name,\n"
        "  url = EXCLUDED.url,\n"
        "  is_affiliate = EXCLUDED.is_affiliate,\n"
        "  network = EXCLUDED.network;"
    )


def _short_path(path: str) -> str:
    return "/".join(path.replace("\\", "/").split("/")[-3:])


def _to_markdown(occurrences: Sequence[LinkOccurrence]) -> str:
    by_file: dict[str, list[LinkOccurrence]] = {}
    for occurrence in occurrences:
        by_file.setdefault(occurrence.source_file, []).append(occurrence)

    return render_template(
        MARKDOWN_TEMPLATE,
        {
            "total": len(occurrences),
            "affiliate": sum(1 for o in occurrences if o.is_affiliate),
            "by_file": [(_short_path(file), file_links) for file, file_links in by_file.items()],
        },
    ).rstrip("\n")
