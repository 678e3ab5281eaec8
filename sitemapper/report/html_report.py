# File: sitemapper/report/html_report.py
"""sitemapper.report.html_report: HTML sitemap rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, PackageLoader, select_autoescape

from sitemapper.aggregator import SitemapReport

TEMPLATE_NAME = "sitemap.html.j2"


def render_html(report: SitemapReport, output_path: Union[Path, str]) -> Path:
    """Render the packaged sitemap template for *report* and save it.

    Args:
        report: SitemapReport of a finished crawl.
        output_path: path of the resulting HTML file.

    Returns:
        Path of the saved HTML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=PackageLoader("sitemapper", "templates"),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "domain": report.domain,
        "tree": report.tree(),
        "page_count": len(report.pages),
        "failures": report.failures,
        "duration": report.duration,
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
