# sitemapper/report/json_report.py

"""
JSON report generation for SiteMapper.

Serializes a SitemapReport into a file.
"""
from pathlib import Path

from sitemapper.aggregator import SitemapReport


def render_json(report: SitemapReport, output_path: Path | str) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: SitemapReport of a finished crawl
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from sitemapper.report.json_report import render_json
    report_path = render_json(report, 'reports/sitemap.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=True), encoding="utf-8")
    return output
