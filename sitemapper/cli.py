# === FILE: sitemapper/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point of SiteMapper.

Usage:
  sitemapper DOMAIN [options]

DOMAIN is the bare host name (no scheme, no path); pages are fetched over
https unless --scheme says otherwise.

Options:
  --config PATH         YAML/JSON file with crawl settings
  --concurrency N       Number of pages fetched at the same time
  --timeout SEC         Timeout of one request
  --retries N           Retries on 5xx/429 and network errors
  --frontier fifo|lifo  Breadth-first (default) or depth-first order
  --fail-fast           Abort on the first page that cannot be fetched
  --crawl-timeout SEC   Abort the whole crawl after SEC seconds
  --scheme https|http   Scheme of every request
  --json PATH           Also save the sitemap as JSON
  --html PATH           Also save the sitemap as HTML
  --log-level LEVEL     Logging level (DEBUG, INFO, ...)
  --log-file PATH       Log file (stderr only if not given)
  --version, -v         Show the SiteMapper version

Exit codes: 0 success, 1 crawl aborted or report not written,
2 invalid arguments or configuration, 130 interrupted.

Example:
  sitemapper example.com --concurrency 16 --json sitemap.json
"""
import asyncio
import sys
from pathlib import Path
from typing import NoReturn

import click

from sitemapper import __version__
from sitemapper.aggregator import aggregate_results
from sitemapper.config import load_config
from sitemapper.engine import start_crawl
from sitemapper.errors import CrawlAborted
from sitemapper.logger import init_logging
from sitemapper.report import render_html, render_json
from sitemapper.sitemap import render_sitemap

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

EXIT_ABORTED = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130


def print_error(message: str, code: int = EXIT_ABORTED) -> NoReturn:
    click.secho(message, fg='red', err=True)
    sys.exit(code)


class ProgressLine:
    """Rewrites a single 'Fetching: <path>' line in place."""

    def __init__(self) -> None:
        self.width = 0

    def __call__(self, path: str) -> None:
        line = f"Fetching: {path}"
        self.width = max(self.width, len(line))
        click.echo("\r" + line.ljust(self.width), nl=False)

    def finish(self) -> None:
        if self.width:
            click.echo()


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteMapper, version %(version)s')
@click.argument('domain')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON file with crawl settings.'
)
@click.option('--concurrency', type=click.IntRange(min=1), default=None, help='Pages fetched at the same time.')
@click.option('--timeout', type=float, default=None, help='Timeout of one request (seconds).')
@click.option('--retries', 'retry_times', type=click.IntRange(min=0), default=None, help='Retries per page.')
@click.option('--frontier', type=click.Choice(['fifo', 'lifo']), default=None, help='Traversal order.')
@click.option('--fail-fast', is_flag=True, help='Abort on the first page that cannot be fetched.')
@click.option('--crawl-timeout', type=float, default=None, help='Timeout of the whole crawl (seconds).')
@click.option('--scheme', type=click.Choice(['https', 'http']), default=None, help='Request scheme.')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Save the sitemap as JSON.'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Save the sitemap as HTML.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Log file (stderr only if not given)'
)
def cli(domain, config_path, concurrency, timeout, retry_times, frontier, fail_fast,
        crawl_timeout, scheme, json_output, html_output, log_level, log_file):
    """Crawl DOMAIN and print its sitemap."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    try:
        cfg = load_config(
            config_path,
            domain=domain,
            scheme=scheme,
            concurrency=concurrency,
            timeout=timeout,
            retry_times=retry_times,
            frontier=frontier,
            fail_fast=True if fail_fast else None,
            crawl_timeout=crawl_timeout,
        )
    except (ValueError, TypeError, OSError) as e:
        print_error(f'Invalid configuration: {e}', EXIT_CONFIG)

    progress = ProgressLine()
    try:
        result = asyncio.run(start_crawl(cfg, on_fetch=progress))
    except CrawlAborted as e:
        progress.finish()
        print_error(f'Crawl aborted: {e}')
    except KeyboardInterrupt:
        progress.finish()
        print_error('Crawl interrupted', EXIT_INTERRUPTED)
    progress.finish()

    click.echo('Fetching Completed\n')
    click.echo(f'{cfg.domain} sitemap')
    click.echo(render_sitemap(result.root))

    for path, error in result.failures.items():
        click.secho(f'Could not fetch {path}: {error}', fg='yellow', err=True)

    if json_output or html_output:
        report = aggregate_results(cfg.domain, result)
        if json_output:
            try:
                click.echo(f'JSON report: {render_json(report, json_output)}', err=True)
            except OSError as e:
                print_error(f'Could not save JSON report: {e}')
        if html_output:
            try:
                click.echo(f'HTML report: {render_html(report, html_output)}', err=True)
            except OSError as e:
                print_error(f'Could not save HTML report: {e}')


if __name__ == "__main__":
    cli()
