# === FILE: site_crawler/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for SiteCrawler.

Commands:
  crawl     Crawl a site and print/save the JSON report
  config    Show the configuration loaded with --config

Global options:
  --config PATH       Path to a YAML/JSON config
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only when omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

crawl options:
  BASE_URL            Start URL, overrides base_url from the config
  --user-agent UA     User-Agent header
  --timeout SEC       Per-request timeout
  --json PATH         Save the JSON report to a file
  --pretty            Indent the JSON output (2 spaces)
  --crawl-timeout SEC Timeout for the whole crawl

Also:
  --version, -v       Show the SiteCrawler version

Example:
  site_crawler crawl https://blog.boot.dev --json report.json --pretty
"""
import asyncio
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from site_crawler import __version__
from site_crawler.config import CrawlerConfig, load_config
from site_crawler.logger import init_logging
from site_crawler.report.json_report import render_json
from site_crawler.scanner import start_crawl

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _effective_config(
    cfg: Optional[CrawlerConfig],
    base_url: Optional[str],
    user_agent: Optional[str],
    timeout: Optional[float],
) -> CrawlerConfig:
    """Merge command-line overrides into the loaded config and re-validate."""
    data = cfg.model_dump(mode='json') if cfg is not None else {}
    overrides = {'base_url': base_url, 'user_agent': user_agent, 'timeout': timeout}
    data.update({k: v for k, v in overrides.items() if v is not None})
    if 'base_url' not in data:
        print_error('No base URL: pass BASE_URL or --config')
    try:
        return CrawlerConfig(**data)
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteCrawler, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Log format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SiteCrawler command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    cfg = None
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except (OSError, ValueError, TypeError) as e:
            print_error(f'Failed to load config: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('base_url', required=False)
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header')
@click.option('--timeout', 'timeout', type=float, default=None, help='Per-request timeout (seconds)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON report to a file'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent the JSON output (2 spaces)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Timeout for the whole crawl (seconds)'
)
@click.pass_context
def crawl(ctx, base_url, user_agent, timeout, json_output, pretty, crawl_timeout):
    """Crawl BASE_URL and report visit counts and page data."""
    cfg = _effective_config(ctx.obj['config'], base_url, user_agent, timeout)
    try:
        if crawl_timeout:
            report = asyncio.run(
                asyncio.wait_for(start_crawl(cfg), timeout=crawl_timeout)
            )
        else:
            report = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if not json_output:
        click.echo(report.json(pretty=pretty))
        return

    try:
        saved_json = render_json(report, json_output, pretty=pretty)
    except OSError as e:
        print_error(f'Failed to save JSON: {e}')
    click.echo(f'JSON report: {saved_json}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the loaded configuration as JSON."""
    cfg = ctx.obj['config']
    if cfg is None:
        print_error('No config loaded: pass --config PATH')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
