"""Main CLI interface for the knowledge base."""

import sys
import json
import time
from pathlib import Path
from typing import List

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from trace_kb.application.engine import KnowledgeBase
from trace_kb.application.config import Config
from trace_kb.domain.errors import KnowledgeBaseError
from trace_kb.domain.models import ContentKind, Page, SearchResult

console = Console()


def _print_results(results: List[SearchResult], title: str, output_format: str):
    """Render search results in the requested format."""
    if output_format == 'json':
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
        return

    if not results:
        console.print("[yellow]No matching content found.[/yellow]")
        return

    if output_format == 'plain':
        for i, result in enumerate(results, 1):
            console.print(f"{i}. [{result.score}] {result.title} - {result.url}")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="magenta")
    table.add_column("URL", style="blue")
    table.add_column("Score", style="yellow")

    for result in results:
        table.add_row(str(result.id), result.title, result.url, str(result.score))

    console.print(table)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--storage-path', '-s', type=click.Path(), help='Path to storage directory')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, config, storage_path, verbose):
    """Trace knowledge base - search your captured pages."""
    ctx.ensure_object(dict)

    # Load configuration
    if config:
        config_obj = Config.load_from_file(Path(config))
    else:
        config_obj = Config()

    if storage_path:
        config_obj.storage_path = Path(storage_path)
        config_obj.storage.db_path = config_obj.storage_path / "trace.db"

    if verbose:
        config_obj.log_level = "DEBUG"

    ctx.obj['config'] = config_obj
    ctx.obj['kb'] = KnowledgeBase(config_obj)


@cli.command()
@click.argument('query')
@click.option('--limit', '-l', type=int, help='Number of results to return')
@click.option('--format', 'output_format', default='rich',
              type=click.Choice(['rich', 'plain', 'json']))
@click.pass_context
def search(ctx, query, limit, output_format):
    """Search captured pages."""
    kb = ctx.obj['kb']

    try:
        results = kb.search(query, limit=limit)
    except KnowledgeBaseError as e:
        console.print(f"[red]Error during search: {e}[/red]")
        sys.exit(1)

    _print_results(results, f"Results for: {query}", output_format)


@cli.command()
@click.argument('content_id', type=int)
@click.option('--kind', default='page', type=click.Choice([k.value for k in ContentKind]))
@click.option('--limit', '-l', type=int, help='Number of results to return')
@click.option('--format', 'output_format', default='rich',
              type=click.Choice(['rich', 'plain', 'json']))
@click.pass_context
def related(ctx, content_id, kind, limit, output_format):
    """Show content related to a stored record."""
    kb = ctx.obj['kb']

    try:
        results = kb.related(content_id, kind, limit=limit)
    except KnowledgeBaseError as e:
        console.print(f"[red]Error finding related content: {e}[/red]")
        sys.exit(1)

    _print_results(results, f"Related to {kind} {content_id}", output_format)


@cli.command()
@click.option('--title', required=True, help='Page title')
@click.option('--url', required=True, help='Page URL')
@click.option('--content', default='', help='Page text')
@click.option('--summary', help='Short summary')
@click.option('--tag', 'tags', multiple=True, help='Tag (repeatable)')
@click.pass_context
def add_page(ctx, title, url, content, summary, tags):
    """Store a page in the knowledge base."""
    kb = ctx.obj['kb']

    page = Page(
        title=title,
        url=url,
        content=content,
        summary=summary,
        timestamp=int(time.time() * 1000),
        tags=list(tags)
    )

    try:
        stored = kb.add_record(page)
    except KnowledgeBaseError as e:
        console.print(f"[red]Error storing page: {e}[/red]")
        sys.exit(1)

    console.print(f"[green]Stored page {stored.id}: {stored.title}[/green]")


@cli.command()
@click.pass_context
def stats(ctx):
    """Show knowledge base statistics."""
    kb = ctx.obj['kb']

    try:
        stats = kb.get_statistics()
    except KnowledgeBaseError as e:
        console.print(f"[red]Error getting statistics: {e}[/red]")
        sys.exit(1)

    table = Table(title="Knowledge Base Statistics")
    table.add_column("Component", style="cyan")
    table.add_column("Metric", style="magenta")
    table.add_column("Value", style="yellow")

    for key, value in stats['store'].items():
        table.add_row("Store", key, str(value))

    for key, value in stats['search'].items():
        table.add_row("Search", key, str(value))

    console.print(table)


@cli.command()
@click.pass_context
def config_show(ctx):
    """Show current configuration."""
    config = ctx.obj['config']

    config_json = json.dumps(config.model_dump(mode='json'), indent=2)

    panel = Panel(
        config_json,
        title="Current Configuration",
        border_style="green"
    )
    console.print(panel)


@cli.command()
@click.option('--output', '-o', required=True, help='Output file path')
@click.pass_context
def config_save(ctx, output):
    """Save current configuration to file."""
    config = ctx.obj['config']
    output_path = Path(output)

    try:
        config.save_to_file(output_path)
        console.print(f"[green]Configuration saved to {output_path}[/green]")
    except ValueError as e:
        console.print(f"[red]Error saving configuration: {e}[/red]")
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
