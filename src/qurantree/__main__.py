"""CLI entry point for qurantree."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from qurantree import __version__
from qurantree.config import SOURCE_INFO, Settings
from qurantree.corpus.loader import LoadFailure, load_translations
from qurantree.corpus.models import Location, parse_location
from qurantree.engine.search import PRIMARY, MatchMode, MatchRecord, SearchOptions
from qurantree.library import Library

console = Console()


def _load_library(settings: Settings) -> Library:
    """Load the corpus or exit with a hint about `qurantree init`."""
    try:
        return Library.load(settings)
    except LoadFailure as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print("[dim]Have you run 'qurantree init' to install the demo data?[/dim]")
        sys.exit(1)


def _parse_location(value: str) -> Location:
    try:
        return parse_location(value)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def _highlight(record: MatchRecord) -> str:
    """Verse text with matched tokens marked up for the console."""
    if not record.matching_tokens:
        return escape(record.text)
    matched = {token.number for token in record.matching_tokens}
    words = []
    for number, word in enumerate(record.text.split(), start=1):
        if number in matched:
            words.append(f"[bold yellow]{escape(word)}[/bold yellow]")
        else:
            words.append(escape(word))
    return " ".join(words)


def _record_to_dict(record: MatchRecord) -> dict:
    result = {
        "location": str(record.location),
        "chapter": record.chapter_number,
        "chapter_name": record.chapter_name,
        "verse": record.verse_number,
        "text": record.text,
    }
    if record.translation_key:
        result["translation"] = record.translation_key
        result["arabic"] = record.primary_text
    else:
        result["matching_tokens"] = [
            {"text": t.text, "number": t.number} for t in record.matching_tokens
        ]
    return result


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Data directory (default: $QURANTREE_DATA_DIR or ~/.qurantree/data)",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None):
    """qurantree - Quran text, translations and search."""
    ctx.obj = Settings(data_dir=data_dir) if data_dir else Settings()


@cli.command()
@click.option("--force", is_flag=True, help="Overwrite an existing corpus file")
@click.pass_obj
def init(settings: Settings, force: bool):
    """Install the demo corpus (Al-Fatihah with two translations)."""
    from qurantree.corpus.demo_data import write_demo_data

    if settings.corpus_file.exists() and not force:
        console.print(f"[yellow]Corpus already present at {settings.corpus_file}[/yellow]")
        console.print("[dim]Use --force to overwrite it with the demo data[/dim]")
        return

    console.print("[bold blue]Installing demo data...[/bold blue]")
    written = write_demo_data(settings.corpus_file, settings.translations_dir)
    for path in written:
        console.print(f"[green]✓ {escape(str(path))}[/green]")


@cli.command()
@click.option("--host", default=None, help="Bind host (default: 127.0.0.1)")
@click.option("--port", default=None, type=int, help="Bind port (default: 8000)")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None):
    """Start the API server."""
    from qurantree.api.main import run_server

    host = host or settings.host
    port = port or settings.port
    console.print(f"[bold blue]Starting qurantree API at http://{host}:{port}[/bold blue]")
    try:
        run_server(host=host, port=port, settings=settings)
    except LoadFailure as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
@click.pass_obj
def info(settings: Settings):
    """Show corpus information."""
    library = _load_library(settings)
    document = library.document
    keys = sorted(library.translations.list_keys())

    console.print(
        Panel(
            f"[bold]{escape(document.name)}[/bold]\n"
            f"Chapters: {document.chapter_count}\n"
            f"Verses: {document.verse_count}\n"
            f"Tokens: {document.token_count}\n"
            f"Translations: {', '.join(keys) or 'none'}",
            title=f"qurantree {__version__}",
        )
    )
    console.print(f"[dim]{SOURCE_INFO['attribution']} ({SOURCE_INFO['license']})[/dim]")


@cli.command()
@click.pass_obj
def stats(settings: Settings):
    """Show corpus statistics."""
    library = _load_library(settings)
    corpus_stats = library.document.stats

    table = Table(title="Corpus Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Chapters", str(corpus_stats.chapter_count))
    table.add_row("Verses", str(corpus_stats.verse_count))
    table.add_row("Tokens", str(corpus_stats.token_count))
    table.add_row("Average verses per chapter", str(corpus_stats.average_verses_per_chapter))
    table.add_row("Average tokens per verse", str(corpus_stats.average_tokens_per_verse))
    for label, summary in (
        ("Longest chapter", corpus_stats.longest_chapter),
        ("Shortest chapter", corpus_stats.shortest_chapter),
    ):
        if summary is not None:
            table.add_row(
                label,
                f"{summary.number} {escape(summary.name)} ({summary.verse_count} verses)",
            )
    console.print(table)


@cli.command()
@click.argument("number", type=int)
@click.pass_obj
def chapter(settings: Settings, number: int):
    """Print a chapter.

    Example: qurantree chapter 1
    """
    library = _load_library(settings)
    found = library.document.get_chapter(number)
    if found is None:
        console.print(f"[yellow]Chapter not found: {number}[/yellow]")
        sys.exit(1)

    console.print(
        Panel(
            "\n".join(f"{v.number}. {escape(v.text)}" for v in found.verses),
            title=f"{found.number} {escape(found.name)} ({found.verse_count} verses)",
        )
    )


@cli.command()
@click.argument("location")
@click.option("--tokens", is_flag=True, help="List the verse's tokens")
@click.pass_obj
def verse(settings: Settings, location: str, tokens: bool):
    """Print a verse.

    Example: qurantree verse 1:1
    """
    loc = _parse_location(location)
    library = _load_library(settings)
    found = library.document.get_verse(loc.chapter, loc.verse)
    if found is None:
        console.print(f"[yellow]Verse not found: {loc.verse_location}[/yellow]")
        sys.exit(1)

    console.print(Panel(escape(found.text), title=str(found.location)))
    if tokens:
        table = Table(title="Tokens")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Location")
        table.add_column("Text")
        for token in found.tokens():
            table.add_row(str(token.number), str(token.location), escape(token.text))
        console.print(table)


@cli.command()
@click.argument("terms", nargs=-1, required=True)
@click.option("--exact", is_flag=True, help="Match whole words instead of substrings")
@click.option("--normalize", "-n", is_flag=True, help="Fold Arabic variants and diacritics")
@click.option("--case-sensitive", is_flag=True, help="Match case")
@click.option("--translation", "-t", default=None, help="Search a translation by key")
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=20,
    show_default=True,
    help="Results to show",
)
@click.option("--output", "-o", type=click.Path(), help="Output JSON to file")
@click.pass_obj
def search(
    settings: Settings,
    terms: tuple[str, ...],
    exact: bool,
    normalize: bool,
    case_sensitive: bool,
    translation: str | None,
    limit: int,
    output: str | None,
):
    """Search the Arabic text or a translation.

    Several terms are searched together; each verse is listed once.

    Example: qurantree search الرحمن --normalize
    """
    library = _load_library(settings)

    if translation and translation not in library.translations:
        console.print(f"[red]Unknown translation: {translation}[/red]")
        available = sorted(library.translations.list_keys())
        console.print(f"[dim]Available: {', '.join(available) or 'none'}[/dim]")
        sys.exit(1)

    options = SearchOptions(
        match_mode=MatchMode.EXACT if exact else MatchMode.SUBSTRING,
        normalize=normalize,
        case_sensitive=case_sensitive,
        target=translation or PRIMARY,
    )
    records = library.search(list(terms), options)

    if output:
        result = {
            "query": list(terms),
            "type": options.match_mode.value,
            "translation": translation,
            "total": len(records),
            "results": [_record_to_dict(r) for r in records],
        }
        Path(output).write_text(json.dumps(result, indent=2, ensure_ascii=False), encoding="utf-8")
        console.print(f"[green]✓ {len(records)} results written to {output}[/green]")
        return

    if not records:
        console.print("[yellow]No matches[/yellow]")
        return

    table = Table(title=f"{len(records)} matches")
    table.add_column("Location", style="cyan")
    table.add_column("Chapter")
    table.add_column("Text")
    for record in records[:limit]:
        table.add_row(str(record.location), escape(record.chapter_name), _highlight(record))
    console.print(table)
    if len(records) > limit:
        console.print(f"[dim]Showing {limit} of {len(records)} (use --limit or --output)[/dim]")


@cli.command()
@click.argument("location")
@click.pass_obj
def compare(settings: Settings, location: str):
    """Show a verse with every loaded translation.

    Example: qurantree compare 1:1
    """
    loc = _parse_location(location)
    library = _load_library(settings)
    comparison = library.compare(loc.chapter, loc.verse)
    if comparison is None:
        console.print(f"[yellow]Verse not found: {loc.verse_location}[/yellow]")
        sys.exit(1)

    console.print(Panel(escape(comparison.primary), title=str(loc.verse_location)))
    if not comparison.translations:
        console.print("[dim]No translation has this verse[/dim]")
        return
    for key, compared in comparison.translations.items():
        console.print(f"\n[bold cyan]{key}[/bold cyan] [dim]({escape(compared.translator)})[/dim]")
        console.print(f"  {escape(compared.text)}")


@cli.group()
def translations():
    """Manage translations."""
    pass


@translations.command("list")
@click.pass_obj
def translations_list(settings: Settings):
    """List installed and downloadable translations."""
    from qurantree.ingest.catalog import TranslationCatalog

    try:
        installed = {t.key: t for t in load_translations(settings.translations_dir)}
    except LoadFailure as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    catalog = TranslationCatalog.load()

    table = Table(title="Translations")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Language", style="yellow")
    table.add_column("Status")

    for key in sorted(set(installed) | set(catalog.keys())):
        entry = installed.get(key) or catalog.get(key)
        status = (
            f"[green]✓ Installed ({installed[key].verse_count} verses)[/green]"
            if key in installed
            else "[dim]Not installed[/dim]"
        )
        table.add_row(key, escape(entry.name), entry.language, status)

    console.print(table)
    console.print("\n[dim]Use 'qurantree translations fetch KEY' to download[/dim]")


@translations.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("key")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["xml", "txt"]),
    default=None,
    help="Input format (default: from the file suffix)",
)
@click.pass_obj
def translations_import(settings: Settings, file: Path, key: str, fmt: str | None):
    """Import a Tanzil translation file (XML or pipe-delimited text).

    Example: qurantree translations import en.sahih.xml en.sahih
    """
    from qurantree.ingest.catalog import TranslationCatalog
    from qurantree.ingest.tanzil import parse_translation_file, save_translation

    entry = TranslationCatalog.load().get(key)
    try:
        data = parse_translation_file(file, key, fmt, entry.info() if entry else None)
        path = save_translation(data, key, settings.translations_dir)
    except LoadFailure as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    verse_count = sum(len(ch["verses"]) for ch in data["chapters"])
    console.print(f"[green]✓ Imported {key}: {verse_count} verses -> {path}[/green]")


@translations.command("fetch")
@click.argument("key")
@click.pass_obj
def translations_fetch(settings: Settings, key: str):
    """Download a translation listed in the catalog.

    Example: qurantree translations fetch en.sahih
    """
    from qurantree.ingest.tanzil import FetchError, fetch_translation, save_translation

    console.print(f"[bold blue]Fetching {key}...[/bold blue]")
    try:
        data = fetch_translation(key)
        path = save_translation(data, key, settings.translations_dir)
    except (FetchError, LoadFailure) as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[green]✓ {key} saved to {path}[/green]")


if __name__ == "__main__":
    cli()
