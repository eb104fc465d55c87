"""wikipull CLI: entry-point for crawling a wiki from the shell.

Usage:
    python cli/main.py --help

Commands:
    count    → total article count from the site statistics
    list     → article stubs from the paginated listing
    search   → keyword search (stubs, or full articles with --full)
    article  → download and clean a single article
    export   → stream enriched articles into one text file each
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from wikipull.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from cli.rendering import render_article, render_stub, safe_filename
from wikipull.config import settings
from wikipull.errors import WikiPullError
from wikipull.scraper.models import Article
from wikipull.wiki import WikiaPull

app = typer.Typer(
    name="wikipull",
    help="Crawl Fandom-style wikis into plain-text articles.",
    no_args_is_help=True,
)


def _fail(command: str, exc: Exception) -> None:
    typer.echo(f"[{command}] Error: {exc}", err=True)
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Statistics / listing
# ---------------------------------------------------------------------------
@app.command("count")
def count(
    fandom: str = typer.Argument(..., help="Wiki short-name, e.g. 'starwars'."),
) -> None:
    """Print the wiki's own total article count."""
    wiki = WikiaPull(fandom)
    try:
        total = wiki.article_count()
    except WikiPullError as exc:
        _fail("count", exc)
    typer.echo(f"[count] {wiki.wiki_url} reports {total} articles.")


@app.command("list")
def list_articles(
    fandom: str = typer.Argument(..., help="Wiki short-name, e.g. 'starwars'."),
    max_items: Optional[int] = typer.Option(None, "--max", min=0, help="Stop after N stubs."),
    as_json: bool = typer.Option(False, "--json", help="Print stubs as JSON lines."),
) -> None:
    """List article stubs without downloading any article page."""
    wiki = WikiaPull(fandom)
    try:
        stubs = wiki.list_stubs(max_items)
    except WikiPullError as exc:
        _fail("list", exc)

    if not stubs:
        typer.echo("[list] No articles found.")
        return
    for stub in stubs:
        typer.echo(json.dumps(stub.to_dict()) if as_json else render_stub(stub))
    if not as_json:
        typer.echo(f"[list] {len(stubs)} stub(s).")


# ---------------------------------------------------------------------------
# Search / single article
# ---------------------------------------------------------------------------
@app.command("search")
def search(
    fandom: str = typer.Argument(..., help="Wiki short-name, e.g. 'starwars'."),
    query: str = typer.Argument(..., help="Search query."),
    limit: int = typer.Option(
        settings.search_result_limit, "--limit", min=1, help="Search results to inspect."
    ),
    full: bool = typer.Option(False, "--full", help="Download and clean every result."),
) -> None:
    """Search the wiki and print the matching articles."""
    wiki = WikiaPull(fandom, limit=limit)
    typer.echo(f"[search] Searching {wiki.wiki_url} for {query!r} …")
    try:
        if full:
            articles = wiki.search_articles(query)
        else:
            stubs = wiki.search_results(query)
    except WikiPullError as exc:
        _fail("search", exc)

    if full:
        for article in articles:
            typer.echo(render_article(article))
            typer.echo("")
        return
    for stub in stubs:
        typer.echo(render_stub(stub))


@app.command("article")
def article(
    fandom: str = typer.Argument(..., help="Wiki short-name, e.g. 'starwars'."),
    url: str = typer.Option(..., help="Article URL."),
    title: str = typer.Option("", help="Article title."),
    page_id: str = typer.Option("", "--id", help="Article page id."),
) -> None:
    """Download one article and print its cleaned text."""
    wiki = WikiaPull(fandom)
    try:
        enriched = wiki.get_article(Article(id=page_id, title=title, url=url))
    except WikiPullError as exc:
        _fail("article", exc)
    typer.echo(render_article(enriched))


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
@app.command("export")
def export(
    fandom: str = typer.Argument(..., help="Wiki short-name, e.g. 'starwars'."),
    max_items: int = typer.Option(
        settings.export_max_items, "--max", min=0, help="Stop after N articles."
    ),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory."),
) -> None:
    """Stream enriched articles into one ``<title>.txt`` file each."""
    if out is None:
        settings.ensure_export_dir()
        out_dir = settings.export_dir
    else:
        out.mkdir(parents=True, exist_ok=True)
        out_dir = out

    wiki = WikiaPull(fandom)
    typer.echo(
        f"[export] Streaming up to {max_items} articles from {wiki.wiki_url} to {out_dir}/ …"
    )

    written = 0
    errors: list[str] = []
    try:
        for item in wiki.stream(max_items):
            filename = f"{safe_filename(item.title)}.txt"
            try:
                (out_dir / filename).write_text(render_article(item), encoding="utf-8")
            except OSError as exc:
                message = f"Failed to write {item.title}: {exc}"
                errors.append(message)
                typer.echo(f"[export] ✗ {message}", err=True)
                continue
            written += 1
            typer.echo(f"[export] ✓ {written}: {item.title} -> {filename}")
    except WikiPullError as exc:
        typer.echo(f"[export] Stopped after {written} file(s).", err=True)
        _fail("export", exc)

    typer.echo("")
    typer.echo("[export] Summary:")
    typer.echo(f"  - Successfully wrote: {written} files")
    typer.echo(f"  - Errors: {len(errors)}")
    for message in errors:
        typer.echo(f"  - {message}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
