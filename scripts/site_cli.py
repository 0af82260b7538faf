#!/usr/bin/env python3
"""
Blog Site CLI

Loads posts from a site directory and builds the tag index page.

Commands:
    posts      - List published posts with dates and tags
    tags       - Show each tag and its post count
    build-tags - Render the tag index page into the output directory
    check      - Validate front matter of every post

Examples:\n

    site_cli.py posts --site blog/                     # List posts

    site_cli.py tags                                   # Tag counts for INKWELL_SITE_ROOT

    site_cli.py build-tags --format markdown           # Write tags page as markdown

    site_cli.py check --site blog/                     # Exit 1 if any post is broken
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from inkwell.contexts.content import FrontMatterError, PostDateError, load_posts
from inkwell.contexts.indexing import build_tag_index
from inkwell.contexts.rendering import TemplateRenderError, write_tag_page
from inkwell.contexts.rendering.logger import setup_rendering_logger
from inkwell.utils.config import LOGS_PATH, ConfigError, SiteConfig, load_site_config
from inkwell.utils.logger import setup_console_logger
from inkwell.utils.timestamp import format_display_date, now

load_dotenv()


class OutputFormat(str, Enum):
    html = "html"
    markdown = "markdown"


SiteOption = Annotated[
    Optional[Path],
    typer.Option(
        "--site",
        "-s",
        help="Site root containing _config.yml (default: INKWELL_SITE_ROOT or .)",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug log output"),
]


app = typer.Typer(
    help="Inspect blog posts and build the tag index page",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_config(site: Optional[Path]) -> SiteConfig:
    try:
        return load_site_config(site)
    except ConfigError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _load(config: SiteConfig, strict: bool = False):
    try:
        return load_posts(config.posts_path, config, strict=strict)
    except (FileNotFoundError, FrontMatterError, PostDateError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("posts")
def posts_command(site: SiteOption = None, verbose: VerboseOption = False):
    """
    List published posts, newest first.

    Examples:\n

        $ site_cli.py posts --site blog/
    """
    setup_console_logger("DEBUG" if verbose else "WARNING")
    config = _load_config(site)
    result = _load(config)

    typer.secho(f"\n{len(result.posts)} posts in {config.posts_path}", fg=typer.colors.BLUE, bold=True)
    for post in result.posts:
        date_text = format_display_date(post.date, config.date_format)
        flags = " [mermaid]" if post.mermaid else ""
        typer.echo(f"  {date_text}  {post.title}{flags}")
        if post.tags:
            typer.echo(f"      tags: {', '.join(post.tags)}")
        typer.echo(f"      url:  {post.url}")
    typer.echo("")


@app.command("tags")
def tags_command(site: SiteOption = None, verbose: VerboseOption = False):
    """
    Show every tag with its number of posts.

    Examples:\n

        $ site_cli.py tags --site blog/
    """
    setup_console_logger("DEBUG" if verbose else "WARNING")
    config = _load_config(site)
    result = _load(config)
    index = build_tag_index(result.posts)

    typer.secho(f"\n{len(index)} tags", fg=typer.colors.BLUE, bold=True)
    for group in index:
        typer.echo(f"  {group.name} ({len(group)})  #{group.anchor_id}")
    typer.echo("")


@app.command("build-tags")
def build_tags_command(
    site: SiteOption = None,
    verbose: VerboseOption = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.html,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file (default: <output_dir>/<tags_page>)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on the first invalid post instead of skipping it"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the session log (default: INKWELL_LOGS_PATH)"),
    ] = None,
):
    """
    Render the tag index page.

    Groups published posts by tag, sorts tags alphabetically and each tag's
    posts newest first, then writes the page.

    Examples:\n

        $ site_cli.py build-tags --site blog/

        $ site_cli.py build-tags --format markdown -o TAGS.md
    """
    config = _load_config(site)

    if log_dir is None:
        log_dir = LOGS_PATH / f"build_tags_{now()}"
    log_file = setup_rendering_logger(
        log_dir, config.site_root, output_format.value, "DEBUG" if verbose else "INFO"
    )

    result = _load(config, strict=strict)
    index = build_tag_index(result.posts)

    try:
        output_path = write_tag_page(index, config, output, output_format.value)
    except TemplateRenderError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    typer.secho("✓ Tag page written", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Tags: {len(index)}")
    typer.echo(f"  Posts: {index.post_count}")
    if result.errors:
        typer.secho(f"  Skipped {len(result.errors)} invalid posts", fg=typer.colors.YELLOW)
    typer.echo(f"  Output: {output_path}")
    typer.echo(f"  Log: {log_file}")
    typer.echo("")


@app.command("check")
def check_command(site: SiteOption = None, verbose: VerboseOption = False):
    """
    Validate every post's front matter.

    Exits with code 1 if any post cannot be loaded.

    Examples:\n

        $ site_cli.py check --site blog/
    """
    setup_console_logger("DEBUG" if verbose else "WARNING")
    config = _load_config(site)
    result = _load(config)

    if result.success:
        typer.secho(
            f"\n✓ {len(result.posts)} posts valid ({len(result.skipped)} skipped)\n",
            fg=typer.colors.GREEN,
            bold=True,
        )
        raise typer.Exit(code=0)

    typer.secho(f"\n✗ {len(result.errors)} invalid posts", fg=typer.colors.RED, bold=True)
    for path, message in result.errors:
        typer.secho(f"  - {path.name}: {message.splitlines()[0]}", fg=typer.colors.RED)
    typer.echo("")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
