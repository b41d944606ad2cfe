#!/usr/bin/env python3
"""
CLI tool for browsing the unique lines of a text file.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..exceptions import LineSiftError
from ..logging_config import setup_logging
from ..pipeline import LineBrowser
from ..utils import (
    config_dict_to_objects,
    export_lines,
    find_config_file,
    load_config_from_file,
    merge_configs,
)

console = Console()


@click.command()
@click.argument(
    "input_file", type=click.Path(exists=True, file_okay=True, dir_okay=False)
)
@click.option("--query", "-q", default="", help="Fuzzy search text")
@click.option("--hide-basic", is_flag=True, help="Hide basic lines")
@click.option("--show-special", is_flag=True, help="Show special (sensitive) lines")
@click.option("--sort", "alphabetical_sort", is_flag=True, help="Sort A-Z")
@click.option("--reveal", is_flag=True, help="Print special lines unmasked")
@click.option("--threshold", type=click.FloatRange(0.0, 1.0), help="Search sensitivity")
@click.option("--config", "-c", help="Configuration file path")
@click.option("--output", "-o", help="Write visible lines to this file")
@click.option("--encoding", default="utf-8", show_default=True, help="File encoding")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(
    input_file,
    query,
    hide_basic,
    show_special,
    alphabetical_sort,
    reveal,
    threshold,
    config,
    output,
    encoding,
    log_level,
    verbose,
):
    """Show the unique lines of INPUT_FILE, filtered and searched."""

    setup_logging(log_level)

    # Load configuration
    config_dict = {}
    if config:
        config_dict = load_config_from_file(config)
    else:
        config_file = find_config_file()
        if config_file:
            config_dict = load_config_from_file(config_file)
            if verbose:
                console.print(f"[blue]Using config file: {config_file}[/blue]")

    # Override config with command line arguments
    overrides = {"search": {}, "view": {}}
    if threshold is not None:
        overrides["search"]["threshold"] = threshold
    if hide_basic:
        overrides["view"]["hide_basic"] = True
    if show_special:
        overrides["view"]["hide_special"] = False
    if alphabetical_sort:
        overrides["view"]["alphabetical_sort"] = True
    config_dict = merge_configs(
        config_dict, {key: value for key, value in overrides.items() if value}
    )

    try:
        classifier_config, search_config, view_config = config_dict_to_objects(
            config_dict
        )
        browser = LineBrowser(classifier_config, search_config)
        browser.load_file(input_file, encoding=encoding)
    except LineSiftError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    state = view_config.to_state(query)

    if verbose:
        stats = browser.get_stats()
        console.print(
            f"[blue]{stats['total_lines']} unique lines "
            f"({stats['basic_lines']} basic, {stats['special_lines']} special)[/blue]"
        )
        console.print(
            f"  Hide basic: {state.hide_basic}  Hide special: {state.hide_special}  "
            f"Sort A-Z: {state.alphabetical_sort}"
        )

    lines = browser.view(state)

    if output:
        try:
            count = export_lines(lines, output, reveal=reveal)
        except OSError as e:
            console.print(f"[red]Error saving output file: {escape(str(e))}[/red]")
            raise SystemExit(1)
        console.print(f"[green]Saved {count} lines to {output}[/green]")
    else:
        display_lines(lines, query, reveal)


def display_lines(lines, query="", reveal=False):
    """Display the visible lines as a table."""
    title = f"{len(lines)} lines"
    if query:
        title += f" matching '{escape(query)}'"

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Line")
    table.add_column("Flags", style="yellow")

    for number, line in enumerate(lines, start=1):
        flags = []
        if line.basic:
            flags.append("basic")
        if line.special:
            flags.append("special")
        style = "red" if line.special else None
        table.add_row(
            str(number),
            escape(line.display(reveal=reveal)),
            ", ".join(flags),
            style=style,
        )

    console.print(table)


if __name__ == "__main__":
    main()
