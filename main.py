#!/usr/bin/env python3
"""Log word analyzer CLI.

Usage:
    python main.py logs.txt 5
    python main.py logs.txt 5 --format table
    python main.py --demo
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Config, InvalidTopKError, OUTPUT_FORMATS, validate_k
from core.log_reader import LogReadError, SAMPLE_LOGS, read_log_lines
from analysis.word_frequency import WordFrequencyRanker


def format_result(result: list[tuple[str, int]], output_format: str) -> str:
    """Render ranked (word, count) entries for display."""
    if output_format == "table":
        return "\n".join(f"{word}\t{count}" for word, count in result)
    if output_format == "json":
        return json.dumps([[word, count] for word, count in result])
    return repr(result)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("log_file", required=False, type=click.Path(dir_okay=False))
@click.argument("k", required=False)
@click.option("--demo", is_flag=True, help="Analyze the built-in sample logs instead of a file")
@click.option("--format", "output_format", default=None, type=click.Choice(OUTPUT_FORMATS), help="Output format")
@click.option("--encoding", default=None, help="Log file encoding (default: utf-8)")
def main(
    log_file: Optional[str],
    k: Optional[str],
    demo: bool,
    output_format: Optional[str],
    encoding: Optional[str],
):
    """Print the K most frequent words in LOG_FILE.

    Words are case-insensitive runs of ASCII letters and digits. Ties on
    count are ordered alphabetically.
    """
    try:
        config = Config.from_env()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if demo and log_file:
        # With --demo the only positional is K
        if k is not None:
            raise click.UsageError("LOG_FILE cannot be combined with --demo")
        k, log_file = log_file, None
    if not demo and not log_file:
        raise click.UsageError("Missing argument 'LOG_FILE' (or use --demo)")

    if k is None:
        top_k = config.default_k
    else:
        try:
            top_k = validate_k(k)
        except InvalidTopKError as e:
            raise click.BadParameter(str(e), param_hint="'K'")

    if demo:
        lines = SAMPLE_LOGS
    else:
        try:
            lines = read_log_lines(log_file, encoding=encoding or config.encoding)
        except LogReadError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    ranker = WordFrequencyRanker(k=top_k)
    result = ranker.rank(lines)

    click.echo(format_result(result, output_format or config.output_format))


if __name__ == "__main__":
    main()
