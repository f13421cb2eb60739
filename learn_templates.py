#!/usr/bin/env python3
"""
CLI tool for learning log templates from a stream of log lines.

Usage:
    python learn_templates.py --input server.log --out templates.jsonl
    cat server.log | python learn_templates.py
"""

import click
import dataclasses
import os
import sys
from pathlib import Path
from typing import Optional

# Add the package to Python path
sys.path.insert(0, os.path.dirname(__file__))

from templateminer import TemplateMiner, MinerConfig
from templateminer.io_utils import LineReader, TemplateDumpWriter, format_dump, ensure_parent_directory
from templateminer.logging_config import setup_logging


def load_config(config_file: Optional[str],
                min_matches: Optional[int],
                max_new_alternatives: Optional[int]) -> MinerConfig:
    """Build the miner configuration from a JSON file and option overrides."""
    config = MinerConfig()
    if config_file:
        config = MinerConfig.from_json(Path(config_file).read_text(encoding='utf-8'))

    overrides = {}
    if min_matches is not None:
        overrides['min_req_consequent_matches'] = min_matches
    if max_new_alternatives is not None:
        overrides['max_allowed_new_alternatives'] = max_new_alternatives
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


@click.command()
@click.option('--input', '--in', '-i', 'input_file',
              default='-',
              type=click.Path(exists=True, dir_okay=False, allow_dash=True),
              help='Input log file (default: stdin)')
@click.option('--out', '-o', 'output_file',
              type=click.Path(),
              help='Optional JSONL file for the learned templates and word index')
@click.option('--config', '-c', 'config_file',
              type=click.Path(exists=True, dir_okay=False),
              help='JSON file with matcher settings')
@click.option('--min-matches',
              type=int,
              default=None,
              help='Minimum aligned tokens required to accept a match (default: 3)')
@click.option('--max-new-alternatives',
              type=int,
              default=None,
              help='Tokens allowed to miss a template before it is rejected (default: 1)')
@click.option('--progress',
              is_flag=True,
              help='Show a progress bar')
@click.option('--report-every',
              type=int,
              default=0,
              help='Print the running line count to stderr every N lines')
@click.option('--quiet', '-q',
              is_flag=True,
              help='Do not print the text dump to stdout')
@click.option('--verbose', '-v',
              is_flag=True,
              help='Enable verbose output')
def learn_templates(input_file: str,
                    output_file: Optional[str],
                    config_file: Optional[str],
                    min_matches: Optional[int],
                    max_new_alternatives: Optional[int],
                    progress: bool,
                    report_every: int,
                    quiet: bool,
                    verbose: bool):
    """
    Learn log templates from log lines in a single pass.

    Each line either extends the best matching template learned so far or
    starts a new one. The learned templates and the word index are printed
    when the input is exhausted.

    Examples:

    \b
    # Learn from a file and print the dump
    python learn_templates.py --in server.log

    \b
    # Stricter matching, JSONL output
    python learn_templates.py --in server.log --out templates.jsonl \\
        --min-matches 4 --max-new-alternatives 0 --quiet
    """

    setup_logging(verbose)

    try:
        config = load_config(config_file, min_matches, max_new_alternatives)

        if verbose:
            click.echo(f"Learning templates from: {input_file}", err=True)
            click.echo(f"Min consequent matches: {config.min_req_consequent_matches}", err=True)
            click.echo(f"Max new alternatives: {config.max_allowed_new_alternatives}", err=True)

        def report(count: int) -> None:
            if report_every > 0 and count % report_every == 0:
                click.echo(str(count), err=True)

        miner = TemplateMiner(config)
        line_count = miner.learn_lines(LineReader(input_file),
                                       progress=progress, on_line=report)

        if not quiet:
            click.echo(format_dump(miner.templates(), miner.word_index()), nl=False)

        if output_file:
            output_path = ensure_parent_directory(output_file)
            with TemplateDumpWriter(str(output_path)) as writer:
                writer.write_templates(miner.templates())
                writer.write_index(miner.word_index())

        click.echo(f"\n✅ Learning completed!", err=True)
        click.echo(f"📊 Statistics:", err=True)
        click.echo(f"   • Lines processed: {line_count}", err=True)
        click.echo(f"   • Lines dropped: {miner.lines_dropped}", err=True)
        click.echo(f"   • Templates learned: {len(miner)}", err=True)
        click.echo(f"   • Distinct words: {miner.store.vocabulary_size}", err=True)
        if output_file:
            click.echo(f"   • Output file: {Path(output_file).absolute()}", err=True)

    except KeyboardInterrupt:
        click.echo("\n❌ Learning cancelled by user", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"\n❌ Error during learning: {e}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    learn_templates()
