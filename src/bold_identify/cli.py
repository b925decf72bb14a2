"""Command-line interface for the BOLD identification client."""

import sys
import xml.etree.ElementTree as ET
from pathlib import Path

import click
import requests

from .client import IdentificationClient
from .config import Config, get_default_config_path, create_example_config
from .core import identify
from .exceptions import BoldIdentifyError
from .input_parser import InputParser
from .logging_config import setup_logging
from .models import Database
from .output_formatter import OutputFormatter


def status(message: str, show: bool = True) -> None:
    """Echo a progress message unless status output is switched off."""
    if show:
        click.echo(message)


@click.command()
@click.argument('input_file', type=click.Path(), required=False)
@click.argument('output_file', type=click.Path(), required=False)
@click.option('--sequence', '-s', 'sequences', multiple=True, help='Sequence to identify (repeatable)')
@click.option('--db', type=click.Choice([d.value for d in Database]), help='Reference library to search')
@click.option('--output-format', type=click.Choice(list(OutputFormatter.FORMATS)), help='Output file format')
@click.option('--workers', type=int, help='Number of concurrent requests')
@click.option('--timeout', type=float, help='Request timeout in seconds')
@click.option('--strict', is_flag=True, help='Fail on matches without specimen data')
@click.option('--excel-compatible', is_flag=True, help='Write delimited output with a UTF-8 BOM')
@click.option('--log-file', type=click.Path(), help='Also write logs to this file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress all output except errors')
@click.option('--config', type=click.Path(exists=True), help='Configuration file path')
@click.option('--generate-config', is_flag=True, help='Generate example configuration file')
def main(input_file, output_file, sequences, db, output_format, workers, timeout, strict,
         excel_compatible, log_file, verbose, quiet, config, generate_config):
    """Identify COI sequences against the BOLD Systems database.

    Sequences are read from INPUT_FILE (FASTA or one per line) and/or given
    with --sequence. Results go to OUTPUT_FILE, or to stdout if omitted.

    Examples:
        bold-identify queries.fasta matches.tsv
        bold-identify -s ACGT... --db COX1_SPECIES_PUBLIC
    """
    if quiet and verbose:
        click.echo("Error: Cannot use both --quiet and --verbose", err=True)
        sys.exit(1)

    show_status = not quiet
    setup_logging(
        log_level="DEBUG" if verbose else "WARNING",
        log_file=log_file,
        quiet=quiet
    )

    if generate_config:
        config_path = create_example_config()
        status(f"Generated example configuration file: {config_path}", show_status)
        sys.exit(0)

    # Status messages would corrupt a table written to stdout
    if output_file is None:
        show_status = False

    try:
        cfg = Config.from_file(Path(config) if config else get_default_config_path())
        cfg.merge_env_vars()
    except BoldIdentifyError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    cfg.merge_cli_args(
        db=db,
        output_format=output_format,
        workers=workers,
        timeout=timeout,
        strict=strict,
        excel_compatible=excel_compatible
    )

    parser = InputParser()
    queries = []
    if input_file:
        try:
            queries.extend(parser.parse_file(input_file))
        except (OSError, BoldIdentifyError) as e:
            click.echo(f"ERROR: Failed to parse input file: {e}", err=True)
            sys.exit(1)
        status(f"Read {len(queries)} sequences from {input_file} (format: {parser.get_format_info()['format']})", show_status)
    if sequences:
        queries.extend(parser.parse_strings(list(sequences)))

    if not queries:
        ctx = click.get_current_context()
        click.echo(ctx.get_help())
        return

    status(f"Searching {cfg.api.default_db} for {len(queries)} sequences...", show_status)

    client = IdentificationClient(base_url=cfg.api.base_url, options=cfg.api.request_options())
    try:
        with client:
            tables = identify(
                [query.sequence for query in queries],
                db=cfg.api.default_db,
                max_workers=cfg.processing.max_workers,
                strict=cfg.processing.strict_specimen,
                client=client
            )
    except (requests.RequestException, BoldIdentifyError, ET.ParseError) as e:
        click.secho(f"ERROR: Identification failed: {e}", err=True, fg='red')
        sys.exit(1)

    formatter = OutputFormatter(excel_compatible=cfg.output.excel_compatible)
    combined = formatter.combine([query.name for query in queries], tables)

    if output_file:
        status("Writing results...", show_status)
        formatter.format_results(combined, output_file, format=cfg.output.format, db=cfg.api.default_db)
        status(f"Results written to {output_file} ({len(combined)} matches)", show_status)
    else:
        click.echo(formatter.to_text(combined, format=cfg.output.format), nl=False)


if __name__ == '__main__':
    main()
