"""Command-line interface for the SQL recognizer."""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console

from .core.exceptions import SQLParsingException
from .core.models import InsertRecognition, SQLType
from .core.recognizers import MySQLInsertRecognizer, MariadbInsertRecognizer, PostgresqlInsertRecognizer
from .formatters.json_formatter import JSONFormatter
from .formatters.console_formatter import ConsoleFormatter
from .utils.sqlglot_helpers import parse_statement
from .utils.validation import validate_sql_input, validate_insert_statement, validate_dialect
from .utils.logging_config import get_logger


INSERT_RECOGNIZERS = {
    recognizer.db_type: recognizer
    for recognizer in (MySQLInsertRecognizer, MariadbInsertRecognizer, PostgresqlInsertRecognizer)
}


@click.group()
@click.version_option(version="1.0.0", prog_name="sql-recognizer")
def cli():
    """SQL Recognizer - Extract table, columns and value rows from INSERT statements."""
    logger = get_logger('cli')
    logger.info("SQL Recognizer CLI started")


@cli.command()
@click.option(
    '--sql', '-s',
    help='INSERT statement to recognize'
)
@click.option(
    '--file', '-f', 'file_path',
    type=click.Path(exists=True, readable=True),
    help='Path to a file holding one INSERT statement'
)
@click.option(
    '--dialect', '-d',
    default='mysql',
    help='SQL dialect (default: mysql)'
)
@click.option(
    '--pk-index', '-k', 'pk_indexes',
    type=int,
    multiple=True,
    help='Primary key column position, repeatable'
)
@click.option(
    '--output-format', '-o',
    type=click.Choice(['console', 'json', 'compact']),
    default='console',
    help='Output format (default: console)'
)
@click.option(
    '--output-file', '-F',
    type=click.Path(),
    help='Output file path (only for json format)'
)
def recognize(
    sql: Optional[str],
    file_path: Optional[str],
    dialect: str,
    pk_indexes: Tuple[int, ...],
    output_format: str,
    output_file: Optional[str]
):
    """Recognize an INSERT statement."""
    logger = get_logger('cli.recognize')
    console = Console()

    logger.info(f"Starting recognition - dialect: {dialect}, format: {output_format}")

    if not sql and not file_path:
        logger.error("No input provided: must specify either --sql or --file")
        console.print("[red]Error:[/red] Must provide either --sql or --file")
        sys.exit(1)

    if sql and file_path:
        logger.error("Invalid input: both --sql and --file specified")
        console.print("[red]Error:[/red] Cannot specify both --sql and --file")
        sys.exit(1)

    dialect_error = validate_dialect(dialect, INSERT_RECOGNIZERS)
    if dialect_error:
        logger.error(f"Invalid dialect: {dialect_error}")
        console.print(f"[red]Error:[/red] {dialect_error}")
        sys.exit(1)

    if file_path:
        sql = Path(file_path).read_text(encoding='utf-8')
        logger.info(f"Read statement from file: {file_path}")

    recognizer_class = INSERT_RECOGNIZERS[dialect.lower()]

    sql_error = validate_sql_input(sql, recognizer_class.dialect)
    if sql_error:
        logger.error(f"Invalid SQL input: {sql_error}")
        console.print(f"[red]Error:[/red] {sql_error}")
        sys.exit(1)

    try:
        ast = parse_statement(sql, recognizer_class.dialect)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    statement_error = validate_insert_statement(ast)
    if statement_error:
        logger.error(f"Invalid statement: {statement_error}")
        console.print(f"[red]Error:[/red] {statement_error}")
        sys.exit(1)

    recognizer = recognizer_class(sql, ast)
    try:
        result = recognizer.recognize(list(pk_indexes))
    except SQLParsingException as e:
        logger.error(f"Recognition failed: {str(e)}")
        result = InsertRecognition(sql=sql, dialect=recognizer_class.db_type, sql_type=SQLType.INSERT, errors=[str(e)])

    if output_format == 'json':
        formatter = JSONFormatter()

        if output_file:
            try:
                formatter.format_to_file(result, output_file)
                logger.info(f"Results written to file: {output_file}")
                console.print(f"[green]Results written to:[/green] {output_file}")
            except OSError as e:
                logger.error(f"Failed to write output file {output_file}: {str(e)}")
                console.print(f"[red]Error:[/red] Failed to write output file: {e}")
                sys.exit(1)
        else:
            click.echo(formatter.format(result))

    elif output_format == 'compact':
        ConsoleFormatter(console).format_compact(result)

    else:
        ConsoleFormatter(console).format(result)

    if result.has_errors():
        logger.warning(f"Recognition completed with errors: {result.errors}")
        sys.exit(1)
    logger.info("Recognition completed successfully")


@cli.command()
def dialects():
    """List the dialects with an INSERT recognizer."""
    for db_type in sorted(INSERT_RECOGNIZERS):
        click.echo(db_type)


def main():
    """Main entry point."""
    logger = get_logger('main')
    logger.info("SQL Recognizer starting")
    try:
        cli()
    finally:
        logger.info("SQL Recognizer session ended")


if __name__ == '__main__':
    main()
