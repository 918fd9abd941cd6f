#!/usr/bin/env python3
"""CLI for converting WebQuestions Freebase SPARQL into Wikidata SPARQL."""

import logging
import sys
from pathlib import Path

import click

from fb2wd.config import (
    ENTITY_MAPPINGS_PATH,
    LOG_LEVEL,
    MISSING_ENTITY_MAPPINGS_PATH,
    MISSING_PROPERTY_MAPPINGS_PATH,
    PROPERTY_MAPPINGS_PATH,
    ensure_dirs,
)
from fb2wd.converter import QueryConverter, convert_examples
from fb2wd.dataset import (
    load_mappings,
    load_questions,
    save_converted,
    save_missing_mappings,
)


@click.command()
@click.option(
    "-i", "--input", "input_path", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="path to the input file",
)
@click.option(
    "-o", "--output", "output_path", required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="path to the output file",
)
def cli(input_path: Path, output_path: Path):
    """Convert Freebase SPARQL into Wikidata SPARQL."""
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        questions = load_questions(input_path)
        converter = QueryConverter(
            entity_mappings=load_mappings(ENTITY_MAPPINGS_PATH),
            property_mappings=load_mappings(PROPERTY_MAPPINGS_PATH),
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    examples = convert_examples(questions, converter)

    summary = converter.stats.to_dict()
    click.echo(summary["counter"])
    click.echo(f"Missing entity mappings: {summary['missing_entity_mappings']}")
    click.echo(f"Missing property mappings: {summary['missing_property_mappings']}")
    click.echo(f"Total: {len(examples)}")

    ensure_dirs()

    save_missing_mappings(MISSING_ENTITY_MAPPINGS_PATH, sorted(converter.stats.missing_entity_mappings))
    save_missing_mappings(MISSING_PROPERTY_MAPPINGS_PATH, sorted(converter.stats.missing_property_mappings))
    save_converted(output_path, examples)


if __name__ == "__main__":
    cli()
