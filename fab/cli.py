#!/usr/bin/env python3
"""
CLI for the fab demo factories.

Creates one instance from each example factory and prints its fields.
"""

import logging

import click

from fab.config import FabSettings, setup_logging
from fab.examples.dogs import run_demo

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print each instance as a JSON document",
)
def main(as_json: bool) -> None:
    """Run the dog and cat factory demo."""
    setup_logging(FabSettings.from_env())

    instances = run_demo()
    logger.debug("Demo instances created", extra={"count": len(instances)})

    for i, instance in enumerate(instances, 1):
        if as_json:
            click.echo(instance.model_dump_json())
            continue
        click.echo(f"{i}. {type(instance).__name__}")
        for field_name, value in instance.model_dump().items():
            click.echo(f"   {field_name}: {value}")


if __name__ == "__main__":
    main()
