import logging
import os
import sys
from typing import Any

import yaml

import click
from i18nlint import linter
from i18nlint.parser import LocaleFileError

logger = logging.getLogger(__name__)

DEFAULT_LOGGING = {
    "level": "WARNING",
    "format": "%(levelname)s %(name)s: %(message)s",
    "datefmt": None,
}


def load_config(config_folder: str) -> dict[str, Any]:
    config_folder_path = os.path.abspath(config_folder)
    config_file_path = os.path.abspath(f"{config_folder_path}/config.yml")

    config: dict[str, Any] = {}
    try:
        with open(config_file_path, "r") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.warning(f"Config file {config_file_path} not found, using defaults.")
    except yaml.YAMLError as exc:
        logger.error(sys._getframe().f_code.co_name + " " + str(exc))
        sys.exit(1)
    return config


def setup_logging(config: dict[str, Any]) -> None:
    logging_cfg = {**DEFAULT_LOGGING, **(config.get("logging") or {})}
    logging.basicConfig(
        level=logging.getLevelName(logging_cfg["level"]),
        format=logging_cfg["format"],
        datefmt=logging_cfg["datefmt"],
    )


@click.group()
@click.version_option()
def cli() -> None:
    pass


@cli.command("lint")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.argument("patterns", nargs=-1, required=True)
def lint(config_folder: str, patterns: tuple[str, ...]) -> None:
    """Check locale files matching PATTERNS for translation errors."""
    setup_logging(load_config(config_folder))

    try:
        exit_code = linter.run(patterns=patterns)
    except LocaleFileError as exc:
        logger.error(str(exc))
        sys.exit(1)
    sys.exit(exit_code)
