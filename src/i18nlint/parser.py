import datetime
import logging
import pathlib
from typing import Any

import yaml

from i18nlint.classes import Mapping, Scalar, Value

logger = logging.getLogger(__name__)


class LocaleFileError(Exception):
    def __init__(self, filename: str, message: str):
        super().__init__(f"Error loading {filename}: {message}")
        self.filename = filename


def scalar_text(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (datetime.date, datetime.datetime)):
        return raw.isoformat()
    if isinstance(raw, list):
        return "[" + ", ".join(scalar_text(item) for item in raw) + "]"
    return str(raw)


class DuplicateKeyError(ValueError):
    def __init__(self, key: str):
        super().__init__(f'key "{key}" appears more than once after string coercion')
        self.key = key


def build_tree(raw: dict, parent_key: str = "") -> Mapping:
    """Convert a loaded YAML mapping into a Translation Tree.

    Nested dicts become ``Mapping`` nodes, everything else is coerced to a
    ``Scalar``. Keys are coerced the same way, so ``1:`` or ``no:`` keys keep
    a string form; two keys that coerce to the same string raise
    ``DuplicateKeyError``.
    """
    entries: dict[str, Value] = {}
    for raw_key, value in raw.items():
        key = scalar_text(raw_key)
        current_key = f"{parent_key}.{key}" if parent_key else key
        if key in entries:
            raise DuplicateKeyError(current_key)

        if isinstance(value, dict):
            entries[key] = build_tree(value, current_key)
        else:
            entries[key] = Scalar(scalar_text(value))
    return Mapping(entries)


def parse_locale(filename: str, content: str) -> tuple[str, Mapping]:
    """Parse a locale document and return its locale code and subtree."""
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as ex:
        raise LocaleFileError(filename, str(ex)) from ex

    if not isinstance(document, dict):
        raise LocaleFileError(filename, "document is not a mapping")
    if len(document) != 1:
        raise LocaleFileError(
            filename,
            f"expected exactly one top-level locale key, found {len(document)}",
        )

    locale, translations = next(iter(document.items()))
    if not isinstance(translations, dict):
        raise LocaleFileError(
            filename, f'locale "{scalar_text(locale)}" does not hold a mapping'
        )
    try:
        tree = build_tree(translations)
    except DuplicateKeyError as ex:
        raise LocaleFileError(filename, str(ex)) from ex
    return scalar_text(locale), tree


def load_locale_file(filename: str) -> Mapping:
    logger.debug(f"Parsing {filename}")
    try:
        content = pathlib.Path(filename).read_text("utf-8")
    except UnicodeDecodeError as ex:
        raise LocaleFileError(filename, str(ex)) from ex
    locale, tree = parse_locale(filename, content)
    logger.debug(f"Loaded locale {locale} from {filename}")
    return tree
