import logging
import re

import click

from i18nlint.classes import FileReport, Mapping, Scalar
from i18nlint.walker import each_pluralization, each_translation

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    "wrong_pluralization_keys": "Pluralized strings must have only the sub-keys 'one' and 'other'.\n"
    "The following keys have missing or additional keys:",
    "invalid_one_keys": "The following keys contain the number 1 instead of the interpolation key %{count}:",
    "invalid_relative_links": "The following keys have relative links, but do not start with %{base_url} or %{base_path}:",
    "invalid_relative_image_sources": "The following keys have relative image sources, but do not start with %{base_url} or %{base_path}:",
    "invalid_interpolation_key_format": "The following keys use {{key}} instead of %{key} for interpolation keys:",
    "invalid_message_format_one_key": "The following keys use 'one {1 foo}' instead of the generic 'one {# foo}':",
    "missing_pluralization": "The following keys use %{count} without pluralization.\n"
    "Split the key into `one` and `other` or add it to the allow list in `i18nlint/validator.py`:",
}

ENGLISH_KEYS = ["one", "other"]

COUNT_WITHOUT_PLURALIZATION_ALLOW_LIST = (
    "errors.messages.",
    "activemodel.errors.messages.",
    "activerecord.errors.messages.",
)

# generated by ActiveRecord, pluralized differently
IGNORED_PLURALIZATION_KEY = "messages.restrict_dependent_destroy"

MESSAGE_FORMAT_SUFFIX = "_MF"

relative_link_regex = re.compile(r"href\s*=\s*[\"']/[^/]|\]\(/[^/]", re.IGNORECASE)
relative_image_source_regex = re.compile(r"src\s*=\s*[\"']/[^/]", re.IGNORECASE)
interpolation_key_regex = re.compile(r"\{\{.+?\}\}")
message_format_one_regex = re.compile(r"one \{.*?1.*?\}")
count_interpolation_regex = re.compile(r"%\{count\}|\{\{count\}\}")


class LocaleFileValidator:
    def __init__(self, filename: str):
        self.filename = filename
        self._errors: dict[str, list[str]] = {}

    @property
    def errors(self) -> dict[str, tuple[str, ...]]:
        return {rule: tuple(keys) for rule, keys in self._errors.items()}

    def has_errors(self, tree: Mapping) -> bool:
        self._errors = {rule: [] for rule in ERROR_MESSAGES}

        self.validate_pluralizations(tree)
        self.validate_content(tree)

        return any(self._errors.values())

    def report(self) -> FileReport:
        return FileReport(
            self.filename,
            {rule: keys for rule, keys in self.errors.items() if keys},
        )

    def print_errors(self) -> None:
        click.echo()
        click.secho(f"Errors in {self.filename}", fg="red")

        for rule, keys in self._errors.items():
            if not keys:
                continue

            for line in ERROR_MESSAGES[rule].split("\n"):
                click.echo(f"  {line}")
            for key in keys:
                click.echo(f"    * {key}")

    def validate_content(self, tree: Mapping) -> None:
        for full_key, value, last_key_part in each_translation(tree):
            if relative_link_regex.search(value):
                self._errors["invalid_relative_links"].append(full_key)

            if relative_image_source_regex.search(value):
                self._errors["invalid_relative_image_sources"].append(full_key)

            is_message_format = full_key.endswith(MESSAGE_FORMAT_SUFFIX)
            if interpolation_key_regex.search(value) and not is_message_format:
                self._errors["invalid_interpolation_key_format"].append(full_key)

            if is_message_format and message_format_one_regex.search(value):
                self._errors["invalid_message_format_one_key"].append(full_key)

            if (
                "%{count}" in value
                and last_key_part not in ENGLISH_KEYS
                and not full_key.startswith(COUNT_WITHOUT_PLURALIZATION_ALLOW_LIST)
            ):
                self._errors["missing_pluralization"].append(full_key)

    def validate_pluralizations(self, tree: Mapping) -> None:
        for key, mapping in each_pluralization(tree):
            if IGNORED_PLURALIZATION_KEY in key:
                logger.debug(f"Skipping pluralization check for {key}")
                continue

            if mapping.sorted_keys() != ENGLISH_KEYS:
                self._errors["wrong_pluralization_keys"].append(key)

            one_value = mapping.get("one")
            if (
                isinstance(one_value, Scalar)
                and "1" in one_value.text
                and not count_interpolation_regex.search(one_value.text)
            ):
                self._errors["invalid_one_keys"].append(key)
