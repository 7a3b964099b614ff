import glob
import logging
from typing import Iterable

from i18nlint.classes import FileReport
from i18nlint.parser import load_locale_file
from i18nlint.validator import LocaleFileValidator

logger = logging.getLogger(__name__)


def resolve_filenames(patterns: Iterable[str]) -> list[str]:
    filenames: list[str] = []
    seen: set[str] = set()
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, recursive=True))
        if not matches:
            logger.warning(f"No files match {pattern}")
        for filename in matches:
            if filename not in seen:
                seen.add(filename)
                filenames.append(filename)
    return filenames


def lint_file(filename: str) -> FileReport:
    tree = load_locale_file(filename)
    validator = LocaleFileValidator(filename)

    if not validator.has_errors(tree):
        logger.info(f"No issues found in {filename}")
        return validator.report()

    validator.print_errors()
    report = validator.report()
    issue_count = sum(len(keys) for keys in report.violations.values())
    logger.error(f"Found {issue_count} issues in {filename}")
    return report


def run(*, patterns: Iterable[str]) -> int:
    filenames = resolve_filenames(patterns)
    logger.info(f"Linting {len(filenames)} locale files...")

    reports = [lint_file(filename) for filename in filenames]
    failed = [report.filename for report in reports if report.has_errors]

    if failed:
        logger.error(f"{len(failed)} of {len(reports)} locale files have errors")
        return 1
    return 0
