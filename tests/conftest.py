import textwrap

import pytest


@pytest.fixture()
def write_locale(tmp_path):
    """Write a dedented YAML document to ``tmp_path`` and return its path."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return str(path)

    return _write
