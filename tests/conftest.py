"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable

import pytest
from loguru import logger


def tag_line(
    name: str,
    kind: str = "f",
    language: str = "C",
    filename: str = "main.c",
    address: str | None = None,
) -> str:
    """Build one ctags line in extended format."""
    if address is None:
        address = f"/^int {name}(void)$/"
    return f'{name}\t{filename}\t{address};"\t{kind}\tlanguage:{language}'


@pytest.fixture
def make_tag_line() -> Callable[..., str]:
    """Provide the tag line builder."""
    return tag_line


@pytest.fixture
def write_tag_file(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory that writes tag lines to a file."""

    def _write(lines: list[str], name: str = "tags") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_lines() -> list[str]:
    """A small mixed tag file: header, C, C++ and Python tags."""
    return [
        "!_TAG_FILE_FORMAT\t2\t/extended format/",
        "!_TAG_FILE_SORTED\t1\t/0=unsorted, 1=sorted/",
        tag_line("foo"),
        tag_line("bar"),
        tag_line("Widget", kind="c", language="C++", filename="widget.cpp"),
        tag_line("helper", language="Python", filename="util.py"),
        tag_line("MAX_LEN", kind="d"),
        tag_line("foo"),
    ]


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks added by the CLI so they don't outlive captured streams."""
    yield
    logger.remove()
