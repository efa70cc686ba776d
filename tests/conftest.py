"""Shared pytest fixtures for courseindex tests."""

import logging
from pathlib import Path

import pytest

ADVISING_CATALOG = """\
MATH201,Discrete Mathematics
CSCI300,Introduction to Algorithms,CSCI200,MATH201
CSCI350,Operating Systems,CSCI300
CSCI101,Introduction to Programming in C++,CSCI100
CSCI100,Introduction to Computer Science
CSCI301,Advanced Programming in C++,CSCI101
CSCI400,Large Software Development,CSCI301,CSCI350
CSCI200,Data Structures,CSCI101
"""


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Keep tests independent of the caller's config files and env vars."""
    import os

    for name in list(os.environ):
        if name.startswith("COURSEINDEX_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Drop handlers the CLI installs so they never outlive a captured stream."""
    logger = logging.getLogger("courseindex")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.fixture
def advising_catalog(tmp_path) -> Path:
    """A valid eight-course catalog file in shuffled order."""
    path = tmp_path / "advising.csv"
    path.write_text(ADVISING_CATALOG)
    return path


@pytest.fixture
def mixed_catalog(tmp_path) -> Path:
    """A catalog mixing valid courses with every kind of bad record."""
    path = tmp_path / "mixed.csv"
    path.write_text(
        "CS101,Intro\n"
        "\n"
        "CS201, Data Structures ,cs101\n"
        "CS301,Algorithms,CS999\n"
        "JUSTONEFIELD\n"
        ",Nameless Course\n"
        "CS102,,CS101\n"
    )
    return path


@pytest.fixture
def invalid_catalog(tmp_path) -> Path:
    """A catalog in which no record can be accepted."""
    path = tmp_path / "invalid.csv"
    path.write_text("ONLYID\n,No Number\nCS500,Orphan,CS404\n")
    return path


@pytest.fixture
def example_records():
    """The three-record example batch."""
    return [["CS101", "Intro"], ["CS201", "Data Structures", "CS101"], ["CS301", "Algorithms", "CS999"]]
