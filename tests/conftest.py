"""Shared test fixtures — sample C++ sources and files on disk.

Sources are spelled out line by line so that tab indentation is explicit.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

CLEAN_SOURCE = [
    "/*",
    "\tName: hello.cpp",
    "\tCopyright: 2024",
    "\tAuthor: A. Student",
    "\tDate: 01/09/24",
    "\tDescription: Prints a greeting.",
    "*/",
    "#include <iostream>",
    "using namespace std;",
    "",
    "// Print a greeting",
    "int main()",
    "{",
    '\tcout << "Hello" << endl;',
    "\treturn 0;",
    "}",
]

UNCOMMENTED_SOURCE = [
    "int main()",
    "{",
    "\treturn 0;",
    "}",
]


def write_source(directory: Path, name: str, lines: List[str]) -> Path:
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def clean_lines() -> List[str]:
    """A short program that passes every built-in rule."""
    return list(CLEAN_SOURCE)


@pytest.fixture
def uncommented_lines() -> List[str]:
    """A program with no comments at all."""
    return list(UNCOMMENTED_SOURCE)


@pytest.fixture
def class_lines() -> List[str]:
    """A class with an inline member function under an access label."""
    return [
        "class Counter {",
        "public:",
        "\tint next() {",
        "\t\treturn 1;",
        "\t}",
        "};",
        "int helper() {",
        "\treturn 2;",
        "}",
    ]


@pytest.fixture
def switch_lines() -> List[str]:
    """A switch with a comment ahead of its first case."""
    return [
        "switch (x) {",
        "\t// first choice",
        "\tcase 1:",
        "\t\tbreak;",
        "\tdefault:",
        "\t\tfoo();",
        "}",
    ]


@pytest.fixture
def make_source(tmp_path: Path):
    """Factory writing a list of lines to a file under tmp_path."""

    def _make(lines: List[str], name: str = "main.cpp") -> Path:
        return write_source(tmp_path, name, lines)

    return _make


@pytest.fixture
def clean_file(tmp_path: Path) -> Path:
    return write_source(tmp_path, "hello.cpp", CLEAN_SOURCE)


@pytest.fixture
def uncommented_file(tmp_path: Path) -> Path:
    return write_source(tmp_path, "bare.cpp", UNCOMMENTED_SOURCE)
