# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

# Shared pytest fixtures. Also collects the doctests embedded in module docstrings.
from doctest import ELLIPSIS, IGNORE_EXCEPTION_DETAIL
from typing import TYPE_CHECKING

import pytest

from sybil import Sybil
from sybil.parsers.rest import DocTestParser, PythonCodeBlockParser

from test.config.fixture import *


if TYPE_CHECKING:
    from mapviews.util.logging import LoggingManager


# Automatically provide a logging manager for all tests
@pytest.fixture(autouse=True, scope="session")
def logging_manager() -> LoggingManager:
    from mapviews.util.logging import LoggingManager

    manager = LoggingManager()
    manager.initialize(
        {
            "levels": {
                "file": "OFF",
                "tty": "NOTSET",
                "default": "NOTSET",
            },
            "rich": False,
        }
    )
    return manager


pytest_collect_file = Sybil(
    parsers=[
        DocTestParser(optionflags=ELLIPSIS | IGNORE_EXCEPTION_DETAIL),
        PythonCodeBlockParser(),
    ],
    path="./mapviews",
    patterns=["*.rst", "*.py"],
).pytest()
