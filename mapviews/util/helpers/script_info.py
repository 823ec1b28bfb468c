# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import os


PACKAGE_NAME = "mapviews"

_IS_UNIT_TEST = None


def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    Returns:
        bool: True if running under pytest or with a truthy UNIT_TEST environment variable.

    """
    global _IS_UNIT_TEST  # noqa: PLW0603

    if _IS_UNIT_TEST is not None:
        return _IS_UNIT_TEST

    _IS_UNIT_TEST = _is_unit_test()
    return _IS_UNIT_TEST


def _is_unit_test() -> bool:
    # Detect pytest
    if os.environ.get("PYTEST_VERSION", None) is not None:
        return True

    env = os.environ.get("UNIT_TEST", None)
    if env is not None:
        env = env.strip()
    if not env:
        return False

    return env.lower() not in ("false", "0", "no")


def get_log_file_name() -> str:
    return f"{PACKAGE_NAME}.log"
