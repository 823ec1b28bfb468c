# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import logging

import pytest

from mapviews import KeyView, ValueView
from mapviews.util.logging import Logger, getLogger


@pytest.mark.logging
class TestLogger:
    def test_getLogger_returns_logger(self, caplog):
        logger = getLogger("testLogger")
        assert isinstance(logger, Logger)
        with caplog.at_level(logging.INFO):
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")
        assert "debug message" not in caplog.text
        assert "info message" in caplog.text
        assert "warning message" in caplog.text

    def test_getLogger_with_parent(self):
        parent = getLogger("parentLogger")
        child = getLogger("childLogger", parent=parent)
        assert child.parent is parent
        assert child.name == "parentLogger.childLogger"

    def test_getLogger_names_after_class(self):
        assert getLogger(KeyView({})).name == "KeyView"

    def test_template_string_messages(self, caplog):
        logger = getLogger("templateLogger")
        count = 3
        with caplog.at_level(logging.INFO):
            logger.info(t"removed {count} entries from {'m'!r}")
        assert "removed 3 entries from 'm'" in caplog.text

    def test_views_have_class_loggers(self):
        view = ValueView({}, len)
        assert view.log is ValueView({}, len).log
        assert view.log.name == "mapviews.ValueView"
        assert KeyView({}).log.name == "mapviews.KeyView"

    def test_logger_isEnabledFor(self):
        logger = getLogger("enabledLogger")
        assert logger.isEnabledFor(logging.INFO)
        assert logger.isEnabledForTty(logging.INFO)
        assert not logger.isEnabledForFile(logging.INFO)

    def test_logger_invalid_handler(self):
        logger = getLogger("invalidHandlerLogger")
        with pytest.raises(ValueError, match="Unknown handler"):
            logger.isEnabledFor(logging.INFO, handler="invalid")
