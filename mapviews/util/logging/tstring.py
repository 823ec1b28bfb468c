# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import functools
import logging

from string.templatelib import Template

from ..helpers.tstring import tstring_as_fstring


logging_logrecord_getMessage = logging.LogRecord.getMessage  # noqa: N816


# Template strings passed as log messages are only rendered when the record is emitted
@functools.wraps(logging.LogRecord.getMessage)
def getMessage(self: logging.LogRecord) -> str:  # noqa: N802
    if isinstance(self.msg, Template):
        return tstring_as_fstring(self.msg)
    return logging_logrecord_getMessage(self)


logging.LogRecord.getMessage = getMessage
