# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""
macOS Unified Log formatter flags

Decode where the format string of a Firehose log entry is located.

Example usage:

    from unifiedlog_formatters import FirehoseFormatters

    # data starts right after the non-activity/activity/signpost header fields
    remaining, formatters = FirehoseFormatters.firehose_formatter_flags(data, 0x204)
    if formatters.shared_cache:
        print("format string is in the DSC file")
"""

__version__ = "0.1.0"

from .flags import FirehoseFlags, FormatterLocation
from .formatters import FirehoseFormatters

# Exceptions
from .error import (
    ParserError,
    TruncatedInputError,
    UnknownFormatterFlagsError,
)

__all__ = [
    # Version
    '__version__',

    # Flag word
    'FirehoseFlags',
    'FormatterLocation',

    # Formatter flags
    'FirehoseFormatters',

    # Exceptions
    'ParserError',
    'TruncatedInputError',
    'UnknownFormatterFlagsError',
]
