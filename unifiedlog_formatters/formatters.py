# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Identify formatter flags associated with the log entry."""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from .error import UnknownFormatterFlagsError
from .flags import FirehoseFlags
from .util import be_u128, format_uuid, le_u16

logger = logging.getLogger(__name__)


@dataclass
class FirehoseFormatters:
    """Formatter flags determine the file where the base format string is located."""
    main_exe: bool = False
    shared_cache: bool = False
    has_large_offset: int = 0
    large_shared_cache: int = 0
    absolute: bool = False
    uuid_relative: str = ""
    main_plugin: bool = False  # Not seen yet
    pc_style: bool = False  # Not seen yet
    main_exe_alt_index: int = 0  # If log entry uses an alternative uuid file index

    @staticmethod
    def firehose_formatter_flags(
        data: bytes, firehose_flags: Union[int, FirehoseFlags]
    ) -> Tuple[bytes, 'FirehoseFormatters']:
        """Identify formatter flags associated with the log entry.

        Formatter flags determine the file where the base format string is located.

        Flags:
            0x20 - has_large_offset flag. Offset to format string is larger than normal
            0xc - has_large_shared_cache flag. Offset to format string is larger than normal
            0x8 - absolute flag. The log uses an alternative index number that points to
                  the UUID file name in the Catalog which contains the format string
            0x2 - main_exe flag. A UUID file contains the format string
            0x4 - shared_cache flag. DSC file contains the format string
            0xa - uuid_relative flag. The UUID file name is in the log data (instead of Catalog)

        Args:
            data: Raw bytes after log entry header
            firehose_flags: Flag value from log entry

        Returns:
            Tuple of (remaining data, FirehoseFormatters)

        Raises:
            TruncatedInputError: If data ends before a selected field
            UnknownFormatterFlagsError: If the flags select no known location
        """
        formatter_flags = FirehoseFormatters()
        flags = FirehoseFlags.from_value(firehose_flags)

        if flags.is_large_offset():
            logger.debug("[unifiedlog-formatters] Firehose flag: has_large_offset")
            data, formatter_flags.has_large_offset = le_u16(data)

            if flags.has_large_shared_cache():
                logger.debug(
                    "[unifiedlog-formatters] Firehose flag: large_shared_cache and has_large_offset"
                )
                data, formatter_flags.large_shared_cache = le_u16(data)

        elif flags.is_large_shared_cache():
            logger.debug("[unifiedlog-formatters] Firehose flag: large_shared_cache")
            if flags.has_large_offset():
                data, formatter_flags.has_large_offset = le_u16(data)

            data, formatter_flags.large_shared_cache = le_u16(data)

        elif flags.is_absolute():
            logger.debug("[unifiedlog-formatters] Firehose flag: absolute")
            formatter_flags.absolute = True

            if not flags.has_message_strings_uuid():
                logger.debug("[unifiedlog-formatters] Firehose flag: alt index absolute flag")
                data, formatter_flags.main_exe_alt_index = le_u16(data)

        elif flags.is_main_exe():
            logger.debug("[unifiedlog-formatters] Firehose flag: main_exe")
            formatter_flags.main_exe = True

        elif flags.is_shared_cache():
            logger.debug("[unifiedlog-formatters] Firehose flag: shared_cache")
            formatter_flags.shared_cache = True

            if flags.has_large_offset():
                data, formatter_flags.has_large_offset = le_u16(data)

        elif flags.is_uuid_relative():
            logger.debug("[unifiedlog-formatters] Firehose flag: uuid_relative")
            data, uuid_relative = be_u128(data)
            formatter_flags.uuid_relative = format_uuid(uuid_relative)

        else:
            logger.error(f"[unifiedlog-formatters] Unknown Firehose formatter flag: {flags!r}")
            logger.debug(f"[unifiedlog-formatters] Firehose data: {bytes(data[:32]).hex()}")
            raise UnknownFormatterFlagsError(flags)

        return (data, formatter_flags)

    @staticmethod
    def formatter_size(firehose_flags: Union[int, FirehoseFlags]) -> int:
        """Number of bytes firehose_formatter_flags consumes for the flags.

        Raises:
            UnknownFormatterFlagsError: If the flags select no known location
        """
        flags = FirehoseFlags.from_value(firehose_flags)

        if flags.is_large_offset():
            return 4 if flags.has_large_shared_cache() else 2
        if flags.is_large_shared_cache():
            return 4 if flags.has_large_offset() else 2
        if flags.is_absolute():
            return 0 if flags.has_message_strings_uuid() else 2
        if flags.is_main_exe():
            return 0
        if flags.is_shared_cache():
            return 2 if flags.has_large_offset() else 0
        if flags.is_uuid_relative():
            return 16
        raise UnknownFormatterFlagsError(flags)
