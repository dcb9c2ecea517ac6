# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Firehose log entry flag word."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class FormatterLocation(Enum):
    """File the base format string is located in."""
    MAIN_EXE = 0x2
    SHARED_CACHE = 0x4
    ABSOLUTE = 0x8
    UUID_RELATIVE = 0xa
    LARGE_SHARED_CACHE = 0xc


@dataclass(frozen=True, repr=False)
class FirehoseFlags:
    """16 bit flag word of a Firehose log entry.

    The low bits are read two ways: as independent flags (has_*) and, after
    masking with 0xe, as the formatter location sub flag (is_*). 0x2 is both
    the message strings UUID flag and the main_exe location.
    """
    value: int = 0

    # has_current_aid flag
    ACTIVITY_ID_CURRENT = 0x1
    # message strings UUID flag
    MESSAGE_STRINGS_UUID = 0x2
    # has_private_data flag
    PRIVATE_STRING_RANGE = 0x100
    # has_subsystem flag. In Signpost log entries this is the subsystem flag
    SUBSYSTEM = 0x200
    # has_rules flag
    HAS_RULES = 0x400
    # has_oversize flag
    DATA_REF = 0x800
    HAS_NAME = 0x8000

    # Get only sub flags
    FLAGS_CHECK = 0xe

    # large_shared_cache flag. Offset to format string is larger than normal
    LARGE_SHARED_CACHE = 0xc
    # has_large_offset flag. Offset to format string is larger than normal
    LARGE_OFFSET = 0x20
    # absolute flag. The log uses an alternative index number that points to
    # the UUID file name in the Catalog which contains the format string
    ABSOLUTE = 0x8
    # main_exe flag. A UUID file contains the format string
    MAIN_EXE = 0x2
    # shared_cache flag. DSC file contains the format string
    SHARED_CACHE = 0x4
    # uuid_relative flag. The UUID file name is in the log data (instead of the Catalog)
    UUID_RELATIVE = 0xa

    def __post_init__(self):
        object.__setattr__(self, 'value', int(self.value) & 0xffff)

    @classmethod
    def from_value(cls, flags: Union[int, 'FirehoseFlags']) -> 'FirehoseFlags':
        """Wrap a raw flag value. Existing FirehoseFlags are returned as is."""
        if isinstance(flags, FirehoseFlags):
            return flags
        return cls(flags)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"FirehoseFlags(0x{self.value:X})"

    def has_flag(self, flag_mask: int) -> bool:
        return (self.value & flag_mask) != 0

    def has_current_aid(self) -> bool:
        return self.has_flag(self.ACTIVITY_ID_CURRENT)

    def has_private_string(self) -> bool:
        return self.has_flag(self.PRIVATE_STRING_RANGE)

    def has_message_strings_uuid(self) -> bool:
        return self.has_flag(self.MESSAGE_STRINGS_UUID)

    def has_subsystem(self) -> bool:
        return self.has_flag(self.SUBSYSTEM)

    def has_rules(self) -> bool:
        return self.has_flag(self.HAS_RULES)

    def has_data_ref(self) -> bool:
        return self.has_flag(self.DATA_REF)

    def has_name(self) -> bool:
        return self.has_flag(self.HAS_NAME)

    def flags(self) -> int:
        """Formatter location sub flag (value & 0xe)."""
        return self.value & self.FLAGS_CHECK

    location_code = flags

    def is_large_offset(self) -> bool:
        # 0x20 is outside FLAGS_CHECK so this never matches. Kept to produce
        # the same output as existing Unified Log parsers.
        return self.flags() == self.LARGE_OFFSET

    def has_large_offset(self) -> bool:
        return self.has_flag(self.LARGE_OFFSET)

    def is_large_shared_cache(self) -> bool:
        return self.flags() == self.LARGE_SHARED_CACHE

    def has_large_shared_cache(self) -> bool:
        return self.has_flag(self.LARGE_SHARED_CACHE)

    def is_absolute(self) -> bool:
        return self.flags() == self.ABSOLUTE

    def has_absolute(self) -> bool:
        return self.has_flag(self.ABSOLUTE)

    def is_main_exe(self) -> bool:
        return self.flags() == self.MAIN_EXE

    def has_main_exe(self) -> bool:
        return self.has_flag(self.MAIN_EXE)

    def is_shared_cache(self) -> bool:
        return self.flags() == self.SHARED_CACHE

    def has_shared_cache(self) -> bool:
        return self.has_flag(self.SHARED_CACHE)

    def is_uuid_relative(self) -> bool:
        return self.flags() == self.UUID_RELATIVE

    def has_uuid_relative(self) -> bool:
        return self.has_flag(self.UUID_RELATIVE)

    def location(self) -> Optional[FormatterLocation]:
        """Formatter location selected by the sub flag, None if unknown."""
        try:
            return FormatterLocation(self.flags())
        except ValueError:
            return None
