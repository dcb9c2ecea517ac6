# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Custom exceptions for the unifiedlog-formatters library."""


class ParserError(Exception):
    """Base exception for parser errors."""
    pass


class TruncatedInputError(ParserError):
    """Not enough bytes left to read a field."""
    def __init__(self, needed: int = 0, available: int = 0):
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated input. Needed {needed} bytes. Got: {available}"
        )


class UnknownFormatterFlagsError(ParserError):
    """Flag word does not select a known formatter location."""
    def __init__(self, flags):
        self.flags = flags
        super().__init__(f"Unknown Firehose formatter flag: {int(flags)} ({flags!r})")
