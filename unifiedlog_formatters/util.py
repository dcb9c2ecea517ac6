# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Bounded field readers used by the formatter flag parser."""

import logging
import struct
from typing import Tuple

from .error import TruncatedInputError

logger = logging.getLogger(__name__)


def _check_size(data: bytes, size: int) -> None:
    if len(data) < size:
        logger.error(
            f"[unifiedlog-formatters] Need {size} bytes, only {len(data)} remaining"
        )
        raise TruncatedInputError(needed=size, available=len(data))


def le_u16(data: bytes) -> Tuple[bytes, int]:
    """Read a little endian u16.

    Args:
        data: The byte data to read from

    Returns:
        Tuple of (remaining data, value)

    Raises:
        TruncatedInputError: If fewer than 2 bytes remain
    """
    _check_size(data, 2)
    value = struct.unpack_from('<H', data, 0)[0]
    return (data[2:], value)


def be_u128(data: bytes) -> Tuple[bytes, int]:
    """Read a big endian u128.

    Args:
        data: The byte data to read from

    Returns:
        Tuple of (remaining data, value)

    Raises:
        TruncatedInputError: If fewer than 16 bytes remain
    """
    _check_size(data, 16)
    high, low = struct.unpack_from('>QQ', data, 0)
    return (data[16:], (high << 64) | low)


def format_uuid(value: int) -> str:
    """Format a 128 bit value as a 32 character uppercase hex UUID string."""
    return f"{value:032X}"
