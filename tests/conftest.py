# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Pytest fixtures for formatter flag tests."""

import pytest


@pytest.fixture
def large_shared_cache_data() -> bytes:
    """Non-activity entry data with large offset and large shared cache values."""
    return bytes([
        1, 0, 2, 0, 14, 0, 34, 2, 0, 4, 135, 16, 0, 0, 34, 4, 0, 0, 5, 0, 100, 101, 110, 121, 0,
    ])


@pytest.fixture
def absolute_alt_index_data() -> bytes:
    """Absolute entry data starting with an alternative index of 8."""
    return bytes([8, 0, 17, 166, 251, 2, 128, 255, 0, 0])


@pytest.fixture
def absolute_alt_uuid_data() -> bytes:
    """Absolute entry data followed by the entry's item data."""
    return bytes([
        128, 255, 2, 13, 34, 4, 0, 0, 6, 0, 34, 4, 6, 0, 11, 0, 34, 4, 17, 0, 7, 0, 2, 4, 8, 0,
        0, 0, 2, 8, 0, 0, 0, 0, 0, 0, 0, 0, 2, 4, 0, 0, 0, 0, 2, 8, 0, 0, 0, 0, 0, 0, 0, 0, 34,
        4, 24, 0, 3, 0, 34, 4, 27, 0, 3, 0, 2, 8, 156, 17, 7, 98, 0, 0, 0, 0, 2, 8, 156, 17, 7,
        98, 0, 0, 0, 0, 2, 4, 0, 0, 0, 0, 34, 4, 30, 0, 3, 0, 65, 67, 77, 82, 77, 0, 95, 108,
        111, 103, 80, 111, 108, 105, 99, 121, 0, 83, 65, 86, 73, 78, 71, 0, 78, 79, 0, 78, 79,
        0, 78, 79, 0,
    ])


@pytest.fixture
def main_exe_data() -> bytes:
    """Main exe entry data. Nothing belongs to the formatter."""
    return bytes([186, 0, 0, 0])


@pytest.fixture
def shared_cache_data() -> bytes:
    """Shared cache entry data followed by item data."""
    return bytes([
        23, 1, 34, 1, 66, 4, 0, 0, 35, 0, 83, 65, 83, 83, 101, 115, 115, 105, 111, 110, 83,
        116, 97, 116, 101, 70, 111, 114, 85, 115, 101, 114, 58, 49, 50, 52, 54, 58, 32, 101,
        110, 116, 101, 114, 0,
    ])


@pytest.fixture
def uuid_relative_data() -> bytes:
    """UUID relative entry data: a 16 byte UUID followed by 2 unrelated bytes."""
    return bytes([
        123, 13, 55, 117, 241, 144, 62, 33, 186, 19, 4, 71, 196, 27, 135, 67, 0, 0,
    ])
