#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from typing import Iterator

import pytest

from leb128codec.conf import reset_global_settings


@pytest.fixture(autouse=True)
def clean_global_settings() -> Iterator[None]:
    """Every test starts and ends without cached settings, so env var changes made through monkeypatch take effect."""
    reset_global_settings()
    yield
    reset_global_settings()
