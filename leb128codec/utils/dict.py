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

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    """
    Recursively merges `override` into `base`, altering `base` in place.

    >>> base = dict(DEFAULT_WIDTH=64, nested=dict(a=1, b=2))
    >>> deep_merge(base, dict(STRICT_DECODING=True, nested=dict(b=3)))
    >>> base == dict(DEFAULT_WIDTH=64, STRICT_DECODING=True, nested=dict(a=1, b=3))
    True
    """
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
