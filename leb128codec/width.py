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

"""
Supported integer widths and the bounds derived from them.

Every encode and decode call takes its width explicitly, the same bit-level algorithm is used for all widths and only
the bounds below change:

>>> Width.W8.max_groups
2
>>> Width.W64.max_groups
10
>>> Width.W32.bounds(signed=True)
(-2147483648, 2147483647)
>>> Width.W16.bounds(signed=False)
(0, 65535)
>>> Width.parse(128)
<Width.W128: 128>
>>> Width.parse(24)
Traceback (most recent call last):
    ...
ValueError: unsupported width: 24 (supported: 8, 16, 32, 64, 128)
"""

import struct
from enum import IntEnum

from typing_extensions import Self


class Width(IntEnum):
    W8 = 8
    W16 = 16
    W32 = 32
    W64 = 64
    W128 = 128

    @classmethod
    def parse(cls, width: int) -> Self:
        """Convert a plain int into a Width, raising ValueError for unsupported widths."""
        try:
            return cls(width)
        except ValueError:
            supported = ', '.join(str(int(w)) for w in cls)
            raise ValueError(f'unsupported width: {width} (supported: {supported})') from None

    @classmethod
    def native(cls) -> Self:
        """The width of the platform's native word (pointer size)."""
        return cls.parse(struct.calcsize('P') * 8)

    @property
    def max_groups(self) -> int:
        """Maximum number of 7-bit groups a value of this width can need, ceil(W/7)."""
        # none of the supported widths is a multiple of 7, so signed values never need an extra sign group
        return -(-self.value // 7)

    def upper_bound(self, *, signed: bool) -> int:
        if signed:
            return 2**(self.value - 1) - 1
        return 2**self.value - 1

    def lower_bound(self, *, signed: bool) -> int:
        if signed:
            return -(2**(self.value - 1))
        return 0

    def bounds(self, *, signed: bool) -> tuple[int, int]:
        return self.lower_bound(signed=signed), self.upper_bound(signed=signed)

    def fits(self, value: int, *, signed: bool) -> bool:
        lower, upper = self.bounds(signed=signed)
        return lower <= value <= upper

    def check_range(self, value: int, *, signed: bool) -> None:
        """Raise ValueError when value cannot be represented with this width and signedness."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        kind = 'signed' if signed else 'unsigned'
        if value > self.upper_bound(signed=signed):
            raise ValueError(f'{value} is above upper bound of {kind} {self.value}-bit integers')
        if value < self.lower_bound(signed=signed):
            raise ValueError(f'{value} is below lower bound of {kind} {self.value}-bit integers')
