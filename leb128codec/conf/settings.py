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

from typing import Optional

from pydantic import field_validator

from leb128codec.utils.pydantic import BaseModel
from leb128codec.width import Width


class CodecSettings(BaseModel):
    # Width used by encode_*/decode_* when the caller does not pass one
    DEFAULT_WIDTH: int = Width.W64.value

    # Reject non-minimal encodings when decoding, unless the call says otherwise
    STRICT_DECODING: bool = False

    # Byte budget applied to every high-level encode/decode call, None means no budget besides the width bound
    DEFAULT_MAX_BYTES: Optional[int] = None

    @field_validator('DEFAULT_WIDTH')
    @classmethod
    def _validate_default_width(cls, width: int) -> int:
        return int(Width.parse(width))

    @field_validator('DEFAULT_MAX_BYTES')
    @classmethod
    def _validate_default_max_bytes(cls, max_bytes: Optional[int]) -> Optional[int]:
        if max_bytes is not None and max_bytes < 1:
            raise ValueError('DEFAULT_MAX_BYTES must be a positive integer or null')
        return max_bytes

    @property
    def default_width(self) -> Width:
        return Width.parse(self.DEFAULT_WIDTH)
