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
This module exports the types and functions of the LEB128 codec that make up its public API.
"""

from leb128codec.codec import Source, decode_signed, decode_unsigned, encode_signed, encode_unsigned
from leb128codec.conf import CodecSettings, get_global_settings
from leb128codec.serialization import (
    BadDataError,
    Deserializer,
    NonCanonicalError,
    OutOfDataError,
    ReadError,
    SerializationError,
    Serializer,
    ValueOverflowError,
)
from leb128codec.serialization.adapters import MaxBytesExceededError
from leb128codec.serialization.encoding.leb128 import DecodeResult, encoded_size
from leb128codec.utils.result import Err, Ok, Result
from leb128codec.value import SLeb128, ULeb128
from leb128codec.version import __version__
from leb128codec.width import Width

__all__ = [
    '__version__',
    'encode_signed',
    'encode_unsigned',
    'decode_signed',
    'decode_unsigned',
    'encoded_size',
    'DecodeResult',
    'Source',
    'Width',
    'ULeb128',
    'SLeb128',
    'Ok',
    'Err',
    'Result',
    'Serializer',
    'Deserializer',
    'ReadError',
    'SerializationError',
    'BadDataError',
    'OutOfDataError',
    'ValueOverflowError',
    'NonCanonicalError',
    'MaxBytesExceededError',
    'CodecSettings',
    'get_global_settings',
]
