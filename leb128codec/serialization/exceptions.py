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

from typing import TypeAlias


class SerializationError(Exception):
    """Base class for every error reported by a serializer, deserializer or encoding."""


class BadDataError(SerializationError):
    """The bytes read do not form a valid value for the requested encoding."""


class OutOfDataError(SerializationError, ValueError):
    """The source was exhausted before a complete value could be read.

    For LEB128 this means a group with the continuation bit set was the last byte available.
    """


class ValueOverflowError(BadDataError, OverflowError):
    """The decoded value cannot be represented in the requested width."""


class NonCanonicalError(BadDataError):
    """The value was encoded with more groups than needed, only reported by strict decoding."""


# Errors a byte source can report: a `SerializationError`, or the `OSError` raised by the underlying medium, passed
# through as the very same instance.
ReadError: TypeAlias = SerializationError | OSError
