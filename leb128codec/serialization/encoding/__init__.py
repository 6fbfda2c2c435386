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
Encodings: pure functions between values and (de)serializers.

An encoding module pairs an `encode_*` function, writing to a `Serializer` and raising on values it cannot represent,
with a `decode_*` function reading from a `Deserializer` and returning a `Result`. Parameters that change the wire
format, like LEB128's width and signedness, are always explicit keyword arguments.
"""
