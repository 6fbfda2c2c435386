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

from pathlib import Path
from typing import Union

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from typing_extensions import Self


class BaseModel(PydanticBaseModel):
    """Project-wide pydantic model: immutable and rejecting unknown fields.

    See https://docs.pydantic.dev/latest/concepts/config/ for what each setting does.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> Self:
        """Validate the contents of a yaml file, which may use the 'extends' key to inherit from another file."""
        from leb128codec.utils.yaml import dict_from_extended_yaml
        return cls.model_validate(dict_from_extended_yaml(filepath=filepath))

    def json_dumpb(self) -> bytes:
        """Compact JSON of the model, as UTF-8 bytes."""
        return self.model_dump_json().encode('utf-8')
