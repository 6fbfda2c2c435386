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
from typing import Any, Union

import yaml

from leb128codec.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Load a yaml file whose top level is a mapping, an empty file gives an empty dict."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{path}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{path}' cannot be parsed as a dictionary")
    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """
    Like `dict_from_yaml`, but the file can inherit from another one.

    The reserved 'extends' key holds the path of the base file, relative to the extending file. The base is loaded
    (recursively) and the extending file's values are deep-merged over it. The 'extends' key itself is dropped.
    """
    path = Path(filepath)
    contents = dict_from_yaml(filepath=path)
    base = contents.pop(_EXTENDS_KEY, None)
    if not base:
        return contents

    base_path = path.parent / str(base)
    if not base_path.is_file():
        raise ValueError(f"'{base_path}' is not a file")
    if base_path.resolve() == path.resolve():
        raise ValueError('a yaml file cannot extend itself')

    try:
        merged = dict_from_extended_yaml(filepath=base_path)
    except RecursionError as e:
        raise ValueError('Cannot parse yaml with recursive extensions.') from e

    deep_merge(merged, contents)
    return merged
