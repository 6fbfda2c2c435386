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

import re
from pathlib import Path
from typing import Optional

from structlog import get_logger

BASE_VERSION = '0.1.0'

# release pipelines drop a BUILD_VERSION file in the working directory, e.g. "1.2.3" or "1.2.3-rc.1"
BUILD_VERSION_FILE = Path('BUILD_VERSION')
BUILD_VERSION_PATTERN = re.compile(r'\d+\.\d+\.\d+(-rc\.\d+)?')

logger = get_logger()


def _read_build_version(path: Path) -> Optional[str]:
    """The version in `path`, or None when there is no such file or its contents are not a valid version."""
    if not path.is_file():
        return None
    build_version = path.read_text().strip()
    if BUILD_VERSION_PATTERN.fullmatch(build_version) is None:
        logger.warning('ignoring build version with an invalid format', build_version=build_version, path=str(path))
        return None
    return build_version


def _get_version() -> str:
    return _read_build_version(BUILD_VERSION_FILE) or f'{BASE_VERSION}-local'


__version__ = _get_version()
