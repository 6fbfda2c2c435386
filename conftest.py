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

import os

from leb128codec.conf import DEFAULT_SETTINGS_FILEPATH
from leb128codec.conf.get_settings import CONFIG_YAML_ENV_VAR
from leb128codec.log import LoggingOptions, LoggingOutput, setup_logging

# doctests and tests always start from the packaged defaults, unless a test config is given explicitly
os.environ[CONFIG_YAML_ENV_VAR] = os.environ.get('LEB128CODEC_TEST_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)

# structlog would print into the doctest output otherwise
setup_logging(logging_output=LoggingOutput.NULL, logging_options=LoggingOptions(debug=True))
