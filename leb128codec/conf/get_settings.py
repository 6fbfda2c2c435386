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
from typing import NamedTuple, Optional

from structlog import get_logger

from leb128codec.conf.settings import CodecSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'LEB128CODEC_CONFIG_YAML'


class SettingsReloadError(Exception):
    """Raised when the settings are requested from a different file than the one already loaded."""


class _SettingsMetadata(NamedTuple):
    source: str
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the codec settings.

    The settings are read from the yaml filepath in the 'LEB128CODEC_CONFIG_YAML' env var, or from the packaged
    default.yml when it is not set. They are loaded once and cached, asking again after the env var points to a
    different file is an error.
    """
    from leb128codec import conf
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, conf.DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def reset_global_settings() -> None:
    """Forget the cached settings, the next get_global_settings() call loads them again."""
    global _settings_singleton
    _settings_singleton = None


def _load_settings_singleton(source: str) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise SettingsReloadError('loading config twice with a different file')

        return _settings_singleton.settings

    log = logger.new(source=source)
    settings = CodecSettings.from_yaml(filepath=source)
    log.debug('codec settings loaded', settings=settings.model_dump())
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)

    return settings
