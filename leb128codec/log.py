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
Logging setup for applications and test suites using the codec.

Modules of this package only ever call `structlog.get_logger()`. Nothing is configured on import, call
`setup_logging()` once at startup to route those loggers through the standard `logging` module.
"""

import logging
import logging.config
from enum import IntEnum, auto
from typing import Any, NamedTuple

import structlog
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer
from structlog.typing import EventDict, Processor
from typing_extensions import assert_never


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


class LoggingOptions(NamedTuple):
    debug: bool


def _renderer(logging_output: LoggingOutput) -> Processor | None:
    match logging_output:
        case LoggingOutput.NULL:
            return None
        case LoggingOutput.PRETTY:
            return ConsoleRenderer(colors=True)
        case LoggingOutput.JSON:
            return JSONRenderer()
        case _:
            assert_never(logging_output)


def _handler_config(logging_output: LoggingOutput, foreign_pre_chain: list[Processor]) -> dict[str, Any]:
    renderer = _renderer(logging_output)
    if renderer is None:
        return {'class': 'logging.NullHandler'}
    return {
        'class': 'logging.StreamHandler',
        'formatter': {
            '()': structlog.stdlib.ProcessorFormatter,
            'processor': renderer,
            'foreign_pre_chain': foreign_pre_chain,
        },
    }


def setup_logging(
    *,
    logging_output: LoggingOutput,
    logging_options: LoggingOptions,
    extra_log_info: dict[str, str] | None = None,
) -> None:
    """Route structlog through stdlib logging, rendering with `logging_output`.

    Every event gets the keys of `extra_log_info` added, which must not collide with keys the event already has.
    """
    timestamper = structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S')
    # applied to records that come from stdlib loggers instead of structlog
    foreign_pre_chain: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]
    handler = _handler_config(logging_output, foreign_pre_chain)
    formatter = handler.pop('formatter', None)

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'codec': formatter} if formatter is not None else {},
        'handlers': {'codec': handler | ({'formatter': 'codec'} if formatter is not None else {})},
        'root': {
            'handlers': ['codec'],
            'level': 'DEBUG' if logging_options.debug else 'INFO',
        },
    })

    extra_log_info = dict(extra_log_info or {})

    def add_extra_log_info(_logger: Any, _method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in extra_log_info.items():
            assert key not in event_dict, f'extra log info conflicts with the event key {key!r}'
            event_dict[key] = value
        return event_dict

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_extra_log_info,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
