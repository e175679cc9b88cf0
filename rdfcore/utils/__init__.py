#===============================================================================
#
#  rdfcore -- an in-memory RDF 1.1 model
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import logging
import os
from typing import Any

#===============================================================================

import structlog
from structlog.dev import BRIGHT, GREEN, RESET_ALL

#===============================================================================

LOG_LEVEL_ENVIRONMENT = 'RDFCORE_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'

#===============================================================================

def log_level(level: int|str|None=None) -> int:
#==============================================
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENVIRONMENT, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level
    levels = logging.getLevelNamesMapping()
    if (value := levels.get(level.strip().upper())) is None:
        raise InvalidArgument(f'Unknown log level: {level}')
    return value

def configure_logging(level: int|str|None=None):
#===============================================
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=True)
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level(level)),
        cache_logger_on_first_use=False
    )

log = structlog.get_logger('rdfcore')

def pretty_log(s: Any) -> str:
#=============================
    return f'{RESET_ALL}{GREEN}{str(s)}{RESET_ALL}{BRIGHT}'

#===============================================================================
#===============================================================================

class Issue(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.__reason = reason

    @property
    def reason(self):
        return self.__reason

def make_issue(e: Exception) -> Issue:
#=====================================
    if isinstance(e, Issue):
        return e
    issue = Issue(str(e))
    issue.__traceback__ = e.__traceback__
    return issue

#===============================================================================

class InvalidArgument(Issue, ValueError):
    """A required input is missing, empty or malformed."""

class InvalidIRI(InvalidArgument):
    """Text that is not a legal absolute or relative IRI."""

class InvalidLanguageTag(InvalidArgument):
    """A language tag that is not well-formed BCP47."""

class TermTypeError(Issue, TypeError):
    """A term used in a triple position its kind forbids."""

class UnsupportedOperation(Issue, NotImplementedError):
    """
    The construction is not supported by this factory.

    Callers should treat this as a missing capability, not as a failure.
    """

#===============================================================================

configure_logging()

#===============================================================================
#===============================================================================
