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

import pytest

#===============================================================================

from rdfcore import TermFactory, UnsupportedOperation

#===============================================================================

@pytest.fixture
def factory() -> TermFactory:
#============================
    return TermFactory()

def call_supported(operation, *args, **kwds):
#============================================
    try:
        return operation(*args, **kwds)
    except UnsupportedOperation as e:
        pytest.skip(f'Not supported: {e.reason}')

@pytest.fixture
def supported():
#===============
    """
    Call an optional factory operation, skipping the test if the factory
    doesn't provide it.
    """
    return call_supported

#===============================================================================
