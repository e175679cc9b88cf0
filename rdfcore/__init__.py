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

from .version import __version__

#===============================================================================

from .factory import TermFactory
from .graph import Graph, TripleSelection
from .terms import BlankNode, BlankNodeScope, IRI, Literal, Subject, Term
from .terms import isBlankNode, isIRI, isLiteral, isTerm
from .terms import RDF_LANGSTRING, XSD_STRING
from .triples import isTriple, Triple
from .utils import InvalidArgument, InvalidIRI, InvalidLanguageTag, Issue
from .utils import TermTypeError, UnsupportedOperation

#===============================================================================
#===============================================================================
