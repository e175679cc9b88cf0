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

"""
Copy terms from other RDF libraries into ``rdfcore`` terms.

A triple or graph built from foreign terms must compare them with
``rdfcore`` equality, so every foreign term is copied on entry. Blank node
identifiers are kept verbatim and the copies are unscoped.
"""

#===============================================================================

from typing import Any, Optional

#===============================================================================

from ..terms import BlankNode, IRI, Literal, Term, isTerm
from ..utils import InvalidArgument, log, TermTypeError

from .oxigraph import from_oxigraph, validate_iri, validate_language_tag
from .rdflib_support import from_rdflib

#===============================================================================

def from_protocol(term: Any) -> Optional[Term]:
#==============================================
    if (lexical_form := getattr(term, 'lexical_form', None)) is not None:
        language_tag = getattr(term, 'language_tag', None)
        if language_tag is not None:
            language_tag = str(language_tag)
            validate_language_tag(language_tag)
            return Literal(str(lexical_form), language_tag=language_tag)
        datatype = getattr(term, 'datatype', None)
        if datatype is not None:
            datatype = from_foreign(datatype)
            if not isinstance(datatype, IRI):
                raise TermTypeError(f'Literal datatype must be an IRI: {datatype!r}')
        return Literal(str(lexical_form), datatype=datatype)
    elif (identifier := getattr(term, 'identifier', None)) is not None:
        return BlankNode(str(identifier))
    elif (iri_string := getattr(term, 'iri_string', None)) is not None:
        iri_string = str(iri_string)
        validate_iri(iri_string)
        return IRI(iri_string)

#===============================================================================

FOREIGN_CONVERTERS = [
    from_oxigraph,
    from_rdflib,
    from_protocol,
]

def from_foreign(term: Any) -> Term:
#===================================
    if term is None:
        raise InvalidArgument('RDF term cannot be None')
    if isTerm(term):
        return term
    for converter in FOREIGN_CONVERTERS:
        if (converted := converter(term)) is not None:
            log.debug('Copied foreign term', source=type(term).__name__, term=str(converted))
            return converted
    raise TermTypeError(f'Not an RDF term: {term!r}')

def ntriples_string(term: Any) -> str:
#=====================================
    if isTerm(term):
        return term.ntriples_string()
    for attr in ('ntriples_string', 'n3'):
        if callable(method := getattr(term, attr, None)):
            return str(method())
    return str(term)

#===============================================================================
#===============================================================================
