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

from pathlib import Path
import re
from typing import Any, Iterator, Optional, TYPE_CHECKING

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..terms import BlankNode, IRI, Literal, Term
from ..utils import InvalidIRI, InvalidLanguageTag, log, UnsupportedOperation

if TYPE_CHECKING:
    from ..graph import Graph

#===============================================================================

RDF_FORMATS = {
    'ntriples': oxigraph.RdfFormat.N_TRIPLES,
    'turtle': oxigraph.RdfFormat.TURTLE,
}

# Relative references are validated by resolving them against this base
RELATIVE_IRI_BASE = 'http://relative.invalid/base/'

IRI_SCHEME = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*:')

#===============================================================================

def is_relative_iri(iri: str) -> bool:
    return IRI_SCHEME.match(iri) is None

def validate_iri(iri: str):
#==========================
    """
    Check the text of an absolute or relative IRI as given.

    A relative reference is checked by parsing it as a Turtle IRI against
    ``RELATIVE_IRI_BASE``, so that oxiri resolves and validates it. Turtle
    would decode ``\\u`` escapes, which are not legal in the IRI text itself.
    """
    try:
        if not is_relative_iri(iri):
            oxigraph.NamedNode(iri)
        elif '\\' in iri:
            raise ValueError('backslash is not allowed in an IRI')
        else:
            list(oxigraph.parse(input=f'<{iri}> <{iri}> <{iri}> .',
                                format=oxigraph.RdfFormat.TURTLE,
                                base_iri=RELATIVE_IRI_BASE))
    except (SyntaxError, ValueError) as e:
        log.debug('Rejected IRI', iri=iri, error=str(e))
        raise InvalidIRI(f'Invalid IRI {iri!r}: {e}')

def validate_language_tag(language_tag: str):
#============================================
    try:
        oxigraph.Literal('', language=language_tag)
    except (TypeError, ValueError) as e:
        raise InvalidLanguageTag(f'Invalid language tag {language_tag!r}: {e}')

#===============================================================================

def from_oxigraph(term: Any) -> Optional[Term]:
#==============================================
    match term:
        case oxigraph.NamedNode():
            return IRI(term.value)
        case oxigraph.BlankNode():
            return BlankNode(term.value)
        case oxigraph.Literal():
            if term.language is not None:
                return Literal(term.value, language_tag=term.language)
            return Literal(term.value, datatype=IRI(term.datatype.value))

def to_oxigraph(term: Term) -> oxigraph.NamedNode | oxigraph.BlankNode | oxigraph.Literal:
#=========================================================================================
    try:
        match term:
            case IRI():
                return oxigraph.NamedNode(term.iri_string)
            case BlankNode():
                return oxigraph.BlankNode(term.label)
            case Literal():
                if term.language_tag is not None:
                    return oxigraph.Literal(term.lexical_form, language=term.language_tag)
                return oxigraph.Literal(term.lexical_form,
                                        datatype=oxigraph.NamedNode(term.datatype.iri_string))
    except ValueError as e:
        # pyoxigraph only has absolute IRIs
        raise UnsupportedOperation(f'Cannot convert {term} to pyoxigraph: {e}')
    raise UnsupportedOperation(f'Not an RDF term: {term!r}')

#===============================================================================

def to_oxigraph_store(graph: 'Graph') -> oxigraph.Store:
#=======================================================
    store = oxigraph.Store()
    store.extend([
        oxigraph.Quad(to_oxigraph(triple.subject),          # pyright: ignore[reportArgumentType]
                      to_oxigraph(triple.predicate),        # pyright: ignore[reportArgumentType]
                      to_oxigraph(triple.object))
            for triple in graph
    ])
    return store

def parse_statements(source: str|Path, format: str='turtle', base_iri: Optional[str]=None) -> Iterator[Any]:
#===========================================================================================================
    if (rdf_format := RDF_FORMATS.get(format)) is None:
        raise UnsupportedOperation(f'Unsupported RDF format: {format}')
    return oxigraph.parse(path=source, format=rdf_format, base_iri=base_iri)

#===============================================================================
#===============================================================================
