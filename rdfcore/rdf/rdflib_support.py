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

from typing import Any, Optional

#===============================================================================

import rdflib

#===============================================================================

from ..terms import BlankNode, IRI, Literal, Term

from .oxigraph import validate_iri

#===============================================================================

def from_rdflib(term: Any) -> Optional[Term]:
#============================================
    if isinstance(term, rdflib.URIRef):
        validate_iri(str(term))
        return IRI(str(term))
    elif isinstance(term, rdflib.BNode):
        return BlankNode(str(term))
    elif isinstance(term, rdflib.Literal):
        if term.language is not None:
            return Literal(str(term), language_tag=term.language)
        datatype = IRI(str(term.datatype)) if term.datatype is not None else None
        return Literal(str(term), datatype=datatype)

def to_rdflib(term: Term) -> rdflib.URIRef | rdflib.BNode | rdflib.Literal:
#==========================================================================
    match term:
        case IRI():
            return rdflib.URIRef(term.iri_string)
        case BlankNode():
            return rdflib.BNode(term.label)
        case Literal():
            if term.language_tag is not None:
                return rdflib.Literal(term.lexical_form, lang=term.language_tag)
            return rdflib.Literal(term.lexical_form, datatype=rdflib.URIRef(term.datatype.iri_string))

#===============================================================================
#===============================================================================
