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
The construction entry point for terms, triples and graphs.

Every value a ``TermFactory`` hands out has been validated, so the
invariants of the term model hold for anything reaching a ``Graph``.
"""

#===============================================================================

from typing import Any, Optional
import uuid

#===============================================================================

from .graph import Graph
from .rdf.oxigraph import is_relative_iri, validate_iri, validate_language_tag
from .terms import BlankNode, BlankNodeScope, IRI, Literal, RDF_LANGSTRING, Subject, Term
from .triples import as_predicate, Triple
from .utils import InvalidArgument, UnsupportedOperation

#===============================================================================

class TermFactory:
    """
    Create terms, triples and graphs.

    :param relative_iris: Accept relative IRI references in ``create_iri()``.
        When false, a relative reference raises ``UnsupportedOperation``.
    :param name: An optional name for the factory's blank node scope.

    Blank nodes created from an identifier are scoped to the factory (or
    to an explicitly given scope), so the same identifier always gives equal
    blank nodes from one factory and unequal ones from different factories.
    """
    def __init__(self, relative_iris: bool=True, name: Optional[str]=None):
        self.__relative_iris = relative_iris
        self.__scope = BlankNodeScope(name)

    @property
    def scope(self) -> BlankNodeScope:
        return self.__scope

    def create_blank_node(self, identifier: Optional[str]=None,
                          scope: Optional[BlankNodeScope|Graph]=None) -> BlankNode:
    #=============================================================================
        if identifier is None:
            if scope is not None:
                raise InvalidArgument('A fresh blank node cannot be given a scope')
            # uuid4 is random and safe to call from any thread
            return BlankNode(str(uuid.uuid4()))
        if not isinstance(identifier, str) or identifier == '':
            raise InvalidArgument('Blank node identifier must be a non-empty string')
        if isinstance(scope, Graph):
            scope = scope.scope
        return BlankNode(identifier, self.__scope if scope is None else scope)

    def create_graph(self, name: Optional[str]=None) -> Graph:
    #=========================================================
        return Graph(name)

    def create_iri(self, iri: str, local_name: Optional[str]=None) -> IRI:
    #=====================================================================
        if iri is None or not isinstance(iri, str):
            raise InvalidArgument('IRI must be a string')
        if local_name is not None:
            iri = f'{iri}{local_name}'
        if is_relative_iri(iri) and not self.__relative_iris:
            raise UnsupportedOperation(f'Relative IRIs are not supported: {iri}')
        validate_iri(iri)
        return IRI(iri)

    def create_literal(self, lexical_form: str, language_tag: Optional[str]=None,
                       datatype: Optional[IRI|str]=None) -> Literal:
    #===============================================================
        if lexical_form is None:
            raise InvalidArgument('Literal must have a lexical form')
        if not isinstance(lexical_form, str):
            raise InvalidArgument(f'Lexical form must be a string: {lexical_form!r}')
        if isinstance(datatype, str):
            datatype = self.create_iri(datatype)
        elif datatype is not None:
            datatype = as_predicate(datatype)       # Any IRI, copied if foreign
        if language_tag is None:
            if datatype == RDF_LANGSTRING:
                raise InvalidArgument('A rdf:langString literal must have a language tag')
            return Literal(lexical_form, datatype=datatype)
        if datatype is not None and datatype != RDF_LANGSTRING:
            raise InvalidArgument(f'Language tagged literal cannot have datatype {datatype}')
        validate_language_tag(language_tag)
        return Literal(lexical_form, language_tag=language_tag)

    def create_triple(self, subject: Subject, predicate: IRI, object: Term) -> Triple:
    #=================================================================================
        return Triple(subject, predicate, object)

    def copy_triple(self, triple: Any) -> Triple:
    #============================================
        return Triple.copy_of(triple)

#===============================================================================
#===============================================================================
