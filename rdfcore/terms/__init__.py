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
RDF terms.

The set of term kinds is closed: a ``Term`` is exactly one of ``IRI``,
``Literal`` or ``BlankNode``. Terms of different kinds never compare equal,
whatever their textual form.
"""

#===============================================================================

from typing import Any, final, Optional, TypeAlias
import uuid

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..utils import InvalidArgument

#===============================================================================

RDF_NS = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#'
XSD_NS = 'http://www.w3.org/2001/XMLSchema#'

# Fixed namespace for hashing unscoped blank node identifiers into labels
BLANK_NODE_NAMESPACE = uuid.UUID('7482d5ca-5e77-4dfa-92b5-85348e26061c')

#===============================================================================

def escape_string(lexical_form: str) -> str:
#===========================================
    return (lexical_form.replace('\\', '\\\\')
                        .replace('"', '\\"')
                        .replace('\n', '\\n')
                        .replace('\r', '\\r'))

def is_blank_node_label(identifier: str) -> bool:
#================================================
    try:
        oxigraph.BlankNode(identifier)
        return True
    except ValueError:
        return False

#===============================================================================

@final
class IRI:
    __slots__ = ('__value',)

    def __init__(self, value: str):
        self.__value = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IRI):
            return NotImplemented
        return self.__value == other.__value

    def __hash__(self) -> int:
        return hash((IRI, self.__value))

    def __repr__(self) -> str:
        return f'IRI({self.__value!r})'

    def __str__(self) -> str:
        return self.ntriples_string()

    @property
    def iri_string(self) -> str:
        return self.__value

    @property
    def value(self) -> str:
        return self.__value

    def ntriples_string(self) -> str:
    #================================
        return f'<{self.__value}>'

#===============================================================================

RDF_LANGSTRING = IRI(f'{RDF_NS}langString')
XSD_STRING = IRI(f'{XSD_NS}string')

#===============================================================================

@final
class Literal:
    """
    A lexical form with a datatype and, for ``rdf:langString``, a language tag.

    Language tags are lower-cased on construction, so that comparison
    is case-insensitive as BCP47 requires and hashing stays consistent.
    A tagged literal always has ``rdf:langString`` as its datatype and an
    untagged one defaults to ``xsd:string``.
    """
    __slots__ = ('__lexical_form', '__datatype', '__language_tag')

    def __init__(self, lexical_form: str, datatype: Optional[IRI]=None, language_tag: Optional[str]=None):
        self.__lexical_form = lexical_form
        if language_tag is not None:
            if datatype is not None and datatype != RDF_LANGSTRING:
                raise InvalidArgument(f'Language tagged literal cannot have datatype {datatype}')
            self.__language_tag: Optional[str] = language_tag.lower()
            self.__datatype = RDF_LANGSTRING
        else:
            if datatype == RDF_LANGSTRING:
                raise InvalidArgument('A rdf:langString literal must have a language tag')
            self.__language_tag = None
            self.__datatype = datatype if datatype is not None else XSD_STRING

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return (self.__lexical_form == other.__lexical_form
            and self.__datatype == other.__datatype
            and self.__language_tag == other.__language_tag)

    def __hash__(self) -> int:
        return hash((Literal, self.__lexical_form, self.__datatype, self.__language_tag))

    def __repr__(self) -> str:
        if self.__language_tag is not None:
            return f'Literal({self.__lexical_form!r}, language_tag={self.__language_tag!r})'
        elif self.__datatype == XSD_STRING:
            return f'Literal({self.__lexical_form!r})'
        return f'Literal({self.__lexical_form!r}, datatype={self.__datatype!r})'

    def __str__(self) -> str:
        return self.ntriples_string()

    @property
    def datatype(self) -> IRI:
        return self.__datatype

    @property
    def language_tag(self) -> Optional[str]:
        return self.__language_tag

    @property
    def lexical_form(self) -> str:
        return self.__lexical_form

    @property
    def value(self) -> str:
        return self.__lexical_form

    def ntriples_string(self) -> str:
    #================================
        quoted = f'"{escape_string(self.__lexical_form)}"'
        if self.__language_tag is not None:
            return f'{quoted}@{self.__language_tag}'
        elif self.__datatype == XSD_STRING:
            return quoted
        return f'{quoted}^^{self.__datatype.ntriples_string()}'

#===============================================================================

class BlankNodeScope:
    """
    An opaque token partitioning blank node identifiers.

    Scopes compare by identity. A blank node only holds a reference to
    its scope, so a scope's owner (a graph or a factory session) may go
    away without affecting the blank nodes created within it.
    """
    __slots__ = ('__name', '__namespace')

    def __init__(self, name: Optional[str]=None):
        self.__name = name
        self.__namespace = uuid.uuid4()

    def __repr__(self) -> str:
        name = f' {self.__name}' if self.__name else ''
        return f'<BlankNodeScope{name} {self.__namespace}>'

    @property
    def name(self) -> Optional[str]:
        return self.__name

    @property
    def namespace(self) -> uuid.UUID:
        return self.__namespace

#===============================================================================

@final
class BlankNode:
    """
    An existential node, identified by an identifier within an optional scope.

    Two blank nodes are equal when their identifiers are equal and they
    share the same scope (or neither has one). The N-Triples label is the
    identifier itself when the node is unscoped and the identifier is a legal
    label, otherwise a UUIDv5 of the identifier within the scope's namespace.
    """
    __slots__ = ('__identifier', '__scope', '__label')

    def __init__(self, identifier: str, scope: Optional[BlankNodeScope]=None):
        self.__identifier = identifier
        self.__scope = scope
        if scope is None and is_blank_node_label(identifier):
            self.__label = identifier
        else:
            namespace = BLANK_NODE_NAMESPACE if scope is None else scope.namespace
            self.__label = str(uuid.uuid5(namespace, identifier))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BlankNode):
            return NotImplemented
        return (self.__identifier == other.__identifier
            and self.__scope is other.__scope)

    def __hash__(self) -> int:
        return hash((BlankNode, self.__identifier, id(self.__scope)))

    def __repr__(self) -> str:
        if self.__scope is None:
            return f'BlankNode({self.__identifier!r})'
        return f'BlankNode({self.__identifier!r}, scope={self.__scope!r})'

    def __str__(self) -> str:
        return self.ntriples_string()

    @property
    def identifier(self) -> str:
        return self.__identifier

    @property
    def label(self) -> str:
        return self.__label

    @property
    def scope(self) -> Optional[BlankNodeScope]:
        return self.__scope

    @property
    def value(self) -> str:
        return self.__identifier

    def ntriples_string(self) -> str:
    #================================
        return f'_:{self.__label}'

#===============================================================================

Term: TypeAlias = IRI | Literal | BlankNode
Subject: TypeAlias = IRI | BlankNode

#===============================================================================

def isBlankNode(term: Any) -> bool:
    return isinstance(term, BlankNode)

def isIRI(term: Any) -> bool:
    return isinstance(term, IRI)

def isLiteral(term: Any) -> bool:
    return isinstance(term, Literal)

def isTerm(term: Any) -> bool:
    return isinstance(term, (IRI, Literal, BlankNode))

#===============================================================================
#===============================================================================
