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

from typing import Any, Iterator

#===============================================================================

from .rdf import from_foreign
from .terms import BlankNode, IRI, Subject, Term
from .utils import InvalidArgument, TermTypeError

#===============================================================================

def as_subject(term: Any) -> Subject:
#====================================
    if term is None:
        raise InvalidArgument('Triple subject cannot be None')
    subject = from_foreign(term)
    if not isinstance(subject, (IRI, BlankNode)):
        raise TermTypeError(f'Subject must be an IRI or blank node, not {subject}')
    return subject

def as_predicate(term: Any) -> IRI:
#==================================
    if term is None:
        raise InvalidArgument('Triple predicate cannot be None')
    predicate = from_foreign(term)
    if not isinstance(predicate, IRI):
        raise TermTypeError(f'Predicate must be an IRI, not {predicate}')
    return predicate

def as_object(term: Any) -> Term:
#================================
    if term is None:
        raise InvalidArgument('Triple object cannot be None')
    return from_foreign(term)

#===============================================================================

class Triple:
    """
    An RDF statement.

    Components are validated for their position and any terms from another
    RDF library are copied into ``rdfcore`` terms. A triple unpacks as
    ``subject, predicate, object``.
    """
    __slots__ = ('__subject', '__predicate', '__object')

    def __init__(self, subject: Subject, predicate: IRI, object: Term):
        self.__subject = as_subject(subject)
        self.__predicate = as_predicate(predicate)
        self.__object = as_object(object)

    @classmethod
    def copy_of(cls, triple: Any) -> 'Triple':
    #=========================================
        if isinstance(triple, Triple):
            return triple
        if triple is None:
            raise InvalidArgument('Triple cannot be None')
        try:
            return cls(triple.subject, triple.predicate, triple.object)
        except AttributeError:
            raise TermTypeError(f'Not an RDF triple: {triple!r}')

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Triple):
            return NotImplemented
        return (self.__subject == other.__subject
            and self.__predicate == other.__predicate
            and self.__object == other.__object)

    def __hash__(self) -> int:
        return hash((self.__subject, self.__predicate, self.__object))

    def __iter__(self) -> Iterator[Term]:
        return iter((self.__subject, self.__predicate, self.__object))

    def __repr__(self) -> str:
        return f'Triple({self.__subject!r}, {self.__predicate!r}, {self.__object!r})'

    def __str__(self) -> str:
        return self.ntriples_string()

    @property
    def subject(self) -> Subject:
        return self.__subject

    @property
    def predicate(self) -> IRI:
        return self.__predicate

    @property
    def object(self) -> Term:
        return self.__object

    def ntriples_string(self) -> str:
    #================================
        return ' '.join([
            self.__subject.ntriples_string(),
            self.__predicate.ntriples_string(),
            self.__object.ntriples_string(),
            '.'
        ])

#===============================================================================

def isTriple(value: Any) -> bool:
    return isinstance(value, Triple)

#===============================================================================
#===============================================================================
