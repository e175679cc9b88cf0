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
An in-memory RDF graph.

Triples are held in an insertion-ordered store with an index for each of
the subject, predicate and object positions. A pattern query starts from
the smallest index matching a bound position and then checks every bound
position using term equality, so results are those of a linear scan.

All access to the store is guarded by a re-entrant lock and queries return
a snapshot of the matching triples, so a selection may be iterated while
the graph is being changed.
"""

#===============================================================================

from threading import RLock
from typing import Any, Iterable, Iterator, Optional, Self, TypeAlias

#===============================================================================

from ..rdf import from_foreign, ntriples_string
from ..terms import BlankNodeScope, Term
from ..triples import Triple
from ..utils import InvalidArgument, log, TermTypeError

#===============================================================================

TO_STRING_MAX = 10

#===============================================================================

# A bound pattern position is either one of our terms or, for a foreign
# term that cannot be copied, its N-Triples string.
PatternTerm: TypeAlias = Term | str | None
Pattern: TypeAlias = tuple[PatternTerm, PatternTerm, PatternTerm]

def pattern_term(term: Any) -> PatternTerm:
#==========================================
    if term is None:
        return None
    try:
        return from_foreign(term)
    except TermTypeError:
        return ntriples_string(term)

def is_triple_like(value: Any) -> bool:
#======================================
    return (isinstance(value, Triple)
         or all(hasattr(value, attr) for attr in ('subject', 'predicate', 'object')))

def matches(triple: Triple, pattern: Pattern) -> bool:
#=====================================================
    for term, bound in zip(triple, pattern):
        if bound is None:
            continue
        elif isinstance(bound, str):
            if term.ntriples_string() != bound:
                return False
        elif term != bound:
            return False
    return True

#===============================================================================

class TripleSelection:
    """
    The triples matching a pattern, copied when the query was made.

    A selection is finite and may be iterated any number of times.
    """
    def __init__(self, triples: Iterable[Triple]):
        self.__triples = tuple(triples)

    def __bool__(self) -> bool:
        return len(self.__triples) > 0

    def __contains__(self, triple: Any) -> bool:
        return triple in self.__triples

    def __iter__(self) -> Iterator[Triple]:
        return iter(self.__triples)

    def __len__(self) -> int:
        return len(self.__triples)

    def __repr__(self) -> str:
        return f'<TripleSelection of {len(self.__triples)} triples>'

    def first(self) -> Optional[Triple]:
    #===================================
        return self.__triples[0] if self.__triples else None

#===============================================================================

class Graph:
    def __init__(self, name: Optional[str]=None):
        self.__name = name
        self.__lock = RLock()
        self.__triples: dict[Triple, None] = {}
        self.__indexes: tuple[dict[Term, dict[Triple, None]], ...] = ({}, {}, {})
        self.__scope = BlankNodeScope(name)

    def __contains__(self, triple: Any) -> bool:
    #===========================================
        return self.contains(triple)

    def __iter__(self) -> Iterator[Triple]:
    #======================================
        with self.__lock:
            return iter(tuple(self.__triples))

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        name = f' {self.__name}' if self.__name else ''
        return f'<Graph{name} with {self.size()} triples>'

    def __str__(self) -> str:
    #========================
        with self.__lock:
            size = len(self.__triples)
            lines = [str(triple) for (_, triple) in zip(range(TO_STRING_MAX), self.__triples)]
        if size > TO_STRING_MAX:
            lines.append(f'# ... +{size - TO_STRING_MAX} more')
        return '\n'.join(lines)

    @property
    def name(self) -> Optional[str]:
        return self.__name

    @property
    def scope(self) -> BlankNodeScope:
        return self.__scope

    def add(self, triple: Any, predicate: Any=None, object: Any=None) -> Self:
    #=========================================================================
        if predicate is None and object is None:
            if triple is None:
                raise InvalidArgument('Cannot add None to a graph')
            triple = Triple.copy_of(triple)
        else:
            triple = Triple(triple, predicate, object)
        with self.__lock:
            self.__insert(triple)
        return self

    def clear(self):
    #===============
        with self.__lock:
            log.debug('Clearing graph', graph=self.__name, size=len(self.__triples))
            self.__triples.clear()
            for index in self.__indexes:
                index.clear()

    def contains(self, subject: Any=None, predicate: Any=None, object: Any=None) -> bool:
    #====================================================================================
        if predicate is None and object is None and subject is not None and is_triple_like(subject):
            try:
                triple = Triple.copy_of(subject)
            except (InvalidArgument, TermTypeError):
                return False            # An ill-formed triple is never stored
            with self.__lock:
                return triple in self.__triples
        pattern = (pattern_term(subject), pattern_term(predicate), pattern_term(object))
        with self.__lock:
            return any(matches(triple, pattern) for triple in self.__candidates(pattern))

    def get_triples(self, subject: Any=None, predicate: Any=None, object: Any=None) -> TripleSelection:
    #==================================================================================================
        return TripleSelection(self.__select(subject, predicate, object))

    def merge(self, triples: 'Graph | Iterable[Any]') -> Self:
    #=========================================================
        copies = [Triple.copy_of(triple) for triple in triples]
        with self.__lock:
            for triple in copies:
                self.__insert(triple)
        log.debug('Merged triples into graph', graph=self.__name, count=len(copies))
        return self

    def ntriples(self) -> str:
    #=========================
        return ''.join(f'{triple}\n' for triple in self)

    def remove(self, subject: Any=None, predicate: Any=None, object: Any=None) -> Self:
    #==================================================================================
        if predicate is None and object is None and subject is not None and is_triple_like(subject):
            try:
                triple = Triple.copy_of(subject)
            except (InvalidArgument, TermTypeError):
                return self
            with self.__lock:
                self.__discard(triple)
            return self
        with self.__lock:
            # Deleting while iterating the store would skip entries
            selected = self.__select(subject, predicate, object)
            for triple in selected:
                self.__discard(triple)
        log.debug('Removed matching triples', graph=self.__name, count=len(selected))
        return self

    def size(self) -> int:
    #=====================
        with self.__lock:
            return len(self.__triples)

    def __candidates(self, pattern: Pattern) -> Iterable[Triple]:
    #============================================================
        smallest = None
        for position, term in enumerate(pattern):
            if term is None or isinstance(term, str):
                continue
            index = self.__indexes[position].get(term)
            if index is None:
                return ()
            if smallest is None or len(index) < len(smallest):
                smallest = index
        return self.__triples if smallest is None else smallest

    def __discard(self, triple: Triple):
    #===================================
        if triple in self.__triples:
            del self.__triples[triple]
            for position, term in enumerate(triple):
                index = self.__indexes[position][term]
                del index[triple]
                if len(index) == 0:
                    del self.__indexes[position][term]

    def __insert(self, triple: Triple):
    #==================================
        if triple not in self.__triples:
            self.__triples[triple] = None
            for position, term in enumerate(triple):
                self.__indexes[position].setdefault(term, {})[triple] = None

    def __select(self, subject: Any, predicate: Any, object: Any) -> list[Triple]:
    #============================================================================
        pattern = (pattern_term(subject), pattern_term(predicate), pattern_term(object))
        with self.__lock:
            return [triple for triple in self.__candidates(pattern) if matches(triple, pattern)]

#===============================================================================
#===============================================================================
