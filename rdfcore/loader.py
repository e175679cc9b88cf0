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
from typing import Any, Optional

#===============================================================================

from .factory import TermFactory
from .graph import Graph
from .rdf import from_foreign
from .rdf.oxigraph import parse_statements
from .terms import BlankNode, Term
from .utils import Issue, log, make_issue, pretty_log

#===============================================================================

def load_graph(source: str|Path, format: str='turtle', base_iri: Optional[str]=None,
               factory: Optional[TermFactory]=None, graph: Optional[Graph]=None) -> Graph:
#========================================================================================
    """
    Parse an RDF file with pyoxigraph and copy its triples into a graph.

    Blank node labels are local to a document, so blank nodes are scoped
    to the graph being loaded.
    """
    factory = factory or TermFactory()
    if graph is None:
        graph = factory.create_graph(Path(source).name)
    source_path = Path(source)
    if not source_path.exists():
        raise Issue(f'Missing RDF source file: {source}')

    def copy_term(term: Any) -> Term:
        copy = from_foreign(term)
        if isinstance(copy, BlankNode):
            return factory.create_blank_node(copy.identifier, scope=graph)
        return copy

    try:
        triples = [
            factory.create_triple(copy_term(statement.subject),     # pyright: ignore[reportArgumentType]
                                  copy_term(statement.predicate),   # pyright: ignore[reportArgumentType]
                                  copy_term(statement.object))
                for statement in parse_statements(source_path, format=format, base_iri=base_iri)
        ]
    except (SyntaxError, ValueError, OSError) as e:
        raise make_issue(e)
    graph.merge(triples)
    log.info(f'Loaded {len(triples)} triples from {pretty_log(source_path)}')
    return graph

#===============================================================================
#===============================================================================
