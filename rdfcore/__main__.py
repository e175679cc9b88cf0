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

import sys

#===============================================================================

from rdfcore.version import __version__

#===============================================================================

from rdfcore.factory import TermFactory
from rdfcore.loader import load_graph
from rdfcore.rdf.oxigraph import RDF_FORMATS
from rdfcore.utils import configure_logging, Issue, log

#===============================================================================

def query_file(source: str, subject: str|None=None, predicate: str|None=None, object: str|None=None,
               format: str='turtle', count: bool=False) -> str:
#=================================================================================================
    factory = TermFactory()
    graph = load_graph(source, format=format, factory=factory)
    selection = graph.get_triples(
        factory.create_iri(subject) if subject is not None else None,
        factory.create_iri(predicate) if predicate is not None else None,
        factory.create_iri(object) if object is not None else None)
    if count:
        return f'{len(selection)}\n'
    return ''.join(f'{triple}\n' for triple in selection)

#===============================================================================

def main():
    import argparse
    parser = argparse.ArgumentParser(description='Load RDF into memory and list the triples matching a pattern')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('--format', choices=list(RDF_FORMATS), default='turtle', help='Format of the RDF source')
    parser.add_argument('--subject', metavar='IRI', help='Only match triples with this subject')
    parser.add_argument('--predicate', metavar='IRI', help='Only match triples with this predicate')
    parser.add_argument('--object', metavar='IRI', help='Only match triples with this object')
    parser.add_argument('--count', action='store_true', help='Output the number of matching triples')
    parser.add_argument('--log-level', metavar='LEVEL', help='Logging level (default from $RDFCORE_LOG_LEVEL)')
    parser.add_argument('source', metavar='SOURCE', help='Input RDF file')

    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        sys.stdout.write(query_file(args.source, subject=args.subject, predicate=args.predicate,
                                    object=args.object, format=args.format, count=args.count))
    except Issue as issue:
        log.error(issue.reason)
        sys.exit(1)

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
#===============================================================================
