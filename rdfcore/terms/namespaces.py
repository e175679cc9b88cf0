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

from typing import Optional

#===============================================================================

from . import IRI, RDF_NS, XSD_NS

#===============================================================================

"""
Generate IRIs within a namespace.
"""
class Namespace:
    def __init__(self, ns: str):
        self.__ns = ns

    def __str__(self):
        return self.__ns

    def __call__(self, local_name: str='') -> IRI:
        return IRI(f'{self.__ns}{local_name}')

    def __getattr__(self, local_name: str) -> IRI:
        if local_name.startswith('__'):
            raise AttributeError(local_name)
        return IRI(f'{self.__ns}{local_name}')

    def __getitem__(self, local_name: str) -> IRI:
        return IRI(f'{self.__ns}{local_name}')

    def __contains__(self, iri: IRI|str) -> bool:
        full_iri = iri if isinstance(iri, str) else iri.iri_string
        return full_iri.startswith(self.__ns)

#===============================================================================

OWL_NS = 'http://www.w3.org/2002/07/owl#'
RDFS_NS = 'http://www.w3.org/2000/01/rdf-schema#'

RDF = Namespace(RDF_NS)
RDFS = Namespace(RDFS_NS)
XSD = Namespace(XSD_NS)

#===============================================================================

NAMESPACES = {
    'owl': OWL_NS,
    'rdf': RDF_NS,
    'rdfs': RDFS_NS,
    'xsd': XSD_NS,
}

def get_curie(iri: str|IRI, namespaces: Optional[dict[str, str]]=None) -> str:
#=============================================================================
    full_iri = iri if isinstance(iri, str) else iri.iri_string
    for prefix, ns_iri in (namespaces or NAMESPACES).items():
        if full_iri.startswith(ns_iri):
            return f'{prefix}:{full_iri[len(ns_iri):]}'
    return full_iri

#===============================================================================
#===============================================================================
