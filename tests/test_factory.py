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

import threading

import pytest

#===============================================================================

from rdfcore import BlankNode, BlankNodeScope, IRI, Literal, TermFactory, Triple
from rdfcore import InvalidArgument, InvalidIRI, InvalidLanguageTag, TermTypeError, UnsupportedOperation
from rdfcore.terms.namespaces import RDF, XSD

#===============================================================================

def test_create_iri(factory, supported):
#=======================================
    example = supported(factory.create_iri, 'http://example.com/')
    assert example.iri_string == 'http://example.com/'
    assert example.ntriples_string() == '<http://example.com/>'
    term = factory.create_iri('http://example.com/vocab#term')
    assert term.ntriples_string() == '<http://example.com/vocab#term>'

@pytest.mark.parametrize('iri', [
    'http://accént.example.com/première',
    'http://example.испытание/Кириллица',
    'http://𐐀.example.com/𐐀',
])
def test_create_international_iri(factory, supported, iri):
#==========================================================
    created = supported(factory.create_iri, iri)
    assert created.iri_string == iri
    assert created.ntriples_string() == f'<{iri}>'

def test_create_iri_namespace(factory):
#======================================
    iri = factory.create_iri('http://example.com/vocab#', 'term')
    assert iri == IRI('http://example.com/vocab#term')

def test_create_relative_iri(factory, supported):
#================================================
    relative = supported(factory.create_iri, '../relative')
    assert relative.iri_string == '../relative'
    assert relative.ntriples_string() == '<../relative>'
    assert factory.create_iri('../relative#term').ntriples_string() == '<../relative#term>'
    assert factory.create_iri('').ntriples_string() == '<>'

def test_relative_iri_unsupported():
#===================================
    factory = TermFactory(relative_iris=False)
    with pytest.raises(UnsupportedOperation):
        factory.create_iri('../relative')
    assert factory.create_iri('urn:isbn:0451450523').iri_string == 'urn:isbn:0451450523'

@pytest.mark.parametrize('text', [
    '<no_brackets>',
    'http://example.com/<no_brackets>',
    'http://example.com/with space',
    'http://example.com/"quoted"',
])
def test_invalid_iri(factory, text):
#===================================
    with pytest.raises((InvalidIRI, UnsupportedOperation)):
        factory.create_iri(text)

def test_invalid_iri_is_value_error(factory):
#============================================
    with pytest.raises(ValueError):
        factory.create_iri('http://example.com/<bad>')
    with pytest.raises(InvalidArgument):
        factory.create_iri(None)        # type: ignore

@pytest.mark.parametrize('text', [
    ' leading',
    'trailing ',
    'a\tb',
    'line\nbreak',
    'cr\rx',
    'back\\slash',
    '//[bad/x',
    'rel/<angle>',
])
def test_invalid_relative_iri(factory, text):
#============================================
    with pytest.raises(InvalidIRI):
        factory.create_iri(text)

def test_invalid_absolute_whitespace(factory):
#=============================================
    for text in ('http://example.com/a\tb', 'http://example.com/line\nbreak', ' http://example.com/'):
        with pytest.raises(InvalidIRI):
            factory.create_iri(text)

#===============================================================================

def test_create_blank_node(factory, supported):
#==============================================
    first = supported(factory.create_blank_node)
    second = factory.create_blank_node()
    assert first.identifier != second.identifier
    assert first != second
    assert first.ntriples_string() != second.ntriples_string()

def test_create_blank_node_identifier(factory, supported):
#=========================================================
    identifier = 'd85f1b8e-4f87-4847-a58b-283e3834e5c8'
    node = supported(factory.create_blank_node, identifier)
    assert node.identifier == identifier

def test_create_blank_node_identifier_twice(factory, supported):
#===============================================================
    first = supported(factory.create_blank_node, '959c0aaa-fcee-49d4-b62b-a6c496e81398')
    second = factory.create_blank_node('959c0aaa-fcee-49d4-b62b-a6c496e81398')
    third = factory.create_blank_node('44ca1bc5-1ec2-4d3d-ae96-5f667e874721')
    assert first.identifier == second.identifier
    assert first == second
    assert first.ntriples_string() == second.ntriples_string()
    assert first.ntriples_string() != third.ntriples_string()

def test_blank_nodes_local_to_factory():
#=======================================
    first = TermFactory().create_blank_node('b0')
    second = TermFactory().create_blank_node('b0')
    assert first.identifier == second.identifier
    assert first != second

def test_blank_node_explicit_scope(factory):
#===========================================
    graph = factory.create_graph()
    scope = BlankNodeScope()
    assert factory.create_blank_node('b0', scope=graph) == factory.create_blank_node('b0', scope=graph)
    assert factory.create_blank_node('b0', scope=graph).scope is graph.scope
    assert factory.create_blank_node('b0', scope=graph) != factory.create_blank_node('b0')
    assert factory.create_blank_node('b0', scope=scope) == BlankNode('b0', scope)

def test_invalid_blank_node(factory):
#====================================
    with pytest.raises(InvalidArgument):
        factory.create_blank_node('')
    with pytest.raises(InvalidArgument):
        factory.create_blank_node(scope=BlankNodeScope())

def test_concurrent_blank_nodes(factory):
#========================================
    identifiers: list[str] = []
    lock = threading.Lock()
    def create():
        nodes = [factory.create_blank_node().identifier for _ in range(500)]
        with lock:
            identifiers.extend(nodes)
    threads = [threading.Thread(target=create) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(identifiers) == 4000
    assert len(set(identifiers)) == 4000

#===============================================================================

def test_create_literal(factory, supported):
#===========================================
    example = supported(factory.create_literal, 'Example')
    assert example.lexical_form == 'Example'
    assert example.language_tag is None
    assert example.datatype.iri_string == 'http://www.w3.org/2001/XMLSchema#string'
    assert example.ntriples_string() == '"Example"'

def test_create_literal_datetime(factory, supported):
#====================================================
    datetime = supported(factory.create_literal, '2014-12-27T00:50:00T-0600',
                         datatype=factory.create_iri('http://www.w3.org/2001/XMLSchema#dateTime'))
    assert datetime.lexical_form == '2014-12-27T00:50:00T-0600'
    assert datetime.language_tag is None
    assert datetime.datatype.iri_string == 'http://www.w3.org/2001/XMLSchema#dateTime'
    assert datetime.ntriples_string() == '"2014-12-27T00:50:00T-0600"^^<http://www.w3.org/2001/XMLSchema#dateTime>'

def test_create_literal_datatype_string(factory):
#================================================
    example = factory.create_literal('Example', datatype='http://www.w3.org/2001/XMLSchema#string')
    assert example.datatype == XSD.string
    assert example.ntriples_string() == '"Example"'
    assert example == factory.create_literal('Example')

def test_create_literal_lang(factory, supported):
#================================================
    example = supported(factory.create_literal, 'Example', 'en')
    assert example.lexical_form == 'Example'
    assert example.language_tag == 'en'
    assert example.datatype.iri_string == 'http://www.w3.org/1999/02/22-rdf-syntax-ns#langString'
    assert example.ntriples_string() == '"Example"@en'

def test_create_literal_iso639_3(factory, supported):
#====================================================
    vls = supported(factory.create_literal, 'Herbert Van de Sompel', 'vls')
    assert vls.language_tag == 'vls'
    assert vls.ntriples_string() == '"Herbert Van de Sompel"@vls'

def test_create_literal_lang_with_langstring(factory):
#=====================================================
    example = factory.create_literal('Example', 'en', datatype=RDF.langString)
    assert example == Literal('Example', language_tag='en')

@pytest.mark.parametrize('tag', ['with space', '', 'en_GB', 'en-'])
def test_invalid_language_tag(factory, tag):
#===========================================
    with pytest.raises((InvalidLanguageTag, UnsupportedOperation)):
        factory.create_literal('Example', tag)

def test_invalid_literal(factory):
#=================================
    with pytest.raises(InvalidArgument):
        factory.create_literal(None)            # type: ignore
    with pytest.raises(InvalidArgument):
        factory.create_literal('1', 'en', datatype=XSD.integer)
    with pytest.raises(InvalidArgument):
        factory.create_literal('Example', datatype=RDF.langString)

#===============================================================================

def test_create_triple_bnode_bnode(factory, supported):
#======================================================
    subject = factory.create_blank_node()
    predicate = factory.create_iri('http://example.com/pred')
    object = factory.create_blank_node()
    triple = supported(factory.create_triple, subject, predicate, object)
    assert triple.subject == subject
    assert triple.predicate == predicate
    assert triple.object == object

def test_create_triple_bnode_literal(factory):
#=============================================
    subject = factory.create_blank_node('s')
    predicate = factory.create_iri('http://example.com/pred')
    object = factory.create_literal('Example', 'en')
    triple = factory.create_triple(subject, predicate, object)
    assert triple == Triple(factory.create_blank_node('s'), predicate, Literal('Example', language_tag='en'))

def test_invalid_triple_predicate(factory):
#==========================================
    with pytest.raises(TypeError):
        factory.create_triple(factory.create_blank_node(),
                              factory.create_blank_node(),      # type: ignore
                              factory.create_blank_node())

def test_invalid_triple_subject(factory):
#========================================
    with pytest.raises(TermTypeError):
        factory.create_triple(factory.create_literal('subject'),    # type: ignore
                              factory.create_iri('http://example.com/pred'),
                              factory.create_blank_node())

#===============================================================================

def test_create_graph(factory, supported):
#=========================================
    graph = supported(factory.create_graph)
    assert graph.size() == 0
    graph.add(factory.create_blank_node(),
              factory.create_iri('http://example.com/'),
              factory.create_blank_node())
    graph2 = factory.create_graph()
    assert graph is not graph2
    assert graph.size() == 1
    assert graph2.size() == 0

#===============================================================================
