# common - shared helpers for the unit tests
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

import os
import shutil
import tempfile
import unittest


THREAD_XML = '''<?xml version="1.0"?>
<type xmlns:sioc="http://rdfs.org/sioc/ns#"
      xmlns:dcterms="http://purl.org/dc/terms/"
      xmlns:skos="http://www.w3.org/2004/02/skos/core#"
      typeof="sioc:Thread">
  <config key="my" value="value"/>
  <rev>dcterms:partOf</rev>
  <children>
    <property property="dcterms:title" identifier="title" tag-name="h2"/>
    <collection rel="skos:related" identifier="tags" tag-name="ul">
      <config key="my" value="value"/>
      <attribute key="class" value="tags"/>
    </collection>
    <collection rel="dcterms:hasPart" rev="dcterms:partOf" identifier="posts" tag-name="ul">
      <childtype>sioc:Post</childtype>
      <childtype>skos:Concept</childtype>
    </collection>
  </children>
</type>
'''

POST_XML = '''<?xml version="1.0"?>
<type xmlns:sioc="http://rdfs.org/sioc/ns#"
      xmlns:dcterms="http://purl.org/dc/terms/"
      typeof="sioc:Post">
  <children>
    <property property="dcterms:title" identifier="title"/>
    <property property="sioc:content" identifier="content"/>
  </children>
</type>
'''


class DefinitionDirTest(unittest.TestCase):
    """Base class for tests that need definition files on disk.

    Each test gets fresh, empty directories from make_dir().
    """

    def setUp(self):
        self.tmp = tempfile.mkdtemp(prefix = 'rdfa-mapping-test-')

    def tearDown(self):
        shutil.rmtree(self.tmp)


    def make_dir(self, name):
        path = os.path.join(self.tmp, name)
        os.mkdir(path)
        return path


    def write_definition(self, directory, file_name, xml):
        path = os.path.join(directory, file_name)
        with open(path, 'w', encoding = 'utf-8') as f:
            f.write(xml)
        return path
