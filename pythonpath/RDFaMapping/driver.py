# driver - build type descriptors from RDFa mapping XML files
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

"""Load RDFa mappings from XML definition files.

There is one file per mapped type, named after the type:

<type xmlns:sioc="http://rdfs.org/sioc/ns#"
      xmlns:dcterms="http://purl.org/dc/terms/"
      xmlns:skos="http://www.w3.org/2004/02/skos/core#"
      typeof="sioc:Thread">
  <config key="my" value="value"/>
  <rev>dcterms:partOf</rev>
  <children>
    <property property="dcterms:title" identifier="title" tag-name="h2"/>
    <collection rel="skos:related" identifier="tags" tag-name="ul">
      <attribute key="class" value="tags"/>
    </collection>
    <collection rel="dcterms:hasPart" rev="dcterms:partOf" identifier="posts">
      <childtype>sioc:Post</childtype>
    </collection>
  </children>
</type>

Predicates are stored as written.  They are expanded later with the
vocabularies registered on the type, except the <childtype> names
which are expanded right away with the namespaces in scope at the
collection element.
"""

import logging
from xml.dom import minidom

from . import observer, elements
from .descriptors import Node
from .locator import DefinitionLocator, type_name_of
from .namespaces import Namespaces

logger = logging.getLogger(__name__)

# Registered on a type when some predicate is just a bare identifier
DEFAULT_VOCABULARY_PREFIX = 'createphp'
DEFAULT_VOCABULARY_URI = 'http://createphp.org/ns/'


class TypeNotFoundError(LookupError):
    def __init__(self, name, filename = None):
        self.name = name
        self.filename = filename

        msg = 'No RDFa mapping found for "{0}"'.format(name)
        if filename:
            msg += ' (looked for "{0}")'.format(filename)
        super(TypeNotFoundError, self).__init__(msg)


#
# Events sent to observers of the driver while loading a type
#

class DefinitionLocated(observer.Event):
    """The definition file for a type has been found.  Parameters:

    - name: the requested type name
    - path: the definition file
    """

class ChildLoaded(observer.Event):
    """A child has been built and attached to the type.  Parameters:

    - identifier: the child identifier
    - child: the child descriptor
    """

class TypeLoaded(observer.Event):
    """The type has been completely built.  Parameters:

    - name: the requested type name
    - type: the TypeDescriptor
    """


class BuildContext(object):
    """State shared by all children during one load_type() call."""

    def __init__(self):
        self.add_default_vocabulary = False


class XmlDriver(observer.Subject):
    """Load type descriptors from definition files in DIRECTORIES.

    Directories are searched in order, so definitions in an earlier
    directory override those in a later one.
    """

    def __init__(self, directories, separator = '.',
                 default_vocabulary = (DEFAULT_VOCABULARY_PREFIX, DEFAULT_VOCABULARY_URI)):
        super(XmlDriver, self).__init__()
        self.locator = DefinitionLocator(directories, separator = separator)
        self.default_vocabulary = default_vocabulary


    def get_definition(self, name):
        """Parse the definition file for NAME and return its root
        element, or None if there is no such file.
        """

        path = self.locator.locate(name)
        if path is None:
            return None

        self.notify_observers(DefinitionLocated(name = name, path = path))
        logger.debug('loading %s from %s', name, path)
        return minidom.parse(path).documentElement


    def load_type(self, name, mapper, type_factory):
        """Build the TypeDescriptor for NAME.

        TYPE_FACTORY creates the descriptor objects, MAPPER is only
        handed on to it.

        Raises TypeNotFoundError if there is no definition for NAME.
        """

        root = self.get_definition(name)
        if root is None:
            raise TypeNotFoundError(type_name_of(name), self.locator.build_file_name(name))

        descriptor = type_factory.create_type(mapper, elements.extract_config(root))

        for rev in elements.child_elements(root, 'rev'):
            descriptor.add_rev(elements.get_text(rev))

        # Node info includes the vocabulary info
        if isinstance(descriptor, Node):
            self.parse_node_info(descriptor, root)
        else:
            self.parse_vocabulary_info(descriptor, root)

        context = BuildContext()
        children = elements.first_child_element(root, 'children')
        if children is not None:
            for el in elements.iter_subelements(children):
                identifier = elements.get_attribute(el, 'identifier')
                if identifier is None:
                    logger.warning('%s: <%s> child has no identifier attribute',
                                   name, elements.element_name(el))

                child = type_factory.create_child(
                    elements.element_name(el), identifier, el)
                self.parse_child(child, el, identifier, context)

                descriptor.set_child(identifier, child)
                self.notify_observers(ChildLoaded(identifier = identifier, child = child))

        if context.add_default_vocabulary:
            descriptor.set_vocabulary(*self.default_vocabulary)

        self.notify_observers(TypeLoaded(name = name, type = descriptor))
        return descriptor


    def parse_child(self, child, element, identifier, context):
        """Read the predicates of CHILD from ELEMENT.

        Properties get their 'property' field, collections 'rel', 'rev'
        and the allowed child types.
        """

        if hasattr(child, 'set_property'):
            child.set_property(self.build_information(element, identifier, 'property', context))
        elif hasattr(child, 'set_rel'):
            child.set_rel(self.build_information(element, identifier, 'rel', context))
            child.set_rev(self.build_information(element, identifier, 'rev', context))

            ns = Namespaces(element)
            for childtype in elements.child_elements(element, 'childtype'):
                child.add_type_name(ns.expand(elements.get_text(childtype)))

        # Nested <children> of a child are not walked
        if isinstance(child, Node):
            self.parse_node_info(child, element)


    def build_information(self, element, identifier, field, context):
        """Return the raw value of attribute FIELD on ELEMENT.

        Without the attribute the identifier is used as predicate, and
        CONTEXT is flagged so that the default vocabulary gets
        registered on the type.
        """

        value = elements.get_attribute(element, field)
        if value is not None:
            return value

        context.add_default_vocabulary = True
        return identifier


    def parse_node_info(self, node, element):
        tag_name = elements.get_attribute(element, 'tag-name')
        if tag_name is not None:
            node.set_tag_name(tag_name)

        for key, value in elements.extract_attributes(element).items():
            node.set_attribute(key, value)

        self.parse_vocabulary_info(node, element)


    def parse_vocabulary_info(self, node, element):
        """Register the namespaces in scope at ELEMENT on NODE, and
        read its typeof, vocab and prefix attributes.
        """

        for prefix, uri in Namespaces(element).items():
            node.set_vocabulary(prefix, uri)

        typeof = elements.get_attribute(element, 'typeof')
        if typeof is not None:
            node.set_rdf_type(typeof)

        vocab = elements.get_attribute(element, 'vocab')
        if vocab is not None:
            node.set_attribute('vocab', vocab)

        prefix = elements.get_attribute(element, 'prefix')
        if prefix is not None:
            node.set_attribute('prefix', prefix)

            # "foo: http://example.org/"
            ns_prefix, sep, uri = prefix.partition(': ')
            if sep:
                node.set_vocabulary(ns_prefix, uri)
            else:
                logger.warning('ignoring malformed prefix attribute "%s"', prefix)


    def get_all_names(self):
        """Return a dict mapping the absolute RDF type of every
        definition file to its type name.

        Only the root element of each file is looked at.  If two files
        have the same RDF type, the one scanned last wins.
        """

        names = {}
        for path in self.locator.iter_definition_files():
            root = minidom.parse(path).documentElement

            typeof = elements.get_attribute(root, 'typeof')
            if typeof is None:
                logger.warning('%s has no typeof attribute, skipping', path)
                continue

            rdf_type = Namespaces(root).expand(typeof)
            name = self.locator.file_name_to_type_name(path)

            if rdf_type in names:
                logger.debug('%s: %s replaces %s', rdf_type, name, names[rdf_type])
            names[rdf_type] = name

        logger.info('found %d RDFa mapped types', len(names))
        return names
