# descriptors - in-memory description of how a class maps onto RDFa
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

"""Type descriptors built from RDFa mapping definitions.

A TypeDescriptor describes one mapped class.  Its children are
PropertyDescriptors for scalar properties and CollectionDescriptors
for one-to-many relations, keyed by identifier.  All three are Nodes,
which carry the information a renderer needs to produce the element
for them: tag name, attributes, vocabularies and RDF type.

Nested types are only referenced by name.  A CollectionDescriptor can
resolve its names lazily through the type factory it was created with.
"""

import collections
import collections.abc

from .namespaces import expand_namespace


class Node(object):
    def __init__(self, config = None):
        self.config = dict(config or {})
        self.attributes = {}
        self.vocabularies = {}
        self.tag_name = None
        self.rdf_type = None


    def set_tag_name(self, tag_name):
        self.tag_name = tag_name

    def set_attribute(self, key, value):
        self.attributes[key] = value

    def set_attributes(self, attributes):
        self.attributes.update(attributes)

    def get_attribute(self, key, default = None):
        return self.attributes.get(key, default)

    def set_vocabulary(self, prefix, uri):
        self.vocabularies[prefix] = uri

    def set_rdf_type(self, rdf_type):
        self.rdf_type = rdf_type


    def expand(self, name):
        """Expand a prefixed NAME using the vocabularies registered on this node."""
        return expand_namespace(name, self.vocabularies)


    def get_expanded_rdf_type(self):
        if self.rdf_type is None:
            return None
        return self.expand(self.rdf_type)


class TypeDescriptor(Node, collections.abc.Mapping):
    """The mapping of one class.

    Children are available through the read-only Mapping interface
    (and as attributes, for identifiers that are valid names).
    """

    def __init__(self, mapper, config = None):
        super(TypeDescriptor, self).__init__(config)
        self.mapper = mapper
        self.revs = []
        self.children = collections.OrderedDict()


    def add_rev(self, rev):
        self.revs.append(rev)

    def set_child(self, identifier, child):
        self.children[identifier] = child


    def __getattr__(self, name):
        # Only called when normal lookup fails
        children = self.__dict__.get('children')
        if children is not None and name in children:
            return children[name]
        raise AttributeError(name)


    #
    # Support read-only Mapping interface to access the children
    #

    def __getitem__(self, identifier):
        return self.children[identifier]

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)


    def __repr__(self):
        return '<TypeDescriptor {0} at 0x{1:x}>'.format(self.rdf_type, id(self))


class ChildDescriptor(Node):
    def __init__(self, identifier, config = None):
        super(ChildDescriptor, self).__init__(config)
        self.identifier = identifier


class PropertyDescriptor(ChildDescriptor):
    def __init__(self, identifier, config = None):
        super(PropertyDescriptor, self).__init__(identifier, config)
        self.property = None

    def set_property(self, property):
        self.property = property

    def __repr__(self):
        return '<PropertyDescriptor {0.identifier} {0.property}>'.format(self)


class CollectionDescriptor(ChildDescriptor):
    def __init__(self, identifier, type_factory, config = None):
        super(CollectionDescriptor, self).__init__(identifier, config)
        self.type_factory = type_factory
        self.rel = None
        self.rev = None
        self.type_names = []


    def set_rel(self, rel):
        self.rel = rel

    def set_rev(self, rev):
        self.rev = rev

    def add_type_name(self, type_name):
        self.type_names.append(type_name)


    def get_types(self):
        """Resolve the allowed child type names into TypeDescriptors.

        Each call loads the definitions again.
        """

        return [self.type_factory.get_type_by_rdf(uri) for uri in self.type_names]


    def __repr__(self):
        return '<CollectionDescriptor {0.identifier} {0.rel}>'.format(self)
