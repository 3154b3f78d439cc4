# factory - create descriptor objects for the driver
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

import logging

from . import elements
from .descriptors import TypeDescriptor, PropertyDescriptor, CollectionDescriptor
from .driver import TypeNotFoundError

logger = logging.getLogger(__name__)


class UnknownChildKindError(ValueError):
    def __init__(self, kind, identifier):
        self.kind = kind
        self.identifier = identifier
        super(UnknownChildKindError, self).__init__(
            'unknown child type "{0}" with identifier "{1}"'.format(kind, identifier))


class DescriptorFactory(object):
    """Create the default descriptor classes.

    Subclass and override create_type() or create_child() to have the
    driver build other descriptor objects.
    """

    def create_type(self, mapper, config):
        return TypeDescriptor(mapper, config)


    def create_child(self, kind, identifier, element, type_factory):
        config = elements.extract_config(element)

        if kind == 'property':
            child = PropertyDescriptor(identifier, config)
        elif kind == 'collection':
            child = CollectionDescriptor(identifier, type_factory, config)
        else:
            raise UnknownChildKindError(kind, identifier)

        child.set_attributes(elements.extract_attributes(element))
        return child


class TypeFactory(object):
    """Tie a driver, a mapper and a DescriptorFactory together.

    This is what the driver gets as the type factory in load_type(),
    and what collections use to resolve their child types.  Nothing
    is cached, each lookup loads the definition again.
    """

    def __init__(self, driver, mapper, factory = None):
        self.driver = driver
        self.mapper = mapper
        self.factory = factory or DescriptorFactory()


    def create_type(self, mapper, config):
        return self.factory.create_type(mapper, config)

    def create_child(self, kind, identifier, element):
        return self.factory.create_child(kind, identifier, element, self)


    def get_type(self, name):
        return self.driver.load_type(name, self.mapper, self)


    def get_type_by_rdf(self, rdf_type):
        """Load the type mapped to the absolute RDF type URI RDF_TYPE."""

        names = self.driver.get_all_names()
        try:
            name = names[rdf_type]
        except KeyError:
            raise TypeNotFoundError(rdf_type) from None

        logger.debug('%s is mapped by %s', rdf_type, name)
        return self.get_type(name)
