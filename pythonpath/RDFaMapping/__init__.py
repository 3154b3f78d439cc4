# RDFaMapping - load RDFa mapping definitions into type descriptors
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

from .driver import XmlDriver, TypeNotFoundError
from .factory import DescriptorFactory, TypeFactory, UnknownChildKindError
from .descriptors import TypeDescriptor, PropertyDescriptor, CollectionDescriptor
