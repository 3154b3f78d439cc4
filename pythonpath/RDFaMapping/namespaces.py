# namespaces - resolve prefixes since xml.dom.minidom doesn't
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.


def expand_namespace(name, namespaces):
    """Expand a prefixed NAME like 'sioc:Post' into an absolute URI
    using the prefix -> URI mapping NAMESPACES.

    Names without a prefix, or with a prefix that isn't known, are
    returned unchanged.  That covers names that already are absolute
    URIs, since 'http' is never declared as a prefix.
    """

    if ':' not in name:
        return name

    prefix, local_name = name.split(':', 1)
    try:
        return namespaces[prefix] + local_name
    except KeyError:
        return name


class Namespaces(object):
    """Collect the namespace declarations in scope at an element.

    The default namespace is recorded with the empty string as prefix.
    """

    def __init__(self, element):
        attrs = element.attributes
        assert attrs is not None, 'trying to track namespaces for non-element node'

        self.element = element
        self.prefix_map = {}
        self._populate(element)


    def _populate(self, element):
        # Passed the root?
        if element is None or element.nodeType == element.DOCUMENT_NODE:
            return

        # Recurse first, so that we overwrite anything declared further up
        self._populate(element.parentNode)

        attrs = element.attributes
        if attrs is None:
            return

        for (name, value) in attrs.items():
            if name.startswith('xmlns:'):
                self.prefix_map[name[6:]] = value
            elif name == 'xmlns':
                self.prefix_map[''] = value


    def expand(self, name):
        """Expand NAME using the prefixes in scope at this element."""
        return expand_namespace(name, self.prefix_map)


    def items(self):
        return self.prefix_map.items()


    def __contains__(self, prefix):
        return prefix in self.prefix_map

    def __getitem__(self, prefix):
        return self.prefix_map[prefix]

    def __len__(self):
        return len(self.prefix_map)
