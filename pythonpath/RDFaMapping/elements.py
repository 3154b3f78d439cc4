# elements - small accessors for reading definition elements from a minidom tree
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.


def iter_subelements(element):
    """Return an iterator over all child nodes that are elements"""

    for n in element.childNodes:
        if n.nodeType == n.ELEMENT_NODE:
            yield n


def element_name(element):
    """Return the local name of ELEMENT, ignoring any namespace prefix."""
    return element.localName or element.tagName


def child_elements(element, name):
    """Return the direct child elements with the local NAME, in document order."""
    return [el for el in iter_subelements(element) if element_name(el) == name]


def first_child_element(element, name):
    """Return the first direct child element with the local NAME, or None."""
    for el in iter_subelements(element):
        if element_name(el) == name:
            return el
    return None


def get_attribute(element, name):
    """Return the value of attribute NAME, or None if it isn't set.

    minidom returns an empty string for missing attributes, which
    can't be told apart from an attribute set to "".
    """

    if element.hasAttribute(name):
        return element.getAttribute(name)
    return None


def get_text(element):
    """Return the text content of ELEMENT with surrounding whitespace removed."""

    text = []
    for n in element.childNodes:
        if n.nodeType in (n.TEXT_NODE, n.CDATA_SECTION_NODE):
            text.append(n.data)
    return ''.join(text).strip()


def extract_config(element, field = 'config'):
    """Build a dict from the <config key="x" value="y"/> children of ELEMENT.

    FIELD selects the child element name, so the same function reads
    <attribute> children too.  Later keys overwrite earlier ones.
    """

    config = {}
    for c in child_elements(element, field):
        config[c.getAttribute('key')] = c.getAttribute('value')
    return config


def extract_attributes(element):
    return extract_config(element, 'attribute')
