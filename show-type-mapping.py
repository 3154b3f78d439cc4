#! /usr/bin/python3
#
# show-type-mapping - Command line tool to inspect RDFa mapping definitions
#
# Copyright 2014 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

"""Usage: show-type-mapping.py [-v] [--type NAME] DIR [DIR...]

Without --type, list the RDF type and type name of every definition
in the directories.  With --type, load that type and print its
descriptor tree.
"""

import sys
import argparse
import logging

from RDFaMapping import XmlDriver, TypeFactory, TypeNotFoundError


def main():
    parser = argparse.ArgumentParser(
        description = 'Inspect RDFa mapping definition files')
    parser.add_argument('directories', metavar = 'DIR', nargs = '+',
                        help = 'directory with definition files, earlier ones take precedence')
    parser.add_argument('--type', metavar = 'NAME',
                        help = 'load and print the mapping for this type name')
    parser.add_argument('--separator', default = '.',
                        help = 'namespace separator in type names (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action = 'store_true',
                        help = 'log what is being loaded')
    args = parser.parse_args()

    logging.basicConfig(level = logging.DEBUG if args.verbose else logging.WARNING,
                        format = '%(levelname)s %(name)s: %(message)s')

    driver = XmlDriver(args.directories, separator = args.separator)

    if args.type is None:
        list_types(driver)
        return 0

    try:
        show_type(driver, args.type)
    except TypeNotFoundError as e:
        sys.stderr.write('{0}\n'.format(e))
        return 1

    return 0


def list_types(driver):
    for rdf_type, name in sorted(driver.get_all_names().items()):
        print('{0}\t{1}'.format(rdf_type, name))


def show_type(driver, name):
    type_factory = TypeFactory(driver, mapper = None)
    descriptor = type_factory.get_type(name)

    print('{0} typeof="{1}"'.format(name, descriptor.rdf_type or ''))
    print_map('vocabulary', descriptor.vocabularies)
    print_map('attribute', descriptor.attributes)
    print_map('config', descriptor.config)
    for rev in descriptor.revs:
        print('  rev {0}'.format(rev))

    for identifier, child in descriptor.items():
        if hasattr(child, 'property'):
            print('  property {0}: {1}'.format(identifier, child.property))
        else:
            print('  collection {0}: rel={1} rev={2}'.format(identifier, child.rel, child.rev))
            for type_name in child.type_names:
                print('    childtype {0}'.format(type_name))


def print_map(label, values):
    for key, value in values.items():
        print('  {0} {1}={2}'.format(label, key, value))


if __name__ == '__main__':
    sys.exit(main())
