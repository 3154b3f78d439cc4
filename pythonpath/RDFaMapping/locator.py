# locator - find type definition files in a list of directories
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

import os
import glob
import logging

logger = logging.getLogger(__name__)

DEFINITION_EXTENSION = '.xml'


def type_name_of(obj):
    """Return the type name for OBJ.

    Strings are passed through, classes are named by their module and
    qualified name, e.g. 'blog.models.Post'.
    """

    if isinstance(obj, str):
        return obj
    return '{0}.{1}'.format(obj.__module__, obj.__qualname__)


class DefinitionLocator(object):
    """Map type names to definition files.

    The file for a type is its name, with every SEPARATOR replaced by
    a '.', plus EXTENSION.  Directories are searched in the order
    given, so a file in an earlier directory shadows a file with the
    same name in a later one.
    """

    def __init__(self, directories, separator = '.', extension = DEFINITION_EXTENSION):
        self.directories = list(directories)
        self.separator = separator
        self.extension = extension


    def build_file_name(self, type_name):
        return type_name_of(type_name).replace(self.separator, '.') + self.extension


    def file_name_to_type_name(self, file_name):
        name = os.path.basename(file_name)
        if name.endswith(self.extension):
            name = name[:-len(self.extension)]
        return name.replace('.', self.separator)


    def locate(self, type_name):
        """Return the path of the definition file for TYPE_NAME, or
        None if no directory has one.

        The file is not opened.
        """

        file_name = self.build_file_name(type_name)
        for d in self.directories:
            path = os.path.join(d, file_name)
            if os.path.isfile(path):
                return path

        logger.debug('no %s in any of %s', file_name, self.directories)
        return None


    def iter_definition_files(self):
        """Yield the path of every definition file.

        Directories are scanned in the configured order and the files
        of each directory in sorted order.
        """

        for d in self.directories:
            if not os.path.isdir(d):
                logger.debug('skipping missing definition directory %s', d)
                continue

            pattern = os.path.join(glob.escape(d), '*' + self.extension)
            for path in sorted(glob.glob(pattern)):
                if os.path.isfile(path):
                    yield path
