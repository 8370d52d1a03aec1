"""Common literal values used across adoc_pages.

These constants keep the document naming rules and the include marker
centralized so the collector, the rewriter, and tests import the same values
without drifting. Intended for internal use within the adoc_pages package.

Examples
--------
>>> from adoc_pages import _constants
>>> "index" + _constants.DOC_EXTENSION
'index.adoc'
>>> f"{_constants.CONFLUENCE_ATTRIBUTE}={_constants.CONFLUENCE_INCLUDE_VALUE}"
'confluence=include'
"""

DOC_EXTENSION = ".adoc"
DOC_INCLUDE_PREFIX = "_"

INCLUDE_ATTRIBUTES_SEPARATOR = ","
INCLUDE_ATTRIBUTES_ASSIGN = "="
CONFLUENCE_ATTRIBUTE = "confluence"
CONFLUENCE_INCLUDE_VALUE = "include"

DEFAULT_SOURCE_ENCODING = "utf-8"
DEFAULT_WORKING_DIR = "build/adoc-pages/preprocessed"
