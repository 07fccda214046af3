"""
xhtmlbuilder - build and render safe XHTML documents
"""
from .xhtmlbuilder import (
    DOCTYPE,
    ESCAPABLE_RAW_TEXT_ELEMENTS,
    RAW_TEXT_ELEMENTS,
    VOID_ELEMENTS,
    XHTML_NAMESPACE,
    XLINK_NAMESPACE,
    AlreadyChildError,
    CyclicReferenceError,
    Document,
    Element,
    InvalidNameError,
    InvalidTextError,
    NotEscapableError,
    RawTextChildError,
    VoidElementError,
    XHTMLBuilderError,
    makedocument,
)

__all__ = [
    "DOCTYPE",
    "ESCAPABLE_RAW_TEXT_ELEMENTS",
    "RAW_TEXT_ELEMENTS",
    "VOID_ELEMENTS",
    "XHTML_NAMESPACE",
    "XLINK_NAMESPACE",
    "AlreadyChildError",
    "CyclicReferenceError",
    "Document",
    "Element",
    "InvalidNameError",
    "InvalidTextError",
    "NotEscapableError",
    "RawTextChildError",
    "VoidElementError",
    "XHTMLBuilderError",
    "makedocument",
]
