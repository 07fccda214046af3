"""
xhtmlbuilder

Build an in-memory tree of elements and text and render it as well formed
XHTML. Tag names, attribute names, attribute values and text are validated
when they enter the tree, so rendering never produces markup the caller did
not ask for.

Does not enforce correct html structure (a <title> inside a <body> is
accepted).
Not thread safe. A tree must only be mutated by one thread at a time.
"""
from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Optional, Union

log = logging.getLogger(__name__)

# in html5 these elements can not have a closing tags (or empty tag)
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# contents of these are not markup. This api never gives them content
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

# raw text elements that may still hold (escaped) plain text
ESCAPABLE_RAW_TEXT_ELEMENTS = frozenset({"textarea", "title"})

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

DOCTYPE = "<!DOCTYPE\thtml>"

_TOKEN_RE = re.compile(r"[_A-Za-z][-_.A-Za-z0-9]*(?::[_A-Za-z][-_.A-Za-z0-9]*)?")
_TEXT_RE = re.compile(r"[\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]*")

# ampersand must come first, the other replacements introduce ampersands
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("'", "&apos;"),
    ('"', "&quot;"),
)


class XHTMLBuilderError(ValueError):
    """
    XHTMLBuilderError - base class for every error raised by this module.
        Subclasses ValueError so callers of the older builder api which
        caught ValueError keep working.
    """


class InvalidNameError(XHTMLBuilderError):
    """tag or attribute name is not a valid name token"""


class InvalidTextError(XHTMLBuilderError):
    """text content or attribute value contains forbidden characters"""


class VoidElementError(XHTMLBuilderError):
    """content appended to a void element"""


class NotEscapableError(XHTMLBuilderError):
    """content appended to a raw text element (script, style)"""


class RawTextChildError(XHTMLBuilderError):
    """element appended to a raw text element"""


class AlreadyChildError(XHTMLBuilderError):
    """element appended while it already has a parent"""


class CyclicReferenceError(XHTMLBuilderError):
    """element appended to itself or to one of its descendants"""


def makedocument(title: Optional[str] = None) -> Document:
    """
    makedocument - create a basic html document
    title: initial document title (optional)
    """
    return Document(title=title)


class Element:
    """
    An XHTML element. Has a tag, attributes and an ordered list of children.
    Children are either Elements or plain strings (text nodes).
    """

    VOID_ELEMENTS = VOID_ELEMENTS
    RAW_TEXT_ELEMENTS = RAW_TEXT_ELEMENTS
    ESCAPABLE_RAW_TEXT_ELEMENTS = ESCAPABLE_RAW_TEXT_ELEMENTS

    @staticmethod
    def validateToken(token: Any) -> bool:
        """
        validateToken - true if token is a valid tag/attribute name. A name
            is an XML NCName, optionally prefixed by another NCName and a
            colon (eg. xmlns:xlink)
        """
        return _TOKEN_RE.fullmatch(str(token)) is not None

    @staticmethod
    def validateText(text: Any) -> bool:
        """
        validateText - true if every character of text is allowed in XML 1.0
            character data. The empty string is valid
        """
        return _TEXT_RE.fullmatch(str(text)) is not None

    @staticmethod
    def escapeText(text: Any) -> str:
        """
        escapeText - return text with markup significant characters replaced
            by entities. Raises InvalidTextError if text contains characters
            that can not appear in XML at all
        """
        text = str(text)
        if not Element.validateText(text):
            raise InvalidTextError(f"Invalid text data: {text!r}")
        for char, entity in _ESCAPES:
            text = text.replace(char, entity)
        return text

    def __init__(self, tagName: str):
        """
        tagName: name of this tag. Case is preserved in the output, lookups
            of the element category (void, raw text) ignore case.
            Raises InvalidNameError if tagName is not a valid name token
        """
        realName = str(tagName)
        if not Element.validateToken(realName):
            raise InvalidNameError(f"Unsafe tag name: {realName!r}")
        self._realName = realName
        self._name = realName.lower()
        self._void = self._name in VOID_ELEMENTS
        self._raw = (
            self._name in RAW_TEXT_ELEMENTS
            or self._name in ESCAPABLE_RAW_TEXT_ELEMENTS
        )
        self._escapable = self._name not in RAW_TEXT_ELEMENTS

        self._attributes: Dict[str, str] = {}
        # removed elements leave None in their slot
        self._children: List[Union[Element, str, None]] = []
        self._parent: Optional[Element] = None
        self._parentIndex: Optional[int] = None
        # only set on the root element of a Document
        self._document: Optional[Document] = None

    @property
    def realName(self) -> str:
        return self._realName

    @property
    def name(self) -> str:
        return self._name

    @property
    def void(self) -> bool:
        return self._void

    @property
    def raw(self) -> bool:
        return self._raw

    @property
    def escapable(self) -> bool:
        return self._escapable

    @property
    def tagName(self) -> str:
        """
        tagName - the tag name in upper case (as the browser DOM does)
        """
        return self._realName.upper()

    def append(self, *children: Any) -> None:
        """
        append - add children (Elements or text) to the end of this element.
            Either all children are added or, if any of them is rejected,
            none are.

        Raises:
            VoidElementError if this is a void element
            NotEscapableError if this is a raw text element (script, style)
            AlreadyChildError if an Element child already has a parent
            RawTextChildError if an Element is appended to title/textarea
            CyclicReferenceError if an Element child is this element or one
                of its ancestors
            InvalidTextError if a text child contains invalid characters
        """
        if self._void:
            raise VoidElementError(f"Void element: <{self._realName}>")

        if not self._escapable:
            raise NotEscapableError(
                f"Raw text elements should not have contents: <{self._realName}>"
            )

        pending = set()
        for child in children:
            if isinstance(child, Element):
                if child._parent is not None or id(child) in pending:
                    raise AlreadyChildError(f"Already a child: {child!r}")

                if self._raw:
                    raise RawTextChildError(
                        f"Raw text elements cannot have element children: "
                        f"<{self._realName}>"
                    )

                current: Optional[Element] = self
                while current is not None:
                    if current is child:
                        raise CyclicReferenceError(
                            f"Cyclic reference: {child!r} is an ancestor of {self!r}"
                        )
                    current = current._parent
                pending.add(id(child))
            elif not Element.validateText(child):
                raise InvalidTextError(f"Invalid text data: {str(child)!r}")

        for child in children:
            if isinstance(child, Element):
                child._parent = self
                child._parentIndex = len(self._children)
                self._children.append(child)
            else:
                self._children.append(str(child))

    def remove(self) -> None:
        """
        remove - detach this element from its parent. Does nothing if this
            element has no parent. Children of this element stay attached
            to it.
        """
        parent = self._parent
        if parent is None:
            return
        log.debug("Detaching %r from %r", self, parent)
        if self._parentIndex is not None:
            parent._children[self._parentIndex] = None
        self._parent = None
        self._parentIndex = None

    @property
    def parentElement(self) -> Optional[Element]:
        return self._parent

    @property
    def ownerDocument(self) -> Optional[Document]:
        """
        ownerDocument - the Document this element belongs to, or None if the
            root of this tree is not a document element
        """
        current = self
        while current._parent is not None:
            current = current._parent
        return current._document

    @property
    def children(self) -> List[Union[Element, str]]:
        """
        children - Elements and text of this element, in document order
        """
        return [c for c in self._children if c is not None]

    @property
    def attributes(self) -> Dict[str, str]:
        """
        attributes - a copy of the attributes of this element
        """
        return dict(self._attributes)

    def setAttribute(self, name: str, value: Any) -> None:
        """
        setAttribute - set (create or overwrite) an attribute of this Element
        name: name of attribute. Raises InvalidNameError if not a valid name
        value: value of attribute, converted to a string. Raises
            InvalidTextError if it contains invalid characters
        """
        name = str(name)
        if not Element.validateToken(name):
            raise InvalidNameError(f"Unsafe attribute name: {name!r}")
        value = str(value)
        if not Element.validateText(value):
            raise InvalidTextError(f"Unsafe attribute value: {value!r}")
        self._attributes[name] = value

    def getAttribute(self, name: str) -> Optional[str]:
        """
        getAttribute - return the value of an attribute or None if not set
        """
        return self._attributes.get(str(name))

    def hasAttribute(self, name: str) -> bool:
        return str(name) in self._attributes

    def removeAttribute(self, name: str) -> None:
        """
        removeAttribute - remove an attribute from this Element if it exists
        """
        self._attributes.pop(str(name), None)

    @property
    def id(self) -> Optional[str]:
        return self.getAttribute("id")

    def clear(self) -> None:
        """
        clear - remove all children of this element. Element children are
            detached but keep their own children
        """
        for child in self._children:
            if isinstance(child, Element):
                child.remove()
        if self._children:
            log.debug("Cleared %d children of %r", len(self._children), self)
        self._children = []

    def getElementsByTagName(self, tagName: str) -> List[Element]:
        """
        getElementsByTagName - return a list of elements from this (sub)tree
            with the supplied tagName (case insensitive). Exhaustive search,
            depth first
        """
        wanted = str(tagName).lower()
        result: List[Element] = []
        if self._name == wanted:
            result.append(self)
        for c in self.children:
            if isinstance(c, Element):
                result.extend(c.getElementsByTagName(wanted))
        return result

    def getElementById(self, id: str) -> Optional[Element]:
        """
        getElementById - return the first Element of this (sub)tree, depth
            first, with the supplied id or None
        """
        if self.id == id:
            return self
        for c in self.children:
            if isinstance(c, Element):
                e = c.getElementById(id)
                if e is not None:
                    return e
        return None

    @property
    def innerHTML(self) -> str:
        """
        innerHTML - the children of this element as markup
        """
        ret: List[str] = []
        for c in self.children:
            if isinstance(c, Element):
                ret.append(c.outerHTML)
            else:
                ret.append(Element.escapeText(c))
        return "".join(ret)

    @property
    def innerText(self) -> str:
        """
        innerText (getter) - the text of this (sub)tree, escaped, without
            any tags
        """
        ret: List[str] = []
        for c in self.children:
            if isinstance(c, Element):
                ret.append(c.innerText)
            else:
                ret.append(Element.escapeText(c))
        return "".join(ret)

    @innerText.setter
    def innerText(self, text: Any) -> None:
        """
        innerText (setter) - replace all children of this element with a
            single text child. Same errors as clear() and append()
        """
        text = str(text)
        self.clear()
        self.append(text)

    @property
    def textContent(self) -> str:
        """
        textContent - the text of this (sub)tree as plain, unescaped text
        """
        ret: List[str] = []
        for c in self.children:
            if isinstance(c, Element):
                ret.append(c.textContent)
            else:
                ret.append(c)
        return "".join(ret)

    @property
    def outerHTML(self) -> str:
        """
        outerHTML - this element and its children as markup. Attributes are
            sorted by name so the output is deterministic
        """
        dest = ["<" + self._realName]
        for k in sorted(self._attributes):
            dest.append(f"\t{k}='{Element.escapeText(self._attributes[k])}'")
        if self._void:
            dest.append("/>")
        else:
            dest.append(f">{self.innerHTML}</{self._realName}>")
        return "".join(dest)

    def render(self) -> str:
        """
        render - render this element to a string of xhtml
        """
        return self.outerHTML

    def __str__(self) -> str:
        return self.outerHTML

    def __repr__(self) -> str:
        return f"<Element {self._realName!r}>"


class Document:
    """
    A complete XHTML document: html > head (meta charset, title), body
    """

    def __init__(self, title: Optional[str] = None):
        """
        title: initial document title (optional)
        """
        self._html = self.createElement("html")
        self._html._document = self
        self._html.setAttribute("xmlns", XHTML_NAMESPACE)
        self._html.setAttribute("xmlns:xlink", XLINK_NAMESPACE)

        self._head = self.createElement("head")
        self._html.append(self._head)

        self._body = self.createElement("body")
        self._html.append(self._body)

        self._charset = self.createElement("meta")
        self._charset.setAttribute("charset", "UTF-8")
        self._head.append(self._charset)

        self._title = self.createElement("title")
        self._head.append(self._title)

        if title is not None:
            self.title = title
        log.debug("Created document %r", self)

    def createElement(self, tagName: str) -> Element:
        """
        createElement - create a new (unattached) Element
        """
        return Element(tagName)

    @property
    def documentElement(self) -> Element:
        return self._html

    @property
    def head(self) -> Element:
        return self._head

    @property
    def body(self) -> Element:
        return self._body

    @property
    def title(self) -> str:
        """
        title (getter) - the document title as plain text
        """
        return self._title.textContent

    @title.setter
    def title(self, title: Any) -> None:
        self._title.innerText = title

    def getElementById(self, id: str) -> Optional[Element]:
        return self._html.getElementById(id)

    def getElementsByTagName(self, tagName: str) -> List[Element]:
        return self._html.getElementsByTagName(tagName)

    def render(self) -> str:
        """
        render - render this document to a string of xhtml, with doctype
        """
        return DOCTYPE + self._html.outerHTML

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Document title={self.title!r}>"


if __name__ == "__main__":
    d = makedocument("xhtmlbuilder")
    p = d.createElement("p")
    p.append("Hello & welcome")
    d.body.append(p)
    print(d.render())
