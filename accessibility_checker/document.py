"""
Document model: a thin query layer over a BeautifulSoup parse tree.
"""

from typing import Iterable, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import ParseError

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
FORM_FIELD_TAGS = ("input", "textarea", "select")


class Document:
    """Parsed HTML document exposing the queries the checkers need."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html_text: Union[str, bytes]) -> "Document":
        """Parse raw markup. Raises ParseError if the parser gives up."""
        try:
            soup = BeautifulSoup(html_text, "html.parser")
        except Exception as e:
            raise ParseError(f"Could not parse HTML: {e}") from e
        return cls(soup)

    def find_all(self, names: Union[str, Iterable[str]], **attrs) -> List[Tag]:
        if not isinstance(names, str):
            names = list(names)
        return self.soup.find_all(names, attrs=attrs or {})

    def find(self, name: str, **attrs) -> Optional[Tag]:
        return self.soup.find(name, attrs=attrs or {})

    @property
    def root(self) -> Optional[Tag]:
        """The <html> element, if the markup has one."""
        return self.soup.find("html")

    @property
    def title(self) -> Optional[Tag]:
        return self.soup.find("title")

    def headings(self) -> List[Tag]:
        """All h1..h6 elements in document order."""
        return self.soup.find_all(list(HEADING_TAGS))

    def has_label_for(self, element_id: str) -> bool:
        """True if some <label for="element_id"> exists anywhere in the document."""
        if not element_id:
            return False
        return self.soup.find("label", attrs={"for": element_id}) is not None


def attr(tag: Tag, name: str) -> Optional[str]:
    """Attribute value as a string, or None if absent. Multi-valued attributes are joined."""
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return value


def text_content(tag: Tag) -> str:
    return tag.get_text()


def outer_html(tag: Tag) -> str:
    return str(tag)


def heading_level(tag: Tag) -> int:
    """h1 -> 1 ... h6 -> 6."""
    return int(tag.name[1])
