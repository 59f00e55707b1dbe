"""
Content Extractor — derives checkable facts from a job description.
Uses BeautifulSoup on the decoded description markup.

Two facts are extracted:
  1. the first sentence of the third non-empty paragraph
  2. the second bullet of every list that follows a heading-like sibling,
     keyed by the lower-cased heading text
"""

import html
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from models.errors import ParseError
from models.job import ParsedDescription


# Break after a period followed by whitespace; the period stays with its sentence.
SENTENCE_BOUNDARY = re.compile(r"(?<=\.)\s+")


def _text(element: Tag) -> str:
    """Element text with runs of whitespace collapsed to single spaces."""
    return " ".join(element.get_text().split())


def _build_document(raw_markup: str) -> BeautifulSoup:
    """
    Decode and parse description markup, dropping empty paragraphs.

    Raises:
        ParseError: If the markup is not text or the parser rejects it.
    """
    if not isinstance(raw_markup, str):
        raise ParseError(
            f"Job description must be a string, got {type(raw_markup).__name__}"
        )

    decoded = html.unescape(raw_markup)

    try:
        soup = BeautifulSoup(decoded, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseError(f"Job description markup could not be parsed: {e}") from e

    # A line break separates words in rendered text; get_text() would glue them
    for line_break in soup.find_all("br"):
        line_break.replace_with("\n")

    # Empty <p> elements are layout spacers and must not shift paragraph indices
    for paragraph in soup.find_all("p"):
        if paragraph.decomposed:
            continue
        if not _text(paragraph):
            paragraph.decompose()

    return soup


def first_sentence(text: str) -> str:
    """Return the first sentence of text (the whole text if it has no period)."""
    return SENTENCE_BOUNDARY.split(text.strip(), maxsplit=1)[0].strip()


def extract_third_paragraph_sentence(soup: BeautifulSoup) -> Optional[str]:
    """First sentence of the third non-empty paragraph, or None if there are fewer than 3."""
    paragraphs = [_text(p) for p in soup.find_all("p")]
    paragraphs = [p for p in paragraphs if p]

    if len(paragraphs) < 3:
        return None

    return first_sentence(paragraphs[2])


def _previous_element_sibling(element: Tag) -> Optional[Tag]:
    for sibling in element.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def extract_second_bullets_by_header(soup: BeautifulSoup) -> dict[str, str]:
    """
    Map lower-cased section headers to the second bullet of the list under them.

    A later list under the same header overwrites an earlier one. Lists
    without a non-empty preceding element, or with fewer than two items,
    are skipped.
    """
    bullets = {}

    for ul in soup.find_all("ul"):
        header_element = _previous_element_sibling(ul)
        if header_element is None:
            continue

        header = _text(header_element)
        if not header:
            continue

        items = ul.find_all("li", recursive=False)
        if len(items) >= 2:
            bullets[header.lower()] = _text(items[1])

    return bullets


def parse_description(raw_markup: str) -> ParsedDescription:
    """
    Parse HTML-escaped job description markup into a ParsedDescription.

    Args:
        raw_markup: Description as embedded in the page (e.g. "&lt;p&gt;...").

    Returns:
        ParsedDescription with the third-paragraph sentence (or None) and
        the header-keyed second bullets.

    Raises:
        ParseError: If the markup cannot be parsed. No partial result is returned.
    """
    soup = _build_document(raw_markup)

    return ParsedDescription(
        third_paragraph_first_sentence=extract_third_paragraph_sentence(soup),
        second_bullets_by_header=extract_second_bullets_by_header(soup),
    )
