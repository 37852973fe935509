"""
Status Parser Module

This module turns a timeline XML document into TimelinePost records.
It provides document parsing, status node lookup, relative field
extraction and created_at date parsing.
"""

from datetime import datetime, timezone
from typing import Optional, List
import xml.etree.ElementTree as ET

from config import settings
from data.models import TimelinePost, EPOCH
from utils.exceptions import DocumentParseError
from utils.logger import get_logger

logger = get_logger(__name__)


def parse_document(raw: bytes, strict: bool = False) -> Optional[ET.Element]:
    """
    Parse a raw timeline response into an XML element tree.

    Args:
        raw: The response body.
        strict: Raise instead of returning None when the body is not XML.

    Returns:
        Optional[ET.Element]: The document root, or None if parsing failed.

    Raises:
        DocumentParseError: If strict is True and the body is not well-formed.
    """
    try:
        return ET.fromstring(raw)
    except ET.ParseError as e:
        if strict:
            raise DocumentParseError(f"Timeline response is not well-formed XML: {e}") from e
        logger.warning(f"Timeline response is not well-formed XML: {e}")
        return None


def find_status_nodes(root: Optional[ET.Element]) -> List[ET.Element]:
    """
    Find every status element carrying both a text and a created_at child.

    Equivalent to the XPath query /statuses/status[text][created_at].

    Args:
        root: The document root returned by parse_document.

    Returns:
        List[ET.Element]: Matching status nodes in document order.
    """
    if root is None or root.tag != settings.STATUS_ROOT_TAG:
        return []
    return root.findall(settings.STATUS_QUERY)


def extract_text(node: ET.Element, field_path: str) -> Optional[str]:
    """
    Get the first text node found under a path relative to a node.

    Equivalent to evaluating "<field_path>/text()" with the node as the
    context node and taking the first result.

    Args:
        node: The context node.
        field_path: A relative ElementPath expression, e.g. "text".

    Returns:
        Optional[str]: The text, or None if the path matched nothing
            or the matched elements hold no text.
    """
    for element in node.findall(field_path):
        if element.text is not None:
            return element.text
        for child in element:
            if child.tail is not None:
                return child.tail
    return None


def parse_created_at(date_text: Optional[str]) -> datetime:
    """
    Parse a created_at value such as "Thu May 06 06:20:06 +0000 2010".
    Surrounding whitespace is ignored, as is anything after the year.

    Args:
        date_text: The raw created_at text.

    Returns:
        datetime: An aware UTC datetime, or EPOCH if the value could not be parsed.
    """
    if not date_text:
        return EPOCH

    field_count = len(settings.CREATED_AT_FORMAT.split())
    fields = " ".join(date_text.split()[:field_count])
    try:
        parsed = datetime.strptime(fields, settings.CREATED_AT_FORMAT)
    except ValueError:
        logger.debug(f"Unparsable created_at value: {date_text!r}")
        return EPOCH
    return parsed.replace(tzinfo=timezone.utc)


def build_post(message: Optional[str], date_text: Optional[str]) -> TimelinePost:
    """Build a TimelinePost from the raw text and created_at values."""
    return TimelinePost(timestamp=parse_created_at(date_text), message=message or "")


def parse_statuses(raw: bytes) -> List[TimelinePost]:
    """
    Parse a timeline response into posts, in document order.

    Missing fields become empty strings and bad dates become EPOCH;
    no matched status is dropped.

    Args:
        raw: The response body.

    Returns:
        List[TimelinePost]: One post per matching status node.
    """
    root = parse_document(raw)
    nodes = find_status_nodes(root)
    logger.info(f"Found {len(nodes)} status entries")

    posts = []
    for node in nodes:
        text = extract_text(node, settings.TEXT_FIELD)
        created_at = extract_text(node, settings.CREATED_AT_FIELD)
        posts.append(build_post(text, created_at))

    invalid = sum(1 for post in posts if not post.has_valid_timestamp)
    if invalid:
        logger.warning(f"{invalid} of {len(posts)} posts had an unparsable created_at value")

    return posts
