# ABOUTME: Converts ComicInfo.xml text into a plain nested dict using lxml.
# ABOUTME: Tag names are lowercased and namespace-stripped; repeated tags collect into lists.

from typing import Any

from lxml import etree


class ComicInfoParseError(Exception):
    """Raised when sidecar XML cannot be parsed."""


def _make_parser() -> etree.XMLParser:
    """Build a parser that never fetches or expands external content."""
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=False,
    )


def _local_name(tag: str) -> str:
    """Return a tag without namespace, lowercased ('{ns}Series' -> 'series')."""
    return etree.QName(tag).localname.lower()


def _element_to_value(elem: etree._Element) -> Any:
    """Leaf elements become stripped text; parents become dicts of lists."""
    children = [child for child in elem if isinstance(child.tag, str)]
    if not children:
        return (elem.text or "").strip()

    value: dict[str, list[Any]] = {}
    for child in children:
        value.setdefault(_local_name(child.tag), []).append(_element_to_value(child))
    return value


def xml_to_object(text: str) -> dict[str, Any] | None:
    """Parse XML text into a dict keyed by the lowercased root tag.

    Example: "<ComicInfo><Series>Saga</Series></ComicInfo>" becomes
    {"comicinfo": {"series": ["Saga"]}}.

    Args:
        text: The XML document as a string.

    Returns:
        The converted document, or None if the text is blank.

    Raises:
        ComicInfoParseError: If the text is not well-formed XML.
    """
    if not text or not text.strip():
        return None

    # lxml rejects str input carrying an encoding declaration, so hand it bytes.
    try:
        root = etree.fromstring(text.encode("utf-8"), _make_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise ComicInfoParseError(f"Invalid ComicInfo XML: {exc}") from exc

    if root is None:
        return None
    return {_local_name(root.tag): _element_to_value(root)}
