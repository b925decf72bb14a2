"""Extraction of match records from identification engine XML."""

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Union

from .exceptions import SpecimenStructureError
from .models import SCALAR_FIELDS, MatchRecord

logger = logging.getLogger(__name__)

# Output field -> location of the value below <specimen>
SPECIMEN_PATHS = {
    'specimen_url': 'url',
    'specimen_country': 'collectionlocation/country',
    'specimen_lat': 'collectionlocation/coord/lat',
    'specimen_lon': 'collectionlocation/coord/lon',
}


def element_text(element: Optional[ET.Element]) -> Optional[str]:
    """Get the full text content of an element, or None if it is missing."""
    if element is None:
        return None
    return "".join(element.itertext())


def leaf_value(element: Optional[ET.Element]) -> Optional[str]:
    """Get the text of a specimen leaf; empty leaves count as missing."""
    text = element_text(element)
    if text is None or not text.strip():
        return None
    return text.strip()


def extract_specimen(specimen: Optional[ET.Element]) -> Dict[str, Optional[str]]:
    """Look up the specimen fields by name.

    Each field is read from its documented path first. If the path is absent
    the first descendant carrying the leaf name is used instead, so a shifted
    nesting level still yields the right value rather than a mislabelled one.
    Fields that cannot be found are None.
    """
    values = {name: None for name in SPECIMEN_PATHS}
    if specimen is None:
        return values

    for name, path in SPECIMEN_PATHS.items():
        element = specimen.find(path)
        if element is None:
            element = specimen.find(f".//{path.rsplit('/', 1)[-1]}")
        values[name] = leaf_value(element)

    return values


def extract_match(match: ET.Element, strict: bool = False) -> MatchRecord:
    """Flatten a single <match> element.

    Args:
        match: The <match> element
        strict: Raise instead of filling nulls when <specimen> is missing

    Returns:
        The flattened record
    """
    fields = {name: element_text(match.find(name)) for name in SCALAR_FIELDS}

    specimen = match.find('specimen')
    if specimen is None:
        if strict:
            raise SpecimenStructureError(fields['ID'])
        logger.debug(f"Match {fields['ID']} has no specimen element; filling with nulls")

    fields.update(extract_specimen(specimen))
    return MatchRecord(**fields)


def parse_matches(xml: Union[str, bytes], strict: bool = False) -> List[MatchRecord]:
    """Parse a response body into match records in document order.

    Raises:
        xml.etree.ElementTree.ParseError: If the body is not well-formed XML
    """
    root = ET.fromstring(xml)
    records = [extract_match(match, strict=strict) for match in root.iter('match')]
    logger.debug(f"Parsed {len(records)} matches")
    return records
