"""Shared fixtures for identification client tests."""

from unittest.mock import Mock

import pytest
import requests

from bold_identify.client import IdentificationClient


FULL_MATCH = """
  <match>
    <ID>GBMIN12345-13</ID>
    <sequencedescription>COI-5P</sequencedescription>
    <database>Published</database>
    <citation>Bufo bufo</citation>
    <taxonomicidentification>Bufo bufo</taxonomicidentification>
    <similarity>0.9984</similarity>
    <specimen>
      <url>http://www.boldsystems.org/index.php/Public_RecordView?processid=GBMIN12345-13</url>
      <collectionlocation>
        <country>Germany</country>
        <coord>
          <lat>51.2</lat>
          <lon>10.45</lon>
        </coord>
      </collectionlocation>
    </specimen>
  </match>"""

PARTIAL_MATCH = """
  <match>
    <ID>ABC123-09</ID>
    <sequencedescription>COI-5P</sequencedescription>
    <database>Early-Release</database>
    <taxonomicidentification>Bufo spinosus</taxonomicidentification>
    <specimen>
      <url>http://www.boldsystems.org/index.php/Public_RecordView?processid=ABC123-09</url>
      <collectionlocation>
        <country>France</country>
        <coord>
          <lat>46.1</lat>
          <lon>2.3</lon>
        </coord>
      </collectionlocation>
    </specimen>
  </match>"""


def matches_xml(*matches):
    """Wrap match fragments in an identification response document."""
    return '<?xml version="1.0" encoding="UTF-8"?>\n<matches>' + "".join(matches) + "\n</matches>"


def make_response(body="", status_code=200, content_type="text/xml",
                  url="http://boldsystems.org/index.php/Ids_xml"):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    if content_type is not None:
        response.headers["Content-Type"] = content_type
    response.url = url
    response.encoding = "utf-8"
    return response


@pytest.fixture
def full_match_xml():
    """Response body with a single fully populated match."""
    return matches_xml(FULL_MATCH)


@pytest.fixture
def two_match_xml():
    """Response body with one full and one partial match."""
    return matches_xml(FULL_MATCH, PARTIAL_MATCH)


@pytest.fixture
def empty_xml():
    """Response body without matches."""
    return matches_xml()


@pytest.fixture
def mock_session():
    """A requests session whose get() is mocked."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client(mock_session):
    """A client using the mocked session."""
    return IdentificationClient(session=mock_session)


@pytest.fixture
def response_factory():
    """Factory for canned responses."""
    return make_response


@pytest.fixture
def xml_factory():
    """Factory for identification response documents."""
    return matches_xml
