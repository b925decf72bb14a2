"""Tests for match extraction."""

import xml.etree.ElementTree as ET

import pytest

from bold_identify.exceptions import SpecimenStructureError
from bold_identify.models import COLUMNS, MatchRecord
from bold_identify.parser import extract_match, extract_specimen, parse_matches


class TestParseMatches:
    """Test cases for parse_matches."""
    
    def test_full_match_fields(self, full_match_xml):
        """Test all ten fields are extracted in order."""
        records = parse_matches(full_match_xml)
        
        assert len(records) == 1
        record = records[0].to_dict()
        assert list(record) == list(COLUMNS)
        assert list(record.values()) == [
            "GBMIN12345-13",
            "COI-5P",
            "Published",
            "Bufo bufo",
            "Bufo bufo",
            "0.9984",
            "http://www.boldsystems.org/index.php/Public_RecordView?processid=GBMIN12345-13",
            "Germany",
            "51.2",
            "10.45",
        ]
    
    def test_similarity_kept_as_string(self, full_match_xml):
        """Test similarity is not coerced to a number."""
        record = parse_matches(full_match_xml)[0]
        assert record.similarity == "0.9984"
    
    def test_no_matches(self, empty_xml):
        """Test a document without matches gives no records."""
        assert parse_matches(empty_xml) == []
    
    def test_match_count_and_order(self, two_match_xml):
        """Test one record per match in document order."""
        records = parse_matches(two_match_xml)
        
        assert [r.ID for r in records] == ["GBMIN12345-13", "ABC123-09"]
    
    def test_missing_scalar_fields_are_none(self, two_match_xml):
        """Test absent scalar elements become None."""
        record = parse_matches(two_match_xml)[1]
        
        assert record.citation is None
        assert record.similarity is None
        assert record.taxonomicidentification == "Bufo spinosus"
        assert record.specimen_country == "France"
    
    def test_nested_matches_found(self):
        """Test match elements are found at any depth."""
        xml = "<root><group><match><ID>A</ID></match></group><match><ID>B</ID></match></root>"
        
        assert [r.ID for r in parse_matches(xml)] == ["A", "B"]
    
    def test_bytes_input(self, full_match_xml):
        """Test bytes bodies with an encoding declaration are accepted."""
        records = parse_matches(full_match_xml.encode("utf-8"))
        assert records[0].ID == "GBMIN12345-13"
    
    def test_malformed_xml_raises(self):
        """Test malformed XML propagates a parse error."""
        with pytest.raises(ET.ParseError):
            parse_matches("<matches><match><ID>x</ID></matches>")


class TestSpecimenExtraction:
    """Test cases for specimen field lookup."""
    
    def test_missing_specimen_padded(self):
        """Test a match without specimen gets null specimen fields."""
        match = ET.fromstring("<match><ID>X1</ID><similarity>1</similarity></match>")
        record = extract_match(match)
        
        assert record.ID == "X1"
        assert record.specimen_url is None
        assert record.specimen_country is None
        assert record.specimen_lat is None
        assert record.specimen_lon is None
    
    def test_missing_specimen_strict(self):
        """Test strict mode rejects a match without specimen."""
        match = ET.fromstring("<match><ID>X1</ID></match>")
        
        with pytest.raises(SpecimenStructureError) as exc_info:
            extract_match(match, strict=True)
        
        assert exc_info.value.match_id == "X1"
    
    def test_partial_specimen(self):
        """Test missing coordinates do not shift other fields."""
        specimen = ET.fromstring(
            "<specimen><url>http://x</url>"
            "<collectionlocation><country>Peru</country></collectionlocation></specimen>"
        )
        values = extract_specimen(specimen)
        
        assert values == {
            'specimen_url': "http://x",
            'specimen_country': "Peru",
            'specimen_lat': None,
            'specimen_lon': None,
        }
    
    def test_empty_leaves_are_none(self):
        """Test empty specimen leaves become None, not empty strings."""
        specimen = ET.fromstring(
            "<specimen><url/><collectionlocation><country></country>"
            "<coord><lat>1.5</lat><lon/></coord></collectionlocation></specimen>"
        )
        values = extract_specimen(specimen)
        
        assert values['specimen_url'] is None
        assert values['specimen_country'] is None
        assert values['specimen_lat'] == "1.5"
        assert values['specimen_lon'] is None
    
    def test_fields_found_by_name_when_nesting_differs(self):
        """Test leaves are matched by name when the expected path is absent."""
        specimen = ET.fromstring(
            "<specimen><coord><lon>3.0</lon><lat>4.0</lat></coord>"
            "<country>Chile</country><url>http://y</url></specimen>"
        )
        values = extract_specimen(specimen)
        
        assert values == {
            'specimen_url': "http://y",
            'specimen_country': "Chile",
            'specimen_lat': "4.0",
            'specimen_lon': "3.0",
        }
    
    def test_extra_leaves_ignored(self):
        """Test unrelated specimen leaves do not displace known fields."""
        specimen = ET.fromstring(
            "<specimen><sampleid>S1</sampleid><url>http://z</url>"
            "<collectionlocation><province>Ontario</province><country>Canada</country>"
            "<coord><lat>43.5</lat><lon>-80.2</lon></coord></collectionlocation></specimen>"
        )
        values = extract_specimen(specimen)
        
        assert values['specimen_url'] == "http://z"
        assert values['specimen_country'] == "Canada"
        assert values['specimen_lat'] == "43.5"
        assert values['specimen_lon'] == "-80.2"


def test_match_record_defaults():
    """Test an empty MatchRecord is all None."""
    assert all(value is None for value in MatchRecord().to_dict().values())
