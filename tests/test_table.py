"""Tests for table assembly."""

import pandas as pd

from bold_identify.models import COLUMNS, MatchRecord
from bold_identify.table import build_table, union_columns


class TestBuildTable:
    """Test cases for build_table."""
    
    def test_empty_table_has_fixed_columns(self):
        """Test no records gives zero rows and the standard columns."""
        table = build_table([])
        
        assert isinstance(table, pd.DataFrame)
        assert len(table) == 0
        assert list(table.columns) == list(COLUMNS)
    
    def test_one_row_per_record(self):
        """Test row count equals record count."""
        records = [MatchRecord(ID=str(i)) for i in range(3)]
        table = build_table(records)
        
        assert len(table) == 3
        assert list(table['ID']) == ["0", "1", "2"]
        assert list(table.columns) == list(COLUMNS)
    
    def test_column_union_with_null_fill(self):
        """Test heterogeneous rows get the union of columns."""
        rows = [
            {'ID': "a", 'citation': "x"},
            {'ID': "b", 'similarity': "0.99"},
        ]
        table = build_table(rows)
        
        assert list(table.columns) == ['ID', 'citation', 'similarity']
        assert table.loc[0, 'similarity'] is None
        assert table.loc[1, 'citation'] is None
        assert table.loc[1, 'similarity'] == "0.99"
    
    def test_none_not_converted(self):
        """Test None values stay None rather than NaN or empty string."""
        table = build_table([MatchRecord(ID="a", similarity=None)])
        
        assert table.loc[0, 'similarity'] is None
    
    def test_numeric_strings_preserved(self):
        """Test numeric-looking values are not coerced."""
        table = build_table([MatchRecord(ID="a", similarity="1", specimen_lat="12.50")])
        
        assert table.loc[0, 'similarity'] == "1"
        assert table.loc[0, 'specimen_lat'] == "12.50"


def test_union_columns_first_seen_order():
    """Test column union keeps first-seen order without duplicates."""
    assert union_columns([{'b': 1, 'a': 2}, {'a': 3, 'c': 4}]) == ['b', 'a', 'c']
