"""Output formatting for identification results."""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from .models import COLUMNS


class OutputFormatter:
    """Combines per-sequence tables and writes them out."""

    QUERY_COLUMN = "query"
    FORMATS = ('tsv', 'csv', 'json')

    def __init__(self, excel_compatible: bool = False):
        """
        Initialize the formatter.

        Args:
            excel_compatible: Write delimited files with a UTF-8 BOM
        """
        self.excel_compatible = excel_compatible

    def combine(self, names: Sequence[str], tables: Sequence[pd.DataFrame]) -> pd.DataFrame:
        """
        Stack per-sequence tables into one, labelled by query name.

        A query without matches contributes no rows.
        """
        if len(names) != len(tables):
            raise ValueError(f"Got {len(names)} names for {len(tables)} tables")

        frames = []
        for name, table in zip(names, tables):
            if table.empty:
                continue
            frame = table.copy()
            frame.insert(0, self.QUERY_COLUMN, name)
            frames.append(frame)

        if not frames:
            return pd.DataFrame(columns=[self.QUERY_COLUMN] + list(COLUMNS), dtype=object)

        combined = pd.concat(frames, ignore_index=True, sort=False).astype(object)
        return combined.where(pd.notna(combined), None)

    def format_results(self,
                       table: pd.DataFrame,
                       output_path: Union[str, Path],
                       format: str = 'tsv',
                       db: Optional[str] = None) -> None:
        """
        Write a results table to file.

        Args:
            table: Combined results table
            output_path: Path to output file
            format: Output format ('tsv', 'csv', 'json')
            db: Database the sequences were searched against
        """
        path = Path(output_path)

        if format == 'tsv':
            self._write_delimited(table, path, '\t')
        elif format == 'csv':
            self._write_delimited(table, path, ',')
        elif format == 'json':
            self._write_json(table, path, db)
        else:
            raise ValueError(f"Unsupported format: {format}")

    def to_text(self, table: pd.DataFrame, format: str = 'tsv') -> str:
        """Render a results table as a string."""
        if format == 'json':
            return json.dumps(self._records(table), indent=2)
        sep = ',' if format == 'csv' else '\t'
        return table.to_csv(sep=sep, index=False)

    def _write_delimited(self, table: pd.DataFrame, path: Path, sep: str) -> None:
        """Write TSV/CSV with optional UTF-8 BOM."""
        encoding = 'utf-8-sig' if self.excel_compatible else 'utf-8'
        table.to_csv(path, sep=sep, index=False, encoding=encoding)

    def _write_json(self, table: pd.DataFrame, path: Path, db: Optional[str]) -> None:
        """Write JSON with a metadata header."""
        queries = table[self.QUERY_COLUMN].unique().tolist() if self.QUERY_COLUMN in table else []
        output = {
            'metadata': {
                'generated': datetime.now().isoformat(),
                'database': db,
                'queries_with_matches': len(queries),
                'total_matches': len(table)
            },
            'results': self._records(table)
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(output, f, indent=2)

    @staticmethod
    def _records(table: pd.DataFrame) -> List[dict]:
        return table.astype(object).where(pd.notna(table), None).to_dict(orient='records')
