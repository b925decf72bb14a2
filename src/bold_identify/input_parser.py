"""Reading query sequences from FASTA and plain text files."""

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from Bio import SeqIO

from .exceptions import InputError

logger = logging.getLogger(__name__)

# IUPAC nucleotide codes plus gaps
NUCLEOTIDE_PATTERN = re.compile(r'^[ACGTURYSWKMBDHVN\-.]+$', re.IGNORECASE)


@dataclass
class SequenceInput:
    """A named query sequence."""
    name: str
    sequence: str

    @property
    def length(self) -> int:
        return len(self.sequence)


class InputParser:
    """Parser for sequence input files."""

    FASTA_SUFFIXES = ['.fasta', '.fa', '.fas', '.fna', '.ffn']
    TEXT_SUFFIXES = ['.txt', '.text', '.seq']

    def __init__(self, encoding: str = 'utf-8'):
        """Initialize the parser."""
        self.encoding = encoding
        self.last_format = None

    def parse_file(self, file_path: Union[str, Path]) -> List[SequenceInput]:
        """
        Parse a file into named sequences.

        Args:
            file_path: Path to a FASTA or plain text file

        Returns:
            List of sequences in file order

        Raises:
            FileNotFoundError: If file doesn't exist
            InputError: If no sequences could be read
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        suffix = path.suffix.lower()

        if suffix in self.FASTA_SUFFIXES:
            sequences = self._parse_fasta_file(path)
        elif suffix in self.TEXT_SUFFIXES:
            sequences = self._parse_text_file(path)
        else:
            sequences = self._parse_auto_detect(path)

        if not sequences:
            raise InputError(f"No sequences found in {file_path}")

        for item in sequences:
            self._check_sequence(item)

        return sequences

    def parse_strings(self, sequences: List[str], prefix: str = "seq") -> List[SequenceInput]:
        """Name raw sequence strings given on the command line."""
        return [SequenceInput(name=f"{prefix}{i}", sequence=self._clean(s))
                for i, s in enumerate(sequences, start=1)]

    def _parse_fasta_file(self, path: Path) -> List[SequenceInput]:
        """Parse a FASTA file with Biopython."""
        with open(path, 'r', encoding=self.encoding) as f:
            content = f.read()

        return self._parse_fasta_text(content, path)

    def _parse_fasta_text(self, content: str, path: Path) -> List[SequenceInput]:
        """Parse FASTA content, ignoring blank lines before the first record."""
        try:
            sequences = [SequenceInput(name=record.id, sequence=self._clean(str(record.seq)))
                         for record in SeqIO.parse(io.StringIO(content.lstrip()), 'fasta')]
        except ValueError as e:
            raise InputError(f"Invalid FASTA in {path}: {e}") from e

        self.last_format = 'fasta'
        return sequences

    def _parse_text_file(self, path: Path) -> List[SequenceInput]:
        """Parse plain text file with one sequence per line."""
        lines = []
        with open(path, 'r', encoding=self.encoding) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):  # Skip comments
                    lines.append(line)

        self.last_format = 'text'
        return self.parse_strings(lines)

    def _parse_auto_detect(self, path: Path) -> List[SequenceInput]:
        """Pick FASTA or plain text from the first non-blank character."""
        with open(path, 'r', encoding=self.encoding) as f:
            content = f.read().lstrip()

        if content.startswith('>'):
            return self._parse_fasta_text(content, path)
        return self._parse_text_file(path)

    @staticmethod
    def _clean(sequence: str) -> str:
        return "".join(sequence.split()).upper()

    @staticmethod
    def _check_sequence(item: SequenceInput) -> None:
        if not NUCLEOTIDE_PATTERN.match(item.sequence):
            logger.warning(f"Sequence {item.name} contains non-nucleotide characters")
        elif item.length < 80:
            logger.warning(f"Sequence {item.name} is only {item.length}bp; matches may be unreliable")

    def get_format_info(self) -> dict:
        """Get information about the last parsed file."""
        return {'format': self.last_format}
