"""Data models for the BOLD identification client."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class Database(Enum):
    """Reference libraries searchable by the identification engine."""
    COX1 = "COX1"
    COX1_SPECIES = "COX1_SPECIES"
    COX1_SPECIES_PUBLIC = "COX1_SPECIES_PUBLIC"
    COX1_L604BP = "COX1_L604bp"


# Child elements of <match> copied verbatim, in output order
SCALAR_FIELDS = (
    "ID",
    "sequencedescription",
    "database",
    "citation",
    "taxonomicidentification",
    "similarity",
)

SPECIMEN_FIELDS = (
    "specimen_url",
    "specimen_country",
    "specimen_lat",
    "specimen_lon",
)

COLUMNS = SCALAR_FIELDS + SPECIMEN_FIELDS


@dataclass
class MatchRecord:
    """One <match> node flattened into a single row."""
    
    ID: Optional[str] = None
    sequencedescription: Optional[str] = None
    database: Optional[str] = None
    citation: Optional[str] = None
    taxonomicidentification: Optional[str] = None
    similarity: Optional[str] = None
    specimen_url: Optional[str] = None
    specimen_country: Optional[str] = None
    specimen_lat: Optional[str] = None
    specimen_lon: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Return the record as an ordered field -> value mapping."""
        return asdict(self)


def database_value(db: Any) -> Optional[str]:
    """Get the query string value for a database selector.
    
    Strings are passed through unchanged; validation is left to the server.
    """
    if isinstance(db, Database):
        return db.value
    return db
