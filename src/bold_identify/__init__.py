"""BOLD Systems COI identification client.

Submit nucleotide sequences to the BOLD identification engine and get back
one pandas table of specimen matches per sequence.
"""

__version__ = "0.1.0"
__author__ = "Austin P. Morrissey"

from .config import RequestOptions
from .exceptions import BoldIdentifyError, ContentTypeError, SpecimenStructureError
from .core import identify
from .models import Database

__all__ = [
    "identify",
    "Database",
    "RequestOptions",
    "BoldIdentifyError",
    "ContentTypeError",
    "SpecimenStructureError",
]
