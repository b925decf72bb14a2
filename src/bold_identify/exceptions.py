"""Error types raised by the identification client."""

from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Types of errors that can occur."""
    CONTENT_TYPE = "content_type"
    SPECIMEN_STRUCTURE = "specimen_structure"
    CONFIGURATION = "configuration"
    INPUT_ERROR = "input_error"
    UNKNOWN = "unknown"


class BoldIdentifyError(Exception):
    """Base class for errors raised by this package."""
    
    error_type = ErrorType.UNKNOWN
    default_suggestion: Optional[str] = None
    
    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion or self.default_suggestion
    
    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ContentTypeError(BoldIdentifyError):
    """Response declared a content type other than text/xml."""
    
    error_type = ErrorType.CONTENT_TYPE
    default_suggestion = "The service may be down or the URL may point at the wrong endpoint."
    
    def __init__(self, content_type: Optional[str], expected: str = "text/xml", url: Optional[str] = None):
        self.content_type = content_type
        self.expected = expected
        self.url = url
        message = f"Expected content type '{expected}', got '{content_type}'"
        if url:
            message += f" from {url}"
        super().__init__(message)


class SpecimenStructureError(BoldIdentifyError):
    """A <match> node has no <specimen> child (strict mode only)."""
    
    error_type = ErrorType.SPECIMEN_STRUCTURE
    default_suggestion = "Disable strict mode to fill missing specimen fields with nulls."
    
    def __init__(self, match_id: Optional[str] = None):
        self.match_id = match_id
        super().__init__(f"Match {match_id or '<unknown>'} has no specimen element")


class ConfigurationError(BoldIdentifyError):
    """Configuration file could not be read or contained invalid settings."""
    
    error_type = ErrorType.CONFIGURATION
    default_suggestion = "Regenerate a config file with --generate-config."


class InputError(BoldIdentifyError):
    """Input file could not be parsed into sequences."""
    
    error_type = ErrorType.INPUT_ERROR
