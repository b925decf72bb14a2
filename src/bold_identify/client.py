"""HTTP access to the BOLD identification engine."""

import logging
import time
from typing import Any, Dict, Optional

import requests

from .config import IDS_XML_URL, RequestOptions
from .exceptions import ContentTypeError
from .logging_config import log_api_call, short_sequence
from .models import database_value

logger = logging.getLogger(__name__)


class IdentificationClient:
    """Sends sequences to the BOLD ``Ids_xml`` endpoint.

    No retries are attempted; transport errors and non-2xx responses are
    raised to the caller as they happen.
    """

    EXPECTED_CONTENT_TYPE = "text/xml"

    def __init__(self, base_url: str = IDS_XML_URL,
                 options: Optional[RequestOptions] = None,
                 session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            base_url: Identification endpoint URL
            options: Transport options forwarded to requests
            session: Optional pre-configured requests session
        """
        self.base_url = base_url
        self.options = options or RequestOptions()
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    @staticmethod
    def compact(params: Dict[str, Any]) -> Dict[str, Any]:
        """Drop query parameters that are None or empty."""
        return {key: value for key, value in params.items()
                if value is not None and value != ""}

    def build_query(self, sequence: Optional[str], db: Any) -> Dict[str, Any]:
        """Build the query parameters for one sequence."""
        return self.compact({'sequence': sequence, 'db': database_value(db)})

    def fetch(self, sequence: Optional[str], db: Any = "COX1") -> requests.Response:
        """Query the identification engine for one sequence.

        Args:
            sequence: Nucleotide sequence
            db: Database selector, forwarded without local validation

        Returns:
            The validated response

        Raises:
            requests.RequestException: On transport failure
            requests.HTTPError: On a non-2xx status
            ContentTypeError: If the response is not declared as text/xml
        """
        params = self.build_query(sequence, db)
        logger.debug(f"Querying {self.base_url} for {short_sequence(sequence)} (db={params.get('db')})")

        start_time = time.time()
        try:
            response = self.session.get(self.base_url, params=params,
                                        **self.options.to_requests_kwargs())
        except requests.RequestException:
            log_api_call('BOLD', self.base_url, params, time.time() - start_time, False)
            raise

        try:
            self.check_response(response)
        except (requests.HTTPError, ContentTypeError):
            log_api_call('BOLD', self.base_url, params, time.time() - start_time, False)
            raise

        log_api_call('BOLD', self.base_url, params, time.time() - start_time, True)
        return response

    def check_response(self, response: requests.Response) -> None:
        """Validate the status and declared content type of a response."""
        response.raise_for_status()

        content_type = response.headers.get('Content-Type')
        media_type = content_type.split(';')[0].strip().lower() if content_type else None
        if media_type != self.EXPECTED_CONTENT_TYPE:
            raise ContentTypeError(content_type, self.EXPECTED_CONTENT_TYPE, response.url)
