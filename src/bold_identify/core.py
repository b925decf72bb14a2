"""Top-level identification of sequences against BOLD."""

import logging
from typing import Callable, Iterable, List, Optional, Union

import pandas as pd
import requests

from .client import IdentificationClient
from .config import IDS_XML_URL, RequestOptions
from .logging_config import LogTimer, short_sequence
from .models import Database
from .parallel_processor import ParallelProcessor
from .parser import parse_matches
from .table import build_table

logger = logging.getLogger(__name__)

IdentifyResult = Union[pd.DataFrame, requests.Response]


def identify_sequence(client: IdentificationClient,
                      sequence: Optional[str],
                      db: Union[str, Database] = "COX1",
                      response: bool = False,
                      strict: bool = False) -> IdentifyResult:
    """Identify one sequence.

    Args:
        client: Client used to query the service
        sequence: Nucleotide sequence
        db: Database selector
        response: Return the raw response instead of a table
        strict: Raise when a match has no specimen element

    Returns:
        Table of matches, or the raw response when ``response`` is True
    """
    out = client.fetch(sequence, db)
    if response:
        return out

    records = parse_matches(out.content, strict=strict)
    logger.info(f"{short_sequence(sequence)}: {len(records)} matches")
    return build_table(records)


def _as_list(sequences: Union[None, str, Iterable[str]]) -> List[str]:
    if sequences is None:
        return []
    if isinstance(sequences, str):
        return [sequences]
    return list(sequences)


def identify(sequences: Union[None, str, Iterable[str]],
             db: Union[str, Database] = "COX1",
             response: bool = False,
             options: Optional[RequestOptions] = None,
             max_workers: int = 1,
             strict: bool = False,
             client: Optional[IdentificationClient] = None,
             base_url: Optional[str] = None,
             progress_callback: Optional[Callable[[int, int], None]] = None) -> List[IdentifyResult]:
    """Search BOLD for matches to one or more sequences.

    Each sequence is an independent GET request. The result list has one
    entry per input sequence, in input order: a DataFrame of matches with
    the columns ``ID``, ``sequencedescription``, ``database``, ``citation``,
    ``taxonomicidentification``, ``similarity``, ``specimen_url``,
    ``specimen_country``, ``specimen_lat`` and ``specimen_lon``, or the raw
    ``requests.Response`` when ``response`` is True.

    db is one of:

    - ``COX1``: every COI barcode record with a species level identification
      and a minimum length of 500bp.
    - ``COX1_SPECIES``: every COI barcode record with a minimum length of
      500bp, including records without species level identification. Only
      nearest matches are returned, with no probability of placement.
    - ``COX1_SPECIES_PUBLIC``: all published COI records from BOLD and
      GenBank with a minimum length of 500bp.
    - ``COX1_L604bp``: subset of the species library with a minimum length
      of 640bp, for short reads from the barcode region.

    Other values are forwarded as given and the service decides.

    Errors are not isolated per sequence. Run sequentially, the first failure
    stops the call. With ``max_workers`` above 1 every request is attempted
    and then the error of the earliest failing input is raised. The worker
    threads share the client's single ``requests.Session`` for their GETs.

    Args:
        sequences: A sequence string or an iterable of them
        db: Database selector
        response: Return raw responses, useful for debugging
        options: Transport options forwarded to requests; not allowed with ``client``
        max_workers: Number of concurrent requests
        strict: Raise SpecimenStructureError for matches without a specimen
        client: Client to use instead of a new one
        base_url: Endpoint used when a new client is created; not allowed
            with ``client``
        progress_callback: Called with (processed, total) after each sequence

    Returns:
        List of tables or responses, one per input sequence

    Raises:
        ValueError: If ``client`` is given together with ``options`` or ``base_url``
    """
    if client is not None and (options is not None or base_url is not None):
        raise ValueError("options and base_url configure a new client; set them on the supplied client instead")

    items = _as_list(sequences)
    owns_client = client is None
    if owns_client:
        client = IdentificationClient(base_url=base_url or IDS_XML_URL, options=options)

    def process(sequence):
        return identify_sequence(client, sequence, db, response=response, strict=strict)

    try:
        with LogTimer(f"Identification of {len(items)} sequences"):
            if max_workers > 1 and len(items) > 1:
                processor = ParallelProcessor(max_workers=max_workers,
                                              progress_callback=progress_callback)
                results, _ = processor.process_batch(items, process)
                for result in results:
                    if not result.success:
                        raise result.error
                return [result.result for result in results]

            outputs = []
            for index, sequence in enumerate(items):
                outputs.append(process(sequence))
                if progress_callback:
                    progress_callback(index + 1, len(items))
            return outputs
    finally:
        if owns_client:
            client.close()
