"""Ordered parallel dispatch of independent queries."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, Future, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class ProcessingResult:
    """Result of processing an item."""
    item: Any
    index: int = 0
    result: Optional[Any] = None
    error: Optional[Exception] = None
    duration: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class BatchProcessingStats:
    """Statistics for batch processing."""
    total_items: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0
    total_duration: float = 0.0

    @property
    def success_rate(self) -> float:
        return self.successful / self.processed if self.processed > 0 else 0.0

    @property
    def average_duration(self) -> float:
        return self.total_duration / self.processed if self.processed > 0 else 0.0


class ParallelProcessor:
    """Processes items on a thread pool, returning results in input order."""

    def __init__(self,
                 max_workers: int = 5,
                 progress_callback: Optional[Callable[[int, int], None]] = None):
        """
        Initialize parallel processor.

        Args:
            max_workers: Maximum number of worker threads
            progress_callback: Callback for progress updates (processed, total)
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self.progress_callback = progress_callback

    def process_batch(self,
                      items: Sequence[T],
                      process_func: Callable[[T], R]) -> Tuple[List[ProcessingResult], BatchProcessingStats]:
        """
        Process a batch of items in parallel.

        Errors raised by ``process_func`` are captured on the matching result
        rather than raised, so every item is attempted.

        Args:
            items: Items to process
            process_func: Function to process each item

        Returns:
            Tuple of (results in the order of ``items``, statistics)
        """
        stats = BatchProcessingStats(total_items=len(items))
        if not items:
            return [], stats

        results: List[Optional[ProcessingResult]] = [None] * len(items)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index: Dict[Future, int] = {
                executor.submit(self._process_single, index, item, process_func): index
                for index, item in enumerate(items)
            }

            for future in as_completed(future_to_index):
                result = future.result()
                results[future_to_index[future]] = result

                stats.processed += 1
                stats.total_duration += result.duration
                if result.success:
                    stats.successful += 1
                else:
                    stats.failed += 1

                if self.progress_callback:
                    self.progress_callback(stats.processed, stats.total_items)

        logger.debug(f"Batch processing complete: {stats.successful}/{stats.total_items} successful, "
                     f"avg duration: {stats.average_duration:.2f}s")

        return results, stats

    def _process_single(self, index: int, item: T, process_func: Callable[[T], R]) -> ProcessingResult:
        """Process a single item, capturing any error."""
        start_time = time.time()

        try:
            result = process_func(item)
            return ProcessingResult(
                item=item,
                index=index,
                result=result,
                duration=time.time() - start_time
            )
        except Exception as e:
            logger.error(f"Error processing item {index}: {e}")
            return ProcessingResult(
                item=item,
                index=index,
                error=e,
                duration=time.time() - start_time
            )
