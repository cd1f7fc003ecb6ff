"""
Result storage for completed document analyses.

``ResultStore`` is the interface the pipeline talks to. The in-memory
implementation keeps records for the lifetime of the process only.
"""
import copy
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict

from errors import NotFound

logger = logging.getLogger(__name__)


class ResultStore(ABC):
    """Create/read store mapping a generated identifier to an analysis."""

    @abstractmethod
    def put(self, analysis: Dict[str, Any]) -> str:
        """
        Store an analysis under a fresh identifier.

        Args:
            analysis: A normalized structured analysis

        Returns:
            str: The identifier assigned to the analysis
        """

    @abstractmethod
    def get(self, doc_id: str) -> Dict[str, Any]:
        """
        Fetch the analysis stored under ``doc_id``.

        Raises:
            NotFound: If no analysis was stored under that identifier
        """


class InMemoryResultStore(ResultStore):
    """Thread-safe dictionary-backed store. Records are never updated or deleted."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def put(self, analysis):
        record = copy.deepcopy(analysis)
        with self._lock:
            doc_id = str(uuid.uuid4())
            while doc_id in self._records:
                doc_id = str(uuid.uuid4())
            self._records[doc_id] = record
        logger.info(f"Stored analysis under doc_id: {doc_id}")
        return doc_id

    def get(self, doc_id):
        with self._lock:
            record = self._records.get(doc_id)
        if record is None:
            raise NotFound(details={"doc_id": doc_id})
        return copy.deepcopy(record)

    def __contains__(self, doc_id):
        with self._lock:
            return doc_id in self._records

    def __len__(self):
        with self._lock:
            return len(self._records)
