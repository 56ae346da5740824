"""
Local mirror of one server collection.

Mutation lifecycle:
  IDLE -> PENDING -> CONFIRMED | FAILED

The local list is touched only on CONFIRMED. A failed or incomplete request
leaves it exactly as it was and records the server's message in
``last_error``. Nothing is retried automatically.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .transport import ApiResponse, Transport

logger = logging.getLogger(__name__)


class MutationState(Enum):
    IDLE = "idle"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class MutationInProgress(RuntimeError):
    """Raised when a second mutation is started while one is pending."""


class SyncedCollection:
    """Ordered rows for one resource, kept in step with confirmed server responses."""

    def __init__(self, transport: Transport, path: str, adapter,
                 notify: Optional[Callable[[str, str], None]] = None):
        self.transport = transport
        self.path = path if path.endswith("/") else path + "/"
        self.adapter = adapter
        self.notify = notify
        self.rows: List[Any] = []
        self.state = MutationState.IDLE
        self.last_error: Optional[str] = None

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def get(self, row_id: Any) -> Optional[Any]:
        row_id = str(row_id)
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    def detail_path(self, row_id: Any) -> str:
        return "%s%s/" % (self.path, row_id)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def _send(self, method: str, path: str, payload: Optional[dict] = None) -> ApiResponse:
        if self.state is MutationState.PENDING:
            raise MutationInProgress("%s %s while another request is pending" % (method, path))
        self.state = MutationState.PENDING
        self.last_error = None
        try:
            response = self.transport.request(method, path, payload)
        except Exception:
            self.state = MutationState.FAILED
            raise
        if response.ok:
            self.state = MutationState.CONFIRMED
        else:
            self.state = MutationState.FAILED
            self.last_error = response.error
            logger.warning("%s %s failed (%s): %s", method, path, response.status, self.last_error)
            if self.notify is not None:
                self.notify("Error", self.last_error)
        return response

    def load(self) -> bool:
        """Replace the local rows with the server's list."""
        response = self._send("GET", self.path)
        if response.ok:
            self.rows = [self.adapter.from_record(record) for record in response.body]
        return response.ok

    def create(self, payload: Dict[str, Any]) -> bool:
        """Append the server's canonical record; the submitted payload is never stored."""
        response = self._send("POST", self.path, payload)
        if response.ok:
            self.rows = self.rows + [self.adapter.from_record(response.body)]
        return response.ok

    def update(self, row_id: Any, payload: Dict[str, Any]) -> bool:
        """Apply the submitted fields to the matching row once the server accepted them."""
        response = self._send("PUT", self.detail_path(row_id), payload)
        if response.ok:
            row_id = str(row_id)
            self.rows = [
                self.adapter.apply_update(row, payload) if row.id == row_id else row
                for row in self.rows
            ]
        return response.ok

    def delete(self, row_id: Any) -> bool:
        response = self._send("DELETE", self.detail_path(row_id))
        if response.ok:
            row_id = str(row_id)
            self.rows = [row for row in self.rows if row.id != row_id]
        return response.ok
