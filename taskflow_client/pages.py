"""
Modal, selection and form state for one collection.

Opening an edit or delete modal re-reads the row from the collection and
rebuilds the form from it. Closing any modal clears both the selection and
the form, so nothing carries over from one operation to the next.
"""
from enum import Enum
from typing import Any, Dict, Optional

from .sync import SyncedCollection


class ModalKind(Enum):
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"


class ResourcePage:
    def __init__(self, collection: SyncedCollection):
        self.collection = collection
        self.modal: Optional[ModalKind] = None
        self.selected: Optional[Any] = None
        self.form: Dict[str, Any] = collection.adapter.empty_form()

    def _reset(self, row: Optional[Any] = None) -> None:
        adapter = self.collection.adapter
        if row is None:
            self.selected = None
            self.form = adapter.empty_form()
            return
        current = self.collection.get(row.id)
        if current is None:
            raise KeyError("Row %s is not in the collection" % row.id)
        self.selected = current
        self.form = adapter.form_for(current)

    def open_create(self) -> None:
        self._reset()
        self.modal = ModalKind.CREATE

    def open_edit(self, row: Any) -> None:
        self._reset(row)
        self.modal = ModalKind.EDIT

    def open_delete(self, row: Any) -> None:
        self._reset(row)
        self.modal = ModalKind.DELETE

    def close(self) -> None:
        self.modal = None
        self._reset()

    def set_field(self, name: str, value: Any) -> None:
        self.form[name] = value

    def submit(self) -> bool:
        """Run the open modal's request. Success closes the modal; failure keeps it open."""
        if self.modal is ModalKind.CREATE:
            ok = self.collection.create(dict(self.form))
        elif self.modal is ModalKind.EDIT and self.selected is not None:
            ok = self.collection.update(self.selected.id, dict(self.form))
        elif self.modal is ModalKind.DELETE and self.selected is not None:
            ok = self.collection.delete(self.selected.id)
        else:
            return False
        if ok:
            self.close()
        return ok
