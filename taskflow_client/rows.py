"""
Display rows for the local collections.

Each adapter knows how to:
  - build a row from a canonical server record (``from_record``)
  - apply a confirmed update payload to a row (``apply_update``), re-deriving
    display fields such as the assignee's name from locally held lookups
  - produce the edit form for a row and the empty create form
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

UNASSIGNED = "—"


def format_date(value: Optional[str]) -> str:
    """Format an ISO timestamp as DD/MM/YYYY (empty string when missing)."""
    if not value:
        return ""
    return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%d/%m/%Y")


def _id(value: Any) -> str:
    return str(value) if value else ""


@dataclass(frozen=True)
class DirectoryEntry:
    id: str
    name: str
    avatar_url: Optional[str] = None


class UserDirectory:
    """Locally held list of assignable users, used to resolve display names."""

    def __init__(self, entries: Iterable[DirectoryEntry] = ()):
        self.entries: List[DirectoryEntry] = list(entries)

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "UserDirectory":
        return cls(
            DirectoryEntry(id=_id(r.get("id")), name=r.get("name", ""), avatar_url=r.get("avatar_url"))
            for r in records
        )

    def name_for(self, user_id: Any) -> str:
        user_id = _id(user_id)
        for entry in self.entries:
            if entry.id == user_id:
                return entry.name
        return UNASSIGNED


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Projects
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


@dataclass(frozen=True)
class ProjectRow:
    id: str
    name: str
    description: Optional[str]
    assigned_to_id: str
    assigned_to_name: str
    created: str


class ProjectRows:
    def __init__(self, directory: Optional[UserDirectory] = None):
        self.directory = directory or UserDirectory()

    def from_record(self, record: Dict[str, Any]) -> ProjectRow:
        assignee = record.get("assigned_to") or {}
        return ProjectRow(
            id=_id(record["id"]),
            name=record["name"],
            description=record.get("description"),
            assigned_to_id=_id(assignee.get("id")),
            assigned_to_name=assignee.get("name") or UNASSIGNED,
            created=format_date(record.get("created_at")),
        )

    def apply_update(self, row: ProjectRow, payload: Dict[str, Any]) -> ProjectRow:
        changes: Dict[str, Any] = {}
        if "name" in payload:
            changes["name"] = payload["name"]
        if "description" in payload:
            changes["description"] = payload["description"]
        if "assigned_to_id" in payload:
            assignee = _id(payload["assigned_to_id"])
            changes["assigned_to_id"] = assignee
            changes["assigned_to_name"] = self.directory.name_for(assignee) if assignee else UNASSIGNED
        return replace(row, **changes)

    def empty_form(self) -> Dict[str, Any]:
        return {"name": "", "description": "", "assigned_to_id": ""}

    def form_for(self, row: ProjectRow) -> Dict[str, Any]:
        return {
            "name": row.name,
            "description": row.description or "",
            "assigned_to_id": row.assigned_to_id,
        }


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Tasks
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


@dataclass(frozen=True)
class TaskRow:
    id: str
    title: str
    description: Optional[str]
    priority: str
    status: str
    due_date: Optional[str]
    assigned_to_id: str
    assigned_to_name: str
    project_id: str
    project_name: str
    tag_ids: Tuple[str, ...] = ()
    category_ids: Tuple[str, ...] = ()
    created: str = ""


class TaskRows:
    """Task records list only the caller's own labels, so edit forms only carry those ids."""

    def __init__(self, directory: Optional[UserDirectory] = None,
                 project_names: Optional[Dict[str, str]] = None):
        self.directory = directory or UserDirectory()
        self.project_names = project_names if project_names is not None else {}

    def from_record(self, record: Dict[str, Any]) -> TaskRow:
        assignee = record.get("assigned_to") or {}
        project = record.get("project") or {}
        return TaskRow(
            id=_id(record["id"]),
            title=record["title"],
            description=record.get("description"),
            priority=record.get("priority", "low"),
            status=record.get("status", "Pending"),
            due_date=record.get("due_date"),
            assigned_to_id=_id(assignee.get("id")),
            assigned_to_name=assignee.get("name") or UNASSIGNED,
            project_id=_id(project.get("id")),
            project_name=project.get("name", ""),
            tag_ids=tuple(_id(t["id"]) for t in record.get("tags", [])),
            category_ids=tuple(_id(c["id"]) for c in record.get("categories", [])),
            created=format_date(record.get("created_at")),
        )

    def apply_update(self, row: TaskRow, payload: Dict[str, Any]) -> TaskRow:
        changes: Dict[str, Any] = {
            key: payload[key]
            for key in ("title", "description", "priority", "status", "due_date")
            if key in payload
        }
        if "assigned_to_id" in payload:
            assignee = _id(payload["assigned_to_id"])
            changes["assigned_to_id"] = assignee
            changes["assigned_to_name"] = self.directory.name_for(assignee) if assignee else UNASSIGNED
        if "project_id" in payload:
            project_id = _id(payload["project_id"])
            changes["project_id"] = project_id
            changes["project_name"] = self.project_names.get(project_id, "")
        if "tag_ids" in payload:
            changes["tag_ids"] = tuple(_id(t) for t in payload["tag_ids"])
        if "category_ids" in payload:
            changes["category_ids"] = tuple(_id(c) for c in payload["category_ids"])
        return replace(row, **changes)

    def empty_form(self) -> Dict[str, Any]:
        return {
            "title": "", "description": "", "priority": "low", "status": "Pending",
            "due_date": None, "assigned_to_id": "", "project_id": "",
            "tag_ids": [], "category_ids": [],
        }

    def form_for(self, row: TaskRow) -> Dict[str, Any]:
        return {
            "title": row.title,
            "description": row.description or "",
            "priority": row.priority,
            "status": row.status,
            "due_date": row.due_date,
            "assigned_to_id": row.assigned_to_id,
            "project_id": row.project_id,
            "tag_ids": list(row.tag_ids),
            "category_ids": list(row.category_ids),
        }


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Tags and categories
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


@dataclass(frozen=True)
class LabelRow:
    id: str
    name: str
    color: str
    owner_id: str
    created: str = ""


class LabelRows:
    """Rows for tags and categories. The owner is never edited locally."""

    def from_record(self, record: Dict[str, Any]) -> LabelRow:
        owner = record.get("owner") or {}
        return LabelRow(
            id=_id(record["id"]),
            name=record["name"],
            color=record.get("color", "Gray"),
            owner_id=_id(owner.get("id")),
            created=format_date(record.get("created_at")),
        )

    def apply_update(self, row: LabelRow, payload: Dict[str, Any]) -> LabelRow:
        return replace(row, **{key: payload[key] for key in ("name", "color") if key in payload})

    def empty_form(self) -> Dict[str, Any]:
        return {"name": "", "color": "Gray"}

    def form_for(self, row: LabelRow) -> Dict[str, Any]:
        return {"name": row.name, "color": row.color}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Users
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


@dataclass(frozen=True)
class UserRow:
    id: str
    name: str
    email: str
    role: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    created: str = field(default="")


class UserRows:
    def from_record(self, record: Dict[str, Any]) -> UserRow:
        profile = record.get("profile") or {}
        return UserRow(
            id=_id(record["id"]),
            name=record["name"],
            email=record["email"],
            role=record["role"],
            avatar_url=profile.get("avatar_url"),
            bio=profile.get("bio"),
            created=format_date(record.get("created_at")),
        )

    def apply_update(self, row: UserRow, payload: Dict[str, Any]) -> UserRow:
        changes = {key: payload[key] for key in ("name", "email", "role") if key in payload}
        profile = payload.get("profile") or {}
        for key in ("avatar_url", "bio"):
            if key in profile:
                changes[key] = profile[key]
        return replace(row, **changes)

    def empty_form(self) -> Dict[str, Any]:
        return {"name": "", "email": "", "password": "", "role": "Colaborator",
                "profile": {"bio": "", "avatar_url": ""}}

    def form_for(self, row: UserRow) -> Dict[str, Any]:
        return {
            "name": row.name,
            "email": row.email,
            "role": row.role,
            "profile": {"bio": row.bio or "", "avatar_url": row.avatar_url or ""},
        }
