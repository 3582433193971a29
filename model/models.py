from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class CaseStatus(str, Enum):
    NEW = "NEW"
    UNDER_INVESTIGATION = "UNDER_INVESTIGATION"
    PENDING = "PENDING"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class CasePriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


def _mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Expected {what} to be a JSON object, got {type(value).__name__}")
    return value


def _sequence(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Expected {what} to be a JSON array, got {type(value).__name__}")
    return list(value)


@dataclass(frozen=True)
class Location:
    country: str = ""
    region: str = ""
    city: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        data = _mapping(data, "location")
        return cls(
            country=data.get("country") or "",
            region=data.get("region") or "",
            city=data.get("city") or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return {"country": self.country, "region": self.region, "city": self.city}


@dataclass(frozen=True)
class Perpetrator:
    name: str
    type: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Perpetrator":
        data = _mapping(data, "perpetrator")
        return cls(name=data["name"], type=data["type"], description=data.get("description"))

    def to_dict(self) -> Dict[str, Any]:
        out = {"name": self.name, "type": self.type}
        if self.description:
            out["description"] = self.description
        return out


@dataclass(frozen=True)
class EvidenceItem:
    type: str
    url: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvidenceItem":
        data = _mapping(data, "evidence item")
        return cls(type=data["type"], url=data["url"], description=data.get("description"))


@dataclass(frozen=True)
class Case:
    """A case as confirmed by the service. Never mutated on the client."""
    id: str
    title: str
    description: str
    violation_types: Tuple[str, ...]
    status: CaseStatus
    priority: CasePriority
    location: Location
    date_occurred: str      # ISO timestamp as sent by the service
    date_reported: str      # server-assigned ISO timestamp
    case_number: Optional[str] = None
    perpetrators: Tuple[Perpetrator, ...] = ()
    evidence: Tuple[EvidenceItem, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Case":
        """
        Build a Case from a service document.

        The service stores cases in a document database, so the identifier
        may arrive as ``_id`` rather than ``id``. Unknown status or priority
        values raise ValueError, as does a document of the wrong shape.
        """
        data = _mapping(data, "case")
        case_id = data.get("_id", data.get("id"))
        if case_id is None:
            raise KeyError("Case document has neither '_id' nor 'id'")
        return cls(
            id=str(case_id),
            case_number=data.get("case_number"),
            title=data["title"],
            description=data.get("description", ""),
            violation_types=tuple(_sequence(data.get("violation_types"), "violation_types")),
            status=CaseStatus(data["status"]),
            priority=CasePriority(data["priority"]),
            location=Location.from_dict(data.get("location") or {}),
            date_occurred=data.get("date_occurred", ""),
            date_reported=data.get("date_reported", ""),
            perpetrators=tuple(Perpetrator.from_dict(p) for p in _sequence(data.get("perpetrators"), "perpetrators")),
            evidence=tuple(EvidenceItem.from_dict(e) for e in _sequence(data.get("evidence"), "evidence")),
        )


@dataclass(frozen=True)
class Draft:
    title: str = ""
    description: str = ""
    violation_types: Tuple[str, ...] = ()
    status: CaseStatus = CaseStatus.NEW
    priority: CasePriority = CasePriority.MEDIUM
    location: Location = field(default_factory=Location)
    date_occurred: str = ""   # yyyy-mm-ddThh:mm
    perpetrators: Tuple[Perpetrator, ...] = ()

    def missing_fields(self) -> Tuple[str, ...]:
        """Names of required fields that are still empty."""
        missing = []
        if not self.title.strip():
            missing.append("title")
        if not self.description.strip():
            missing.append("description")
        if not any(t.strip() for t in self.violation_types):
            missing.append("violation_types")
        if not self.location.country.strip():
            missing.append("location.country")
        if not self.date_occurred.strip():
            missing.append("date_occurred")
        return tuple(missing)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "violation_types": list(self.violation_types),
            "status": self.status.value,
            "priority": self.priority.value,
            "location": self.location.to_dict(),
            "date_occurred": self.date_occurred,
            "perpetrators": [p.to_dict() for p in self.perpetrators],
        }


def empty_draft() -> Draft:
    return Draft()
