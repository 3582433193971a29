"""
Flat form fields -> Draft updates.

Every edit is expressed as a small command object and applied with
``apply``, which always returns a new Draft and leaves the old one intact.
``set_field`` accepts the widget names used by the creation dialog
("title", "location.city", ...) and turns them into commands.
"""
from dataclasses import dataclass, fields, replace
from typing import Union

from model.models import CasePriority, CaseStatus, Draft, Location, Perpetrator

LOCATION_FIELDS = tuple(f.name for f in fields(Location))


@dataclass(frozen=True)
class TitleChanged:
    value: str


@dataclass(frozen=True)
class DescriptionChanged:
    value: str


@dataclass(frozen=True)
class StatusChanged:
    value: CaseStatus


@dataclass(frozen=True)
class PriorityChanged:
    value: CasePriority


@dataclass(frozen=True)
class DateOccurredChanged:
    value: str


@dataclass(frozen=True)
class LocationFieldChanged:
    field: str
    value: str

    def __post_init__(self):
        if self.field not in LOCATION_FIELDS:
            raise ValueError(f"Unknown location field: {self.field!r}")


@dataclass(frozen=True)
class ViolationTypesChanged:
    text: str


@dataclass(frozen=True)
class PerpetratorAdded:
    perpetrator: Perpetrator


@dataclass(frozen=True)
class PerpetratorRemoved:
    index: int


DraftCommand = Union[
    TitleChanged,
    DescriptionChanged,
    StatusChanged,
    PriorityChanged,
    DateOccurredChanged,
    LocationFieldChanged,
    ViolationTypesChanged,
    PerpetratorAdded,
    PerpetratorRemoved,
]

_SCALAR_COMMANDS = {
    "title": TitleChanged,
    "description": DescriptionChanged,
    "date_occurred": DateOccurredChanged,
}


def parse_violation_types(text: str):
    # empty segments are kept: "a,,b" -> ("a", "", "b")
    return tuple(part.strip() for part in text.split(","))


def command_for(path: str, value) -> DraftCommand:
    """Map a form field name, bare or ``parent.child``, to a command."""
    parts = path.split(".")
    if len(parts) == 2:
        parent, child = parts
        if parent != "location":
            raise ValueError(f"Unsupported nested field: {path!r}")
        return LocationFieldChanged(child, value)
    if len(parts) > 2:
        raise ValueError(f"Only one level of nesting is supported: {path!r}")

    if path in _SCALAR_COMMANDS:
        return _SCALAR_COMMANDS[path](value)
    if path == "status":
        return StatusChanged(CaseStatus(value))
    if path == "priority":
        return PriorityChanged(CasePriority(value))
    if path == "violation_types":
        return ViolationTypesChanged(value)
    raise ValueError(f"Unknown draft field: {path!r}")


def apply(draft: Draft, command: DraftCommand) -> Draft:
    if isinstance(command, TitleChanged):
        return replace(draft, title=command.value)
    if isinstance(command, DescriptionChanged):
        return replace(draft, description=command.value)
    if isinstance(command, StatusChanged):
        return replace(draft, status=command.value)
    if isinstance(command, PriorityChanged):
        return replace(draft, priority=command.value)
    if isinstance(command, DateOccurredChanged):
        return replace(draft, date_occurred=command.value)
    if isinstance(command, LocationFieldChanged):
        location = replace(draft.location, **{command.field: command.value})
        return replace(draft, location=location)
    if isinstance(command, ViolationTypesChanged):
        return replace(draft, violation_types=parse_violation_types(command.text))
    if isinstance(command, PerpetratorAdded):
        return replace(draft, perpetrators=draft.perpetrators + (command.perpetrator,))
    if isinstance(command, PerpetratorRemoved):
        perps = list(draft.perpetrators)
        del perps[command.index]
        return replace(draft, perpetrators=tuple(perps))
    raise TypeError(f"Unhandled draft command: {command!r}")


def set_field(draft: Draft, path: str, value) -> Draft:
    return apply(draft, command_for(path, value))


def set_violation_types(draft: Draft, text: str) -> Draft:
    return apply(draft, ViolationTypesChanged(text))
