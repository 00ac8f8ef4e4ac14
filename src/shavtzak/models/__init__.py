"""Data models for the convoy roster."""

from shavtzak.models._base import RosterBaseModel
from shavtzak.models.assignment import Assignment, AssignmentKey
from shavtzak.models.convoy import ConvoyInfo
from shavtzak.models.person import Person
from shavtzak.models.snapshot import AppData
from shavtzak.models.vehicle import Vehicle

__all__ = [
    "AppData",
    "Assignment",
    "AssignmentKey",
    "ConvoyInfo",
    "Person",
    "RosterBaseModel",
    "Vehicle",
]
