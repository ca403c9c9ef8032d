"""
Serialization helpers for report records (ReportState, DateRecord).

Provides JSON/YAML round-trip via an intermediate dict representation.
Sequences are stored as lists and restored as tuples.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from extascii.model import DateRecord, ReportState


def date_to_dict(d: DateRecord | None) -> Dict[str, Any] | None:
    if d is None:
        return None
    return {"year": d.year, "month": d.month, "day": d.day}


def date_from_dict(d: Dict[str, Any] | None) -> DateRecord:
    if d is None:
        return DateRecord()
    return DateRecord(year=d.get("year"), month=d.get("month"), day=d.get("day"))


def state_to_dict(s: ReportState) -> Dict[str, Any]:
    return {
        "integer_value": s.integer_value,
        "real_value": s.real_value,
        "sequence": list(s.sequence),
        "start_date": date_to_dict(s.start_date),
        "end_date": date_to_dict(s.end_date),
    }


def state_from_dict(d: Dict[str, Any]) -> ReportState:
    return ReportState(
        integer_value=d["integer_value"],
        real_value=d["real_value"],
        sequence=tuple(d.get("sequence", [])),
        start_date=date_from_dict(d.get("start_date")),
        end_date=date_from_dict(d.get("end_date")),
    )


def state_to_json(s: ReportState) -> str:
    return json.dumps(state_to_dict(s), sort_keys=True)


def state_from_json(s: str) -> ReportState:
    d = json.loads(s)
    return state_from_dict(d)


def state_to_yaml(s: ReportState) -> str:
    return yaml.safe_dump(state_to_dict(s))


def state_from_yaml(s: str) -> ReportState:
    d = yaml.safe_load(s)
    return state_from_dict(d)
