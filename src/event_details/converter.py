"""Builds the detail payload from an upstream earthquake information record."""

import json
from typing import Any, Dict, List, Optional

from .errors import ErrorKind, RetrievalError, SlightSeaLevelChangeError

EARTHQUAKE_INFORMATION_CODE = 551

# Domestic tsunami assessment meaning "slight sea-level change, no damage expected"
SLIGHT_SEA_LEVEL_CHANGE = "NonEffective"

# Upstream seismic intensity codes to JMA intensity labels
INTENSITY_LABELS = {
    10: "1",
    20: "2",
    30: "3",
    40: "4",
    45: "5-",
    50: "5+",
    55: "6-",
    60: "6+",
    70: "7",
}

# Upstream uses -1 for "unknown" numeric values
UNKNOWN = -1


def intensity_label(scale: Any) -> Optional[str]:
    return INTENSITY_LABELS.get(scale)


def _known(value: Any) -> Any:
    if value is None or value == UNKNOWN:
        return None
    return value


def _convert_points(points: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    converted = [
        {
            "prefecture": point.get("pref"),
            "address": point.get("addr"),
            "scale": point.get("scale"),
            "intensity": intensity_label(point.get("scale")),
        }
        for point in points
        if isinstance(point, dict)
    ]
    # sorted() is stable, so equal scales keep upstream order
    return sorted(converted, key=lambda p: p["scale"] or 0, reverse=True)


def convert_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert one upstream record into the detail object.

    Raises:
        RetrievalError: UNSUPPORTED_EVENT for anything other than earthquake
            information, MALFORMED_RECORD when the earthquake block is missing.
        SlightSeaLevelChangeError: When the only tsunami assessment is a slight
            sea-level change.
    """
    event_id = record.get("id")

    if record.get("code") != EARTHQUAKE_INFORMATION_CODE:
        raise RetrievalError(
            ErrorKind.UNSUPPORTED_EVENT,
            f"Unsupported event code {record.get('code')}",
        )

    earthquake = record.get("earthquake")
    if not isinstance(earthquake, dict):
        raise RetrievalError(ErrorKind.MALFORMED_RECORD, "Missing earthquake block")

    tsunami = earthquake.get("domesticTsunami")
    if tsunami == SLIGHT_SEA_LEVEL_CHANGE:
        raise SlightSeaLevelChangeError(event_id)

    hypocenter = earthquake.get("hypocenter") or {}
    issue = record.get("issue") or {}
    max_scale = _known(earthquake.get("maxScale"))

    return {
        "id": event_id,
        "type": "earthquake",
        "time": earthquake.get("time"),
        "issuedAt": issue.get("time"),
        "issueType": issue.get("type"),
        "hypocenter": {
            "name": hypocenter.get("name") or None,
            "latitude": _known(hypocenter.get("latitude")),
            "longitude": _known(hypocenter.get("longitude")),
            "depthKm": _known(hypocenter.get("depth")),
        },
        "magnitude": _known(hypocenter.get("magnitude")),
        "maxScale": max_scale,
        "maxIntensity": intensity_label(max_scale),
        "tsunami": tsunami,
        "points": _convert_points(record.get("points") or []),
    }


def build_detail_json(record: Dict[str, Any], debug: bool = False) -> str:
    """Serialize the detail object. Debug output is indented and carries the raw record."""
    detail = convert_record(record)

    if debug:
        detail["raw"] = record
        return json.dumps(detail, ensure_ascii=False, indent=2)

    return json.dumps(detail, ensure_ascii=False, separators=(",", ":"))
