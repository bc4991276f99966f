from __future__ import annotations

import json
from typing import Iterable

from locscan.core.location import Location
from locscan.utils import truncate_string


def format_text(locations: Iterable[Location], max_length: int = 80) -> str:
    lines = []
    for location in locations:
        # display text may span lines; keep one line per location
        display = " ".join(location.display_text.split())
        lines.append(f"{location.compact()}  {truncate_string(display, max_length)}")
    return "\n".join(lines) + "\n" if lines else ""


def format_json(locations: Iterable[Location]) -> str:
    locations_list = list(locations)
    data = {
        "summary": {
            "count": len(locations_list),
            "unknown_positions": sum(1 for loc in locations_list if loc.source.is_unknown),
        },
        "locations": [location.to_dict() for location in locations_list],
    }
    return json.dumps(data, indent=2)
