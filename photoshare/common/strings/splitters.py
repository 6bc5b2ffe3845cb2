import json
from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def json_or_csv_to_list(v: str | List[str] | None) -> List[str]:
    """Accept a JSON array ('["Ann", "Bo"]') or a comma list ('Ann, Bo')."""
    if isinstance(v, str):
        try:
            decoded = json.loads(v)
        except ValueError:
            return csv_to_list(v)
        if isinstance(decoded, list):
            return csv_to_list([str(x) for x in decoded])
        return csv_to_list(v)
    return csv_to_list(v)
