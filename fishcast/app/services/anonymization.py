# fishcast/app/services/anonymization.py
# Public catch listings hide who caught what, and exactly where.

LOCATION_DECIMALS = 2 # 0.01° is roughly 1 km


def mask_name(name: str) -> str:
    """'Alice' -> 'A****'. Length is preserved."""
    if not name:
        return ""
    return name[0] + "*" * (len(name) - 1)


def round_coordinate(value: float) -> float:
    return round(value, LOCATION_DECIMALS)


def anonymize_catch(catch, angler_name: str) -> dict:
    return {
        "species": catch.species,
        "weight": catch.weight,
        "length": catch.length,
        "gear_type": catch.gear_type,
        "latitude": round_coordinate(catch.latitude),
        "longitude": round_coordinate(catch.longitude),
        "time_caught": catch.time_caught,
        "notes": catch.notes,
        "angler_name": mask_name(angler_name),
    }
