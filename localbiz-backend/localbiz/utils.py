from fastapi import HTTPException

# -------- Payload helpers --------
# Routes take raw JSON objects; these turn a field into a clean value or a 400.


def clean_str(value) -> str:
    """Strip strings; anything else (None, numbers) becomes its text or ''."""
    if value is None:
        return ""
    return str(value).strip()


def require_fields(payload: dict, *names: str) -> dict[str, str]:
    values = {n: clean_str(payload.get(n)) for n in names}
    if not all(values.values()):
        raise HTTPException(status_code=400, detail="Please provide all required fields")
    return values


def parse_choice(value, allowed: tuple[str, ...], field: str) -> str:
    s = clean_str(value)
    if s not in allowed:
        raise HTTPException(status_code=400, detail=f"Invalid {field}. Allowed: {', '.join(allowed)}")
    return s


def parse_price(value) -> float:
    # bools are ints in Python; a price of True is a client bug
    if isinstance(value, bool):
        raise HTTPException(status_code=400, detail="price must be a number")
    try:
        price = float(clean_str(value))
    except ValueError:
        raise HTTPException(status_code=400, detail="price must be a number")
    if price != price or price in (float("inf"), float("-inf")):
        raise HTTPException(status_code=400, detail="price must be a number")
    if price < 0:
        raise HTTPException(status_code=400, detail="price must be >= 0")
    return round(price, 2)


def parse_bool(value, field: str) -> bool:
    if isinstance(value, bool):
        return value
    s = clean_str(value).lower()
    if s in {"true", "1", "yes"}:
        return True
    if s in {"false", "0", "no"}:
        return False
    raise HTTPException(status_code=400, detail=f"{field} must be true or false")
