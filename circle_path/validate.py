import math
from typing import Any, List, Mapping, Sequence, Tuple

from .types import Circle


class ValidationError(ValueError):
    pass


def _coerce_one(idx: int, raw: Any) -> Tuple[float, float, float]:
    if isinstance(raw, Circle):
        values = (raw.x, raw.y, raw.r)
    elif isinstance(raw, Mapping):
        missing = [key for key in ('x', 'y', 'r') if key not in raw]
        if missing:
            raise ValidationError(f'[circle {idx}] missing key(s): {", ".join(missing)}')
        values = (raw['x'], raw['y'], raw['r'])
    elif isinstance(raw, Sequence) and not isinstance(raw, str) and len(raw) == 3:
        values = tuple(raw)
    else:
        raise ValidationError(f'[circle {idx}] expected {{x, y, r}} mapping or (x, y, r) triple, got {raw!r}')
    try:
        x, y, r = (float(v) for v in values)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f'[circle {idx}] coordinates must be numbers') from exc
    return x, y, r


def coerce_circles(raw_circles: Sequence[Any]) -> List[Tuple[float, float, float]]:
    return [_coerce_one(idx, raw) for idx, raw in enumerate(raw_circles)]


def validate_circles(raw_circles: Sequence[Any]) -> List[Tuple[float, float, float]]:
    """Check the obstacle list and return it as ``(x, y, r)`` triples in input order."""
    if not isinstance(raw_circles, Sequence) or isinstance(raw_circles, (str, bytes, Mapping)):
        raise ValidationError(f'expected a list of circles, got {type(raw_circles).__name__}')
    if len(raw_circles) < 2:
        raise ValidationError(f'need at least 2 circles (start and goal), got {len(raw_circles)}')
    triples = coerce_circles(raw_circles)
    for idx, (x, y, r) in enumerate(triples):
        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(r)):
            raise ValidationError(f'[circle {idx}] coordinates and radius must be finite')
        if r < 0:
            raise ValidationError(f'[circle {idx}] radius must be non-negative, got {r}')
    points = [idx for idx, (_, _, r) in enumerate(triples) if r == 0]
    if len(points) != 2:
        raise ValidationError(
            f'expected exactly 2 circles with r=0 (start and goal), got {len(points)}'
            + (f' at {points}' if points else '')
        )
    return triples


__all__ = ['ValidationError', 'coerce_circles', 'validate_circles']
