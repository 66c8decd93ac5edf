"""
Seating policy <-> (discriminator, config) columns.

    Open            -> ('Open', None)
    FullReserved    -> ('FullReserved', '{"total_seats":5000}')
    SectionReserved -> ('SectionReserved', '{"sections":{"VIP":100}}')

Missing or malformed config decodes to the variant's zero value. Unknown
discriminators decode to OpenSeating.
"""

from enum import StrEnum
from typing import Any, Optional

import orjson

from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.seating_policy import (
    FullReservedSeating,
    OpenSeating,
    SeatingPolicy,
    SectionReservedSeating,
)


class SeatingType(StrEnum):
    OPEN = 'Open'
    FULL_RESERVED = 'FullReserved'
    SECTION_RESERVED = 'SectionReserved'


def to_record(policy: SeatingPolicy) -> tuple[str, Optional[str]]:
    match policy:
        case OpenSeating():
            return SeatingType.OPEN, None
        case FullReservedSeating(total_seats=total_seats):
            return SeatingType.FULL_RESERVED, orjson.dumps({'total_seats': total_seats}).decode()
        case SectionReservedSeating(sections=sections):
            return SeatingType.SECTION_RESERVED, orjson.dumps({'sections': sections}).decode()
    raise TypeError(f'Unknown seating policy: {type(policy).__name__}')


def _load_config(config: Optional[str]) -> dict[str, Any]:
    if not config or not config.strip():
        return {}
    loaded = orjson.loads(config)
    return loaded if isinstance(loaded, dict) else {}


def _pick(config: dict[str, Any], snake_key: str, pascal_key: str) -> Any:
    # Rows written by older writers use PascalCase keys
    return config.get(snake_key, config.get(pascal_key))


def _full_reserved(config: Optional[str]) -> FullReservedSeating:
    total_seats = _pick(_load_config(config), 'total_seats', 'TotalSeats')
    return FullReservedSeating(total_seats=int(total_seats or 0))


def _section_reserved(config: Optional[str]) -> SectionReservedSeating:
    sections = _pick(_load_config(config), 'sections', 'Sections') or {}
    if not isinstance(sections, dict):
        raise TypeError(f'sections must be an object, got {type(sections).__name__}')
    return SectionReservedSeating(
        sections={str(name): int(capacity) for name, capacity in sections.items()}
    )


def from_record(discriminator: Optional[str], config: Optional[str]) -> SeatingPolicy:
    match discriminator:
        case SeatingType.FULL_RESERVED:
            decode, zero_value = _full_reserved, FullReservedSeating(total_seats=0)
        case SeatingType.SECTION_RESERVED:
            decode, zero_value = _section_reserved, SectionReservedSeating(sections={})
        case SeatingType.OPEN:
            return OpenSeating()
        case _:
            Logger.base.warning(
                f'⚠️ [SEATING] Unknown seating type {discriminator!r}, using open seating'
            )
            return OpenSeating()

    # orjson.JSONDecodeError is a ValueError
    try:
        return decode(config)
    except (TypeError, ValueError) as e:
        Logger.base.warning(
            f'⚠️ [SEATING] Malformed {discriminator} config {config!r} ({e}), using zero value'
        )
        return zero_value
