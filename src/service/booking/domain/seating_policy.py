"""
Seating Policy Domain

Capacity rules for the three seating styles an event can be sold under.
Pure logic, no persistence: the (discriminator, config) storage form lives in
driven_adapter/model/seating_policy_codec.py.

- OpenSeating: general admission, first come first served.
- FullReservedSeating: every seat numbered; only the aggregate count is tracked.
- SectionReservedSeating: capacity split by named section, each with its own limit.
"""

from typing import Mapping, Optional, TypeAlias

import attrs


def _freeze_sections(sections: Optional[Mapping[str, int]]) -> dict[str, int]:
    return dict(sections) if sections else {}


@attrs.frozen
class OpenSeating:
    pass


@attrs.frozen
class FullReservedSeating:
    total_seats: int = 0


@attrs.frozen
class SectionReservedSeating:
    sections: dict[str, int] = attrs.field(factory=dict, converter=_freeze_sections)

    def section_capacity(self, section_identifier: Optional[str]) -> int:
        """Capacity of a named section; 0 for unknown sections."""
        if not section_identifier:
            return 0
        return self.sections.get(section_identifier, 0)

    def has_section(self, section_identifier: Optional[str]) -> bool:
        return bool(section_identifier) and section_identifier in self.sections


SeatingPolicy: TypeAlias = OpenSeating | FullReservedSeating | SectionReservedSeating


def available_capacity(policy: SeatingPolicy, total_capacity: int, current_booked: int) -> int:
    # Same arithmetic for every variant; section limits are applied by the caller
    return total_capacity - current_booked


def can_accommodate(
    policy: SeatingPolicy,
    requested_seats: int,
    available_capacity: int,
    section_identifier: Optional[str] = None,
) -> bool:
    match policy:
        case OpenSeating() | FullReservedSeating():
            return requested_seats <= available_capacity
        case SectionReservedSeating():
            if not policy.has_section(section_identifier):
                return False
            return requested_seats <= available_capacity
    raise TypeError(f'Unknown seating policy: {type(policy).__name__}')


def section_info(policy: SeatingPolicy) -> str:
    match policy:
        case OpenSeating():
            return 'Open seating - no specific sections'
        case FullReservedSeating(total_seats=total_seats):
            return f'Total Seats: {total_seats}'
        case SectionReservedSeating(sections=sections):
            described = ', '.join(f'{name}: {capacity} seats' for name, capacity in sections.items())
            return f'Sections: {described}'
    raise TypeError(f'Unknown seating policy: {type(policy).__name__}')


def seating_type_name(policy: SeatingPolicy) -> str:
    match policy:
        case OpenSeating():
            return 'Open Seating'
        case FullReservedSeating():
            return 'Full Reserved Seating'
        case SectionReservedSeating():
            return 'Section Reserved Seating'
    raise TypeError(f'Unknown seating policy: {type(policy).__name__}')
