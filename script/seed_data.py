#!/usr/bin/env python3
"""
Database Seed Script
Populate the SQL database with the demo catalogue

Features:
1. Recreate tables (drop + create) when run with --reset
2. Insert the demo users, venues, events and bookings used by the in-memory mode

Usage:
    DATABASE_URL_ASYNC=sqlite+aiosqlite:///./booking_system.db python -m script.seed_data --reset
"""

import argparse
import asyncio

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import (
    Database,
    create_db_and_tables,
    drop_db_and_tables,
)
from src.service.booking.driven_adapter.repo import in_memory_seed_data
from src.service.booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.booking.driven_adapter.repo.event_repo_impl import EventRepoImpl
from src.service.booking.driven_adapter.repo.user_repo_impl import UserRepoImpl
from src.service.booking.driven_adapter.repo.venue_repo_impl import VenueRepoImpl


async def seed(database: Database) -> dict[str, int]:
    """Insert the demo data, remapping seed ids to the ids the database assigns"""
    user_repo = UserRepoImpl(session_factory=database.session)
    venue_repo = VenueRepoImpl(session_factory=database.session)
    event_repo = EventRepoImpl(session_factory=database.session)
    booking_repo = BookingRepoImpl(session_factory=database.session)

    user_ids: dict[int, int] = {}
    for user in in_memory_seed_data.seed_users():
        user_ids[user.id] = await user_repo.add(user=user)  # type: ignore[index]

    venue_ids: dict[int, int] = {}
    for venue in in_memory_seed_data.seed_venues():
        venue_ids[venue.id] = await venue_repo.add(venue=venue)  # type: ignore[index]

    event_ids: dict[int, int] = {}
    for event in in_memory_seed_data.seed_events():
        event.venue_id = venue_ids[event.venue_id]
        event_ids[event.id] = await event_repo.add(event=event)  # type: ignore[index]

    bookings = in_memory_seed_data.seed_bookings()
    for booking in bookings:
        booking.user_id = user_ids[booking.user_id]
        booking.event_id = event_ids[booking.event_id]
        booking.venue_id = venue_ids[booking.venue_id]
        await booking_repo.add(booking=booking)

    return {
        'users': len(user_ids),
        'venues': len(venue_ids),
        'events': len(event_ids),
        'bookings': len(bookings),
    }


async def main(*, reset: bool) -> None:
    print('🌱 Starting data seeding...')
    print(f'   Database: {settings.DATABASE_URL_ASYNC}')
    print('=' * 50)

    database = Database()
    try:
        if reset:
            await drop_db_and_tables(database)
            print('🧹 Dropped existing tables')
        await create_db_and_tables(database)

        counts = await seed(database)
        for table, count in counts.items():
            print(f'   ✅ {table.capitalize()}: {count}')

        print('=' * 50)
        print('🌱 Data seeding completed!')
    finally:
        await database.dispose()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Seed the booking database with demo data')
    parser.add_argument('--reset', action='store_true', help='drop and recreate tables first')
    args = parser.parse_args()
    asyncio.run(main(reset=args.reset))
