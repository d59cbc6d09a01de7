#!/usr/bin/env python3
"""
Database Seed Script
Populate a demo webinar and print a token for its organizer

Usage:
    PYTHONPATH=. python script/seed_webinar.py

Notes:
- Schema must exist (`alembic upgrade head`, or DEBUG=true app startup)
- Re-running with the same WEBINAR_ID fails with an integrity error
"""

import asyncio
from datetime import datetime, timedelta, timezone
import os

from src.platform.config.di import container
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.entity.webinar_entity import Webinar


ORGANIZER = UserEntity(id='organizer-1', email='organizer@t.com')


async def create_webinar() -> Webinar:
    print('🎙️  Creating webinar...')
    start = datetime.now(timezone.utc).replace(microsecond=0) + timedelta(days=7)
    webinar = Webinar(
        id=os.getenv('WEBINAR_ID', 'webinar-1'),
        organizer_id=ORGANIZER.id,
        title='Python for Beginners',
        start_date=start,
        end_date=start + timedelta(hours=2),
        seats=int(os.getenv('SEATS', '100')),
    )

    async with container.unit_of_work() as uow:
        await uow.webinars.create(webinar)
        await uow.commit()

    print(f'   ✅ Created webinar: ID={webinar.id}, Seats={webinar.seats}')
    return webinar


async def main() -> None:
    database = container.database()
    try:
        await database.create_db_and_tables()
        webinar = await create_webinar()
    finally:
        await database.dispose()

    token = container.jwt_auth().create_jwt_token(ORGANIZER)
    print(f'🔑 Organizer token ({ORGANIZER.email}):\n{token}')
    print(
        f'\ncurl -X POST http://localhost:8000/webinars/{webinar.id}/seats '
        f"-H 'Authorization: Bearer {token}' -H 'Content-Type: application/json' "
        f"-d '{{\"seats\": {webinar.seats + 1}}}'"
    )


if __name__ == '__main__':
    asyncio.run(main())
