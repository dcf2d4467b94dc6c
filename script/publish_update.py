#!/usr/bin/env python3
"""
Announcement publisher
Logs a club in (registering it first if needed) and posts one announcement

Usage:
    uv run python -m script.publish_update "Seminar" "Starts at 5 PM"
"""

import asyncio
import sys

import httpx

from src.platform.constant.route_constant import CLUB_LOGIN, CLUB_REGISTER, LIVE_UPDATE_ADD


BASE_URL = 'http://localhost:8000'
CLUB_NAME = 'Demo Club'
CLUB_EMAIL = 'demo.club@campus.edu'
CLUB_PASSWORD = 'P@ssw0rd'


async def publish(event: str, update: str) -> None:
    async with httpx.AsyncClient(base_url=BASE_URL, timeout=10) as client:
        response = await client.post(
            CLUB_LOGIN, json={'email': CLUB_EMAIL, 'password': CLUB_PASSWORD}
        )
        if response.status_code == 401:
            response = await client.post(
                CLUB_REGISTER,
                json={'name': CLUB_NAME, 'email': CLUB_EMAIL, 'password': CLUB_PASSWORD},
            )
        response.raise_for_status()
        token = response.json()['token']

        response = await client.post(
            LIVE_UPDATE_ADD,
            json={'event': event, 'update': update},
            headers={'Authorization': f'Bearer {token}'},
        )
        print(f'📣 {response.status_code}: {response.json()}')


if __name__ == '__main__':
    if len(sys.argv) != 3:
        print('Usage: publish_update.py <event> <update>')
        sys.exit(1)
    asyncio.run(publish(sys.argv[1], sys.argv[2]))
