#!/usr/bin/env python3
"""
Smoke test client for the log proxy.

Checks that the server answers GET /, then posts a handful of messages one
second apart. Watch the server terminal for the printed output.

Usage:
    python scripts/send_test_logs.py [base_url]
"""

import asyncio
import sys
from typing import Any, Dict, List

import httpx

DEFAULT_URL = "http://localhost:23465"

TEST_MESSAGES: List[Dict[str, Any]] = [
    {"message": "User authentication successful", "level": "INFO"},
    {"message": "Processing order #12345", "level": "INFO"},
    {"message": "High memory usage detected", "level": "WARN"},
    {"message": "Failed to connect to database", "level": "ERROR"},
    {"message": {"id": 42, "name": "test", "tags": ["a", "b"]}, "level": "DEBUG"},
]


async def send_log_message(client: httpx.AsyncClient, url: str, message_data: Dict[str, Any]) -> Dict[str, Any]:
    try:
        response = await client.post(url, json=message_data)
        result = response.json()
        print(f"✅ Sent: [{message_data['level']}] {message_data['message']!r}")
        return result
    except httpx.HTTPError as e:
        print(f"❌ Failed to send: [{message_data['level']}] {message_data['message']!r} - {e}")
        return {}


async def run_test(url: str) -> int:
    print("🧪 Testing log proxy server...\n")

    async with httpx.AsyncClient(timeout=5.0) as client:
        try:
            response = await client.get(url)
            print(f"📡 Server is running: {response.json()['status']}")
        except httpx.HTTPError:
            print("❌ Server is not running. Please start it with: log-proxy")
            return 1

        print("\n📝 Sending test messages...\n")
        for message_data in TEST_MESSAGES:
            await send_log_message(client, url, message_data)
            await asyncio.sleep(1)

    print("\n✅ Test completed! Check the server console for log output.")
    return 0


if __name__ == "__main__":
    base_url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL
    sys.exit(asyncio.run(run_test(base_url)))
