#!/usr/bin/env python3
"""Testhelper CLI for SigninID Python SDK smoke testing.

Reads SIGNINID_SECRET_KEY (and optionally SIGNINID_BASE_URL) from the
environment and prints JSON to stdout.
"""

import asyncio
import json
import os
import sys
from dataclasses import asdict
from typing import Any

from signinid import (
    ListEmailsParams,
    SigninIDClient,
    SigninIDError,
    WaitForNewOptions,
)


def _to_json(value: Any) -> str:
    """Serialize SDK dataclasses, rendering datetimes as ISO strings."""
    if value is not None:
        value = asdict(value)
    return json.dumps(value, default=lambda obj: obj.isoformat())


def _resource(client: SigninIDClient, name: str) -> Any:
    if name == "inbox":
        return client.inbox
    if name == "sent":
        return client.sent
    print(f"unknown resource: {name}", file=sys.stderr)
    sys.exit(1)


async def latest(client: SigninIDClient, resource: str) -> None:
    """Print the latest email of a resource."""
    email = await _resource(client, resource).latest()
    print(_to_json(email))


async def get(client: SigninIDClient, resource: str, email_id: str) -> None:
    """Print a single email."""
    email = await _resource(client, resource).get(email_id)
    print(_to_json(email))


async def list_ids(client: SigninIDClient, resource: str, page: int) -> None:
    """Print one page of email IDs."""
    response = await _resource(client, resource).list(ListEmailsParams(page=page))
    print(_to_json(response))


async def wait(client: SigninIDClient, to: str | None) -> None:
    """Wait for a new inbox email and print its OTP."""
    email = await client.inbox.wait_for_new(WaitForNewOptions(to=to))
    if email is None:
        print(json.dumps({"email": None}))
        return
    print(json.dumps({"email_id": email.email_id, "detected_otp": email.detected_otp}))


async def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 3 and (len(sys.argv) < 2 or sys.argv[1] != "wait"):
        print("usage: testhelper.py <latest|get|list> <inbox|sent> [args]", file=sys.stderr)
        print("       testhelper.py wait [to]", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    async with SigninIDClient(base_url=os.environ.get("SIGNINID_BASE_URL")) as client:
        try:
            if command == "latest":
                await latest(client, sys.argv[2])
            elif command == "get":
                if len(sys.argv) < 4:
                    print("usage: testhelper.py get <inbox|sent> <email_id>", file=sys.stderr)
                    sys.exit(1)
                await get(client, sys.argv[2], sys.argv[3])
            elif command == "list":
                page = int(sys.argv[3]) if len(sys.argv) > 3 else 1
                await list_ids(client, sys.argv[2], page)
            elif command == "wait":
                await wait(client, sys.argv[2] if len(sys.argv) > 2 else None)
            else:
                print(f"unknown command: {command}", file=sys.stderr)
                sys.exit(1)
        except SigninIDError as e:
            print(json.dumps({"error": {"code": str(e.code), "message": e.message}}))
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
