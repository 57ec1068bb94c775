#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import time
from typing import Any

import httpx
from httpx import ConnectError


def build_payload(sender: str, text: str, list_id: str | None) -> dict[str, Any]:
    now = int(time.time())
    message: dict[str, Any] = {"from": sender, "id": f"wamid.local{now}", "timestamp": str(now)}
    if list_id:
        message["type"] = "interactive"
        message["interactive"] = {"type": "list_reply", "list_reply": {"id": list_id, "title": text}}
    else:
        message["type"] = "text"
        message["text"] = {"body": text}

    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": "local",
                "changes": [
                    {
                        "field": "messages",
                        "value": {"messaging_product": "whatsapp", "messages": [message]},
                    }
                ],
            }
        ],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a test WhatsApp webhook POST")
    parser.add_argument("--url", default="http://127.0.0.1:8001/webhook")
    parser.add_argument("--sender", default="584121234567")
    parser.add_argument("--text", default="hola")
    parser.add_argument("--list-id", default=None, help="send an interactive list reply with this row id")
    args = parser.parse_args()

    body = json.dumps(build_payload(args.sender, args.text, args.list_id)).encode("utf-8")

    try:
        resp = httpx.post(args.url, content=body, headers={"Content-Type": "application/json"}, timeout=10.0)
    except ConnectError:
        print("Connection refused. Is the FastAPI server running?")
        print("Try: uvicorn app.main:app --reload --port 8001")
        return

    print(resp.status_code)
    if resp.text:
        print(resp.text)


if __name__ == "__main__":
    main()
