#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP, no WhatsApp).

Usage:
  python3 scripts/chat_local.py

Runs your typed messages through the same DialogFlowEngine the webhook uses
and prints the transition taken, the pending slot and the reply text.
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.core.config import settings
from app.application.use_cases.business_hours import BusinessHoursGate
from app.domain.entities.conversation_state import ConversationState
from app.wiring.dependencies import get_dialog_flow_engine


def _print_header(conversation_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"conversation_id: {conversation_id}")
    print("Type your message and press Enter. Prefix a list row id with '#', e.g. #h1.")
    print("Commands: /new (new conversation), /state, /quit")
    print("-" * 60)


def main() -> None:
    engine = get_dialog_flow_engine()
    gate = BusinessHoursGate(timezone=settings.BUSINESS_TIMEZONE)
    conversation = 1
    state = ConversationState()
    _print_header(f"local_{conversation}")

    while True:
        try:
            text = input("you> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if text == "/quit":
            return
        if text == "/new":
            conversation += 1
            state = ConversationState()
            _print_header(f"local_{conversation}")
            continue
        if text == "/state":
            print(state)
            continue

        selection_id = None
        if text.startswith("#"):
            selection_id = text[1:]

        result = engine.process(state, text, selection_id=selection_id)
        state = result.state
        reply = gate.annotate(result.reply)
        print(f"[{result.step} | awaiting={state.awaiting.value}]")
        print(f"bot> {reply.text}\n")


if __name__ == "__main__":
    main()
