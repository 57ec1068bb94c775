from __future__ import annotations

import logging
from typing import Any

import httpx

from app.domain.entities.reply import InteractiveList


class WhatsAppClient:
    def __init__(
        self,
        access_token: str,
        phone_number_id: str,
        api_version: str = "v18.0",
        base_url: str = "https://graph.facebook.com",
        http_client: httpx.Client | None = None,
    ) -> None:
        self._access_token = access_token
        self._send_endpoint = f"{base_url.rstrip('/')}/{api_version}/{phone_number_id}/messages"
        self._client = http_client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

    def send_text(self, to: str, text: str) -> None:
        self._post(
            to,
            {
                "messaging_product": "whatsapp",
                "to": to,
                "type": "text",
                "text": {"body": text},
            },
        )

    def send_list(self, to: str, interactive: InteractiveList) -> None:
        body: dict[str, Any] = {
            "type": "list",
            "body": {"text": interactive.body},
            "action": {
                "button": interactive.button,
                "sections": [
                    {
                        "title": section.title,
                        "rows": [_row_payload(row.id, row.title, row.description) for row in section.rows],
                    }
                    for section in interactive.sections
                ],
            },
        }
        if interactive.header:
            body["header"] = {"type": "text", "text": interactive.header}

        self._post(
            to,
            {
                "messaging_product": "whatsapp",
                "to": to,
                "type": "interactive",
                "interactive": body,
            },
        )

    def _post(self, to: str, payload: dict[str, Any]) -> None:
        headers = {"Authorization": f"Bearer {self._access_token}"}
        resp = self._client.post(self._send_endpoint, headers=headers, json=payload)
        if resp.status_code >= 400:
            error_body = resp.text
            try:
                error_json = resp.json()
                error_code = error_json.get("error", {}).get("code")
                error_message = error_json.get("error", {}).get("message")
                error_subcode = error_json.get("error", {}).get("error_subcode")
            except Exception:
                error_code = None
                error_message = error_body
                error_subcode = None

            self._logger.error(
                "WhatsApp send failed",
                extra={
                    "conversation_id": to,
                    "step": payload.get("type"),
                    "reason": f"status={resp.status_code} code={error_code} subcode={error_subcode} {error_message}",
                },
            )
            resp.raise_for_status()


def _row_payload(row_id: str, title: str, description: str | None) -> dict[str, str]:
    # Graph API limits: row title 24 chars, description 72 chars.
    row = {"id": row_id, "title": title[:24]}
    if description:
        row["description"] = description[:72]
    return row
