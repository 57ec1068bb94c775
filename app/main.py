import logging

from fastapi import FastAPI

from app.api.v1.dashboard import router as dashboard_router
from app.api.webhooks import router as webhooks_router
from app.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("message_id", "conversation_id", "step", "awaiting", "rule", "reply_text", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

for key in settings.missing_required():
    logging.getLogger(__name__).warning("Missing env var: %s", key)

app = FastAPI(title="WhatsApp Restaurant Bot", version="1.0.0")

app.include_router(webhooks_router, tags=["webhooks"])
app.include_router(dashboard_router, prefix="/api", tags=["dashboard"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
