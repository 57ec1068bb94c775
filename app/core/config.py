from pydantic_settings import BaseSettings, SettingsConfigDict


REQUIRED_ENV = ("WA_TOKEN", "VERIFY_TOKEN", "PHONE_NUMBER_ID")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    WA_TOKEN: str | None = None
    VERIFY_TOKEN: str = ""
    PHONE_NUMBER_ID: str | None = None
    WHATSAPP_GRAPH_API_VERSION: str = "v18.0"
    WHATSAPP_API_BASE_URL: str = "https://graph.facebook.com"

    AI_ENABLED: bool = False
    AI_PROVIDER: str = "openai"
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL_CANDIDATES: str = "gpt-4.1-mini,gpt-4o-mini"
    OPENAI_TEMPERATURE_REPLY: float = 0.3

    PAYMENT_INSTRUCTIONS: str = (
        "Para pagar tu pedido ({order}) usa Pago movil 0102 04121234567 V-12345678 "
        "o Zelle pagos@sivetachi.com. Envia el comprobante por aqui y {business} confirma tu orden."
    )

    BUSINESS_NAME: str = "Sivetachi Restaurante"
    BUSINESS_TIMEZONE: str = "America/Caracas"
    BOT_ENABLED: bool = True
    CHAT_HISTORY_LIMIT: int = 200

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    def model_candidates(self) -> list[str]:
        return [m.strip() for m in self.OPENAI_MODEL_CANDIDATES.split(",") if m.strip()]

    def missing_required(self) -> list[str]:
        return [key for key in REQUIRED_ENV if not getattr(self, key)]


settings = Settings()
