"""Configuration: env, Datatrans credentials, charge amount, admin key."""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of songkiosk package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so DATATRANS_API_KEY etc. are set
load_dotenv(BASE_DIR / ".env")

# API
API_HOST = os.getenv("SONGKIOSK_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SONGKIOSK_API_PORT", "3000"))
API_RELOAD = os.getenv("SONGKIOSK_RELOAD", "0").lower() in ("1", "true", "yes")
CORS_ORIGINS = [o.strip() for o in os.getenv("SONGKIOSK_CORS_ORIGINS", "*").split(",") if o.strip()]

# Datatrans (basic auth: merchant id / API key)
DATATRANS_API_URL = os.getenv("DATATRANS_API_URL", "")
DATATRANS_MERCHANT_ID = os.getenv("DATATRANS_MERCHANT_ID", "")
DATATRANS_API_KEY = os.getenv("DATATRANS_API_KEY", "")
# Value shipped in the example .env; treated the same as a missing key
PLACEHOLDER_API_KEY = "YOUR_DATATRANS_API_KEY_SECRET"
GATEWAY_TIMEOUT_SEC = float(os.getenv("SONGKIOSK_GATEWAY_TIMEOUT_SEC", "10"))

# Fixed charge per request, amount in minor units (100 = CHF 1.00)
CHARGE_AMOUNT = int(os.getenv("SONGKIOSK_CHARGE_AMOUNT", "100"))
CHARGE_CURRENCY = os.getenv("SONGKIOSK_CURRENCY", "CHF")
# Datatrans payment method code; TWI = TWINT
PAYMENT_METHOD = os.getenv("SONGKIOSK_PAYMENT_METHOD", "TWI")

# DJ admin endpoints (?key=... or X-Admin-Key header)
ADMIN_SECRET_KEY = os.getenv("ADMIN_SECRET_KEY", "")


@dataclass(frozen=True)
class GatewaySettings:
    """Everything the payment workflow needs to talk to Datatrans and charge."""
    api_url: str
    merchant_id: str
    api_key: str
    amount: int = 100
    currency: str = "CHF"
    payment_method: str = "TWI"
    timeout_sec: float = 10.0

    @property
    def is_configured(self) -> bool:
        """False when any credential is missing or the API key is still the placeholder."""
        if not self.api_url or not self.merchant_id or not self.api_key:
            return False
        return self.api_key != PLACEHOLDER_API_KEY


def gateway_settings_from_env() -> GatewaySettings:
    return GatewaySettings(
        api_url=DATATRANS_API_URL,
        merchant_id=DATATRANS_MERCHANT_ID,
        api_key=DATATRANS_API_KEY,
        amount=CHARGE_AMOUNT,
        currency=CHARGE_CURRENCY,
        payment_method=PAYMENT_METHOD,
        timeout_sec=GATEWAY_TIMEOUT_SEC,
    )
