import requests
from typing import Any, Dict

from nsgc.dto.settings import TelegramSettings
from nsgc.util.errors import NotificationError
from nsgc.util.logger import log

TELEGRAM_API_URL = "https://api.telegram.org"
REQUEST_TIMEOUT_SECONDS = 30

class TelegramService:
    def __init__(self, settings: TelegramSettings, session: requests.Session = None):
        self.settings = settings
        self.session = session or requests.Session()

    def is_configured(self) -> bool:
        return bool(self.settings.enabled and self.settings.bot_token and self.settings.chat_id)

    def send_message(self, text: str) -> None:
        if not self.settings.enabled:
            log("Telegram notifications are disabled", "DEBUG")
            return
        if not self.settings.bot_token or not self.settings.chat_id:
            log("Telegram bot token or chat ID is not configured", "WARNING")
            return

        message: Dict[str, Any] = {"chat_id": self.settings.chat_id, "text": text}
        if self.settings.parse_mode:
            message["parse_mode"] = self.settings.parse_mode

        url = f"{TELEGRAM_API_URL}/bot{self.settings.bot_token}/sendMessage"
        try:
            response = self.session.post(url, json=message, timeout=REQUEST_TIMEOUT_SECONDS)
        except requests.RequestException as e:
            # the token is part of the URL, keep it out of logs and notifications
            raise NotificationError(f"failed to send telegram message: {type(e).__name__}") from None

        if response.status_code != 200:
            raise NotificationError(f"telegram API returned status {response.status_code}")

        log("Telegram message sent successfully", "DEBUG")
