import pytest
import requests
from unittest.mock import MagicMock

from nsgc.dto.settings import TelegramSettings
from nsgc.services.telegram_service import TelegramService
from nsgc.util.errors import NotificationError


def telegram(session, **overrides):
    settings = dict(enabled=True, bot_token="123:abc", chat_id="-100", parse_mode="Markdown")
    settings.update(overrides)
    return TelegramService(TelegramSettings(**settings), session=session)


def test_posts_message_to_bot_api():
    session = MagicMock()
    session.post.return_value.status_code = 200

    telegram(session).send_message("hello")

    session.post.assert_called_once_with(
        "https://api.telegram.org/bot123:abc/sendMessage",
        json={"chat_id": "-100", "text": "hello", "parse_mode": "Markdown"},
        timeout=30,
    )


def test_empty_parse_mode_is_omitted():
    session = MagicMock()
    session.post.return_value.status_code = 200
    telegram(session, parse_mode="").send_message("hello")
    assert "parse_mode" not in session.post.call_args.kwargs["json"]


@pytest.mark.parametrize("overrides", [{"enabled": False}, {"bot_token": ""}, {"chat_id": ""}])
def test_unconfigured_does_not_send(overrides):
    session = MagicMock()
    service = telegram(session, **overrides)
    service.send_message("hello")
    assert not service.is_configured()
    session.post.assert_not_called()


def test_non_200_raises():
    session = MagicMock()
    session.post.return_value.status_code = 403
    with pytest.raises(NotificationError, match="status 403"):
        telegram(session).send_message("hello")


def test_network_error_raises_without_token():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("https://api.telegram.org/bot123:abc/sendMessage refused")
    with pytest.raises(NotificationError) as exc:
        telegram(session).send_message("hello")
    assert "123:abc" not in str(exc.value)
