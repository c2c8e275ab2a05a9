import datetime
import os
import yaml
from typing import Any, Callable, Dict, List
from cerberus import Validator
from dotenv import load_dotenv

from nsgc.dto.settings import Settings, TelegramSettings, NotificationToggles
from nsgc.util.duration import format_duration, parse_duration
from nsgc.util.errors import ConfigError
from nsgc.util.logger import log

load_dotenv()

DEFAULT_CONFIG_PATH = "/etc/config/config.yml"
SCHEMA_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config", "settings-schema.yml"
)

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}

def load_settings(config_path=None) -> Settings:
    """Load settings from the YAML config file, falling back to env vars per field.

    A missing config file is not an error: every field then comes from the
    environment or its default. A config file that exists but does not parse
    or does not match the schema raises ConfigError.
    """
    if config_path is None:
        config_path = os.getenv("CONFIG_FILE") or DEFAULT_CONFIG_PATH

    loaded_yaml: Dict[str, Any] = {}
    if os.path.exists(config_path):
        loaded_yaml = read_config_file(config_path)
        log(f'Loaded config file: {config_path}', "DEBUG")
    else:
        log(f'Config file not found: {config_path}, using environment variables', "INFO")

    return build_settings(loaded_yaml)

def read_config_file(config_path: str) -> Dict[str, Any]:
    try:
        with open(config_path, 'r') as yaml_file:
            loaded_yaml = yaml.load(yaml_file, Loader=yaml.SafeLoader)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f'Failed to parse config file {config_path}: {e}') from e

    if loaded_yaml is None:
        return {}
    if not isinstance(loaded_yaml, dict):
        raise ConfigError(f'Invalid config file {config_path}: top level must be a mapping')

    with open(SCHEMA_PATH, 'r') as schema_file:
        schema = yaml.load(schema_file, Loader=yaml.SafeLoader)

    v = Validator(schema)
    if not v.validate(loaded_yaml):
        raise ConfigError(f'Invalid config file {config_path}: {v.errors}')
    return loaded_yaml

def build_settings(loaded_yaml: Dict[str, Any]) -> Settings:
    defaults = Settings()
    telegram_yaml = loaded_yaml.get("telegram") or {}
    notifications_yaml = telegram_yaml.get("notifications") or {}
    default_toggles = NotificationToggles()
    default_telegram = TelegramSettings()

    toggles = NotificationToggles(
        startup=resolve(notifications_yaml, "startup", "TELEGRAM_NOTIFY_STARTUP", default_toggles.startup, parse_bool),
        namespace_deleted=resolve(notifications_yaml, "namespace_deleted", "TELEGRAM_NOTIFY_NAMESPACE_DELETED", default_toggles.namespace_deleted, parse_bool),
        helm_release_deleted=resolve(notifications_yaml, "helm_release_deleted", "TELEGRAM_NOTIFY_HELM_RELEASE_DELETED", default_toggles.helm_release_deleted, parse_bool),
        cleanup_summary=resolve(notifications_yaml, "cleanup_summary", "TELEGRAM_NOTIFY_CLEANUP_SUMMARY", default_toggles.cleanup_summary, parse_bool),
        errors=resolve(notifications_yaml, "errors", "TELEGRAM_NOTIFY_ERRORS", default_toggles.errors, parse_bool),
    )
    telegram = TelegramSettings(
        enabled=resolve(telegram_yaml, "enabled", "TELEGRAM_ENABLED", default_telegram.enabled, parse_bool),
        bot_token=resolve(telegram_yaml, "bot_token", "TELEGRAM_BOT_TOKEN", default_telegram.bot_token, str),
        chat_id=resolve(telegram_yaml, "chat_id", "TELEGRAM_CHAT_ID", default_telegram.chat_id, str),
        parse_mode=resolve(telegram_yaml, "parse_mode", "TELEGRAM_PARSE_MODE", default_telegram.parse_mode, str),
        notifications=toggles,
    )

    cleanup_interval = resolve(loaded_yaml, "cleanup_interval", "CLEANUP_INTERVAL", defaults.cleanup_interval, parse_duration)
    if cleanup_interval <= datetime.timedelta(0):
        raise ConfigError(f'cleanup_interval must be positive, got {format_duration(cleanup_interval)}')

    return Settings(
        cleanup_interval=cleanup_interval,
        namespace_max_age=resolve(loaded_yaml, "namespace_max_age", "NAMESPACE_MAX_AGE", defaults.namespace_max_age, parse_duration),
        helm_release_timeout=resolve(loaded_yaml, "helm_release_timeout", "HELM_RELEASE_TIMEOUT", defaults.helm_release_timeout, parse_duration),
        namespace_delete_timeout=resolve(loaded_yaml, "namespace_delete_timeout", "NAMESPACE_DELETE_TIMEOUT", defaults.namespace_delete_timeout, parse_duration),
        namespace_poll_interval=resolve(loaded_yaml, "namespace_poll_interval", "NAMESPACE_POLL_INTERVAL", defaults.namespace_poll_interval, parse_duration),
        excluded_namespaces=resolve(loaded_yaml, "excluded_namespaces", "EXCLUDED_NAMESPACES", defaults.excluded_namespaces, parse_list),
        ignore_label=resolve(loaded_yaml, "ignore_label", "IGNORE_LABEL", defaults.ignore_label, str),
        log_level=resolve(loaded_yaml, "log_level", "LOG_LEVEL", defaults.log_level, str),
        port=resolve(loaded_yaml, "port", "PORT", defaults.port, int),
        telegram=telegram,
    )

def resolve(section: Dict[str, Any], key: str, env_key: str, default: Any, parse: Callable[[Any], Any]) -> Any:
    """Config file value, else environment variable, else default."""
    if section.get(key) is not None:
        try:
            return parse(section[key])
        except ValueError as e:
            raise ConfigError(f'Invalid value for {key}: {e}') from e

    raw = os.getenv(env_key)
    if raw:
        try:
            return parse(raw)
        except ValueError:
            log(f'Ignoring invalid {env_key}={raw!r}, using default', "WARNING")
    return default

def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {value!r}")

def parse_list(value: Any) -> List[str]:
    if isinstance(value, list):
        return [str(item) for item in value]
    return [item.strip() for item in str(value).split(",") if item.strip()]
