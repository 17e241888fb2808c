"""Configuration helpers that load settings from `.env`."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_LIBRETRANSLATE_MIRRORS = (
    "https://libretranslate.com,"
    "https://translate.argosopentech.com,"
    "https://translate.terraprint.co"
)


def _load_env(key: str, default: str | None = None, required: bool = False) -> str:
    value = os.environ.get(key, default)
    if required and not value:
        raise RuntimeError(f"Mandatory environment variable {key} is missing")
    return value  # type: ignore[no-any-return]


def _load_bool(key: str, default: bool) -> bool:
    raw = _load_env(key, default="true" if default else "false")
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _load_list(key: str, default: str = "") -> list[str]:
    raw = _load_env(key, default=default) or ""
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    telegram_token: str
    log_level: str
    normalize_apostrophes: bool = True
    default_docx_conversion: str = "uz-latn-to-uz-cyrl"
    translation_timeout: float = 10.0
    libretranslate_mirrors: list[str] = field(default_factory=list)
    selection_ttl_seconds: int = 900
    allowed_users_only: bool = False
    allowed_user_ids: set[int] = field(default_factory=set)

    def require_telegram_token(self) -> str:
        if not self.telegram_token:
            raise RuntimeError("Mandatory environment variable TELEGRAM_BOT_TOKEN is missing")
        return self.telegram_token


settings = Settings(
    telegram_token=_load_env("TELEGRAM_BOT_TOKEN", default=""),
    log_level=_load_env("LOG_LEVEL", default="INFO"),
    normalize_apostrophes=_load_bool("NORMALIZE_APOSTROPHES", default=True),
    default_docx_conversion=_load_env("DEFAULT_DOCX_CONVERSION", default="uz-latn-to-uz-cyrl"),
    translation_timeout=float(_load_env("TRANSLATION_TIMEOUT", default="10")),
    libretranslate_mirrors=_load_list("LIBRETRANSLATE_MIRRORS", default=_DEFAULT_LIBRETRANSLATE_MIRRORS),
    selection_ttl_seconds=int(_load_env("SELECTION_TTL_SECONDS", default="900")),
    allowed_users_only=_load_bool("ALLOWED_USERS_ONLY", default=False),
    allowed_user_ids={int(item) for item in _load_list("ALLOWED_USER_IDS")},
)
