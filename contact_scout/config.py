"""
Модуль для загрузки и валидации конфигурации ContactScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from contact_scout.utils import read_wordlist, remove_duplicates

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
_DEFAULT_TEMPLATES = [
    "https://www.{domain}",
    "https://{domain}",
    "http://{domain}",
    "http://www.{domain}",
]
DEFAULT_VOCABULARY = Path(__file__).parent / "data" / "industries.txt"


class CrawlConfig(BaseModel):
    """Конфигурация для одного запуска сбора контактов."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    url_templates: List[str] = Field(
        default_factory=lambda: list(_DEFAULT_TEMPLATES),
        min_length=1,
        description="Шаблоны стартовых URL в порядке перебора.",
    )
    max_pages: int = Field(100, ge=1, description="Жесткий лимит по числу страниц на домен.")
    max_redirects: int = Field(5, ge=0, description="Максимум переходов по редиректам.")
    timeout: float = Field(5.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field(_DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    accept: str = Field(
        "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        description="Заголовок Accept.",
    )
    accept_language: str = Field("en-GB,en;q=0.9", description="Заголовок Accept-Language.")
    phone_region: str = Field("GB", min_length=2, max_length=2, description="Регион для разбора телефонов.")
    ignored_email_domains: List[str] = Field(
        default_factory=lambda: ["sentry.io"],
        description="Домены трекеров, адреса которых отбрасываются.",
    )
    address_max_length: int = Field(160, ge=1, description="Макс. длина текста с адресом.")
    wordlists: Dict[str, str] = Field(default_factory=dict, description="Пути к файлам словарей.")

    @field_validator("url_templates")
    def _check_templates(cls, v: List[str]) -> List[str]:
        bad = [t for t in v if "{domain}" not in t]
        if bad:
            raise ValueError(f"шаблон URL без {{domain}}: {bad[0]}")
        return v

    @field_validator("phone_region", mode="before")
    def _upper_region(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("ignored_email_domains")
    def _lower_domains(cls, v: List[str]) -> List[str]:
        return [d.strip().lower() for d in v if d.strip()]

    @model_validator(mode="after")
    def _check_wordlists_exist(self) -> CrawlConfig:
        missing = [p for p in self.wordlists.values() if not Path(p).is_file()]
        if missing:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), missing[0])
        return self

    @property
    def headers(self) -> Dict[str, str]:
        """Заголовки, отправляемые с каждым запросом."""
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlConfig.
    Без пути берёт configs/default.yaml, а если его нет, то значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return CrawlConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    try:
        return CrawlConfig(**data)
    except ValidationError:
        raise


def load_vocabulary(config: CrawlConfig) -> Tuple[str, ...]:
    """Загружает словарь отраслей (в нижнем регистре, без повторов)."""
    path = config.wordlists.get("industries", DEFAULT_VOCABULARY)
    words = read_wordlist(path, strip=False)
    return tuple(remove_duplicates([w.lower() for w in words]))
