# === FILE: sitemap_scan/config.py ===
"""
Модуль для загрузки и валидации конфигурации Sitemap-Scan.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_USER_AGENT = "Sitemap-Scan/1.0"

DEFAULT_SITEMAP_PATHS: Tuple[str, ...] = (
    "/sitemap.xml",
    "/sitemap_index.xml",
    "/wp-sitemap.xml",
    "/sitemap-index.xml",
    "/sitemap.xml.gz",
)


class ScanConfig(BaseModel):
    """Конфигурация одного запуска поиска и разбора sitemap."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    timeout: float = Field(300.0, gt=0, description="Общий таймаут одного запроса (секунд).")
    candidate_paths: Tuple[str, ...] = Field(
        DEFAULT_SITEMAP_PATHS,
        min_length=1,
        description="Пути, проверяемые по порядку при поиске главного sitemap.",
    )
    max_depth: int = Field(10, ge=0, description="Максимальная глубина вложенности sitemap-индексов.")
    concurrency: int = Field(1, ge=1, description="Число одновременно загружаемых дочерних sitemap.")

    @field_validator("candidate_paths", mode="before")
    def _ensure_leading_slash(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(p if str(p).startswith("/") else f"/{p}" for p in v)
        return v


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


def load_config(path: Union[str, Path, None] = None) -> ScanConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScanConfig.

    Без пути используется configs/default.yaml, а при его отсутствии -
    значения по умолчанию. Явно указанный, но отсутствующий файл
    приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScanConfig()
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

    return ScanConfig(**data)


__all__ = ["ScanConfig", "load_config", "DEFAULT_USER_AGENT", "DEFAULT_SITEMAP_PATHS"]
