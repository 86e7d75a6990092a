"""
설정 로더

settings.yaml 로드 및 애플리케이션 설정 생성
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from core.constants import Defaults, Paths
from core.types import Environment


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    environment: Environment = Environment.DEVELOPMENT
    db_path: Path | None = None
    window_days: int = Defaults.WINDOW_DAYS
    web_host: str = Defaults.WEB_HOST
    web_port: int = Defaults.WEB_PORT
    log_level: str = Defaults.LOG_LEVEL


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def load_settings_file(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    파일이 없으면 기본값으로 동작.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스

    Raises:
        SettingsLoadError: 형식이 잘못되었거나 값이 유효하지 않은 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        return AppConfig()

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return AppConfig()

    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    # environment 검증
    env_str = data.get("environment", Environment.DEVELOPMENT.value)
    try:
        environment = Environment(str(env_str).lower())
    except ValueError as e:
        valid = [env.value for env in Environment]
        raise SettingsLoadError(
            f"유효하지 않은 environment입니다: '{env_str}'. 유효한 값: {valid}"
        ) from e

    db_path_raw = data.get("db_path")
    db_path = Path(db_path_raw) if db_path_raw else None

    ledger_config = data.get("ledger") or {}
    window_days = ledger_config.get("window_days", Defaults.WINDOW_DAYS)
    if not isinstance(window_days, int) or not 1 <= window_days <= Defaults.MAX_WINDOW_DAYS:
        raise SettingsLoadError(
            f"ledger.window_days는 1~{Defaults.MAX_WINDOW_DAYS} 정수여야 합니다: {window_days}"
        )

    web_config = data.get("web") or {}
    web_host = web_config.get("host", Defaults.WEB_HOST)
    web_port = web_config.get("port", Defaults.WEB_PORT)
    if not isinstance(web_port, int):
        raise SettingsLoadError(f"web.port는 정수여야 합니다: {web_port}")

    log_level = str(data.get("log_level", Defaults.LOG_LEVEL)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise SettingsLoadError(f"유효하지 않은 log_level입니다: {log_level}")

    return AppConfig(
        environment=environment,
        db_path=db_path,
        window_days=window_days,
        web_host=web_host,
        web_port=web_port,
        log_level=log_level,
    )


def get_db_path(config: AppConfig) -> Path:
    """환경에 따른 DB 경로 반환

    db_path가 명시되어 있으면 그대로 사용.

    Args:
        config: AppConfig 인스턴스

    Returns:
        DB 파일 경로 (Path 타입)
    """
    if config.db_path is not None:
        return config.db_path
    if config.environment == Environment.PRODUCTION:
        return Paths.PROD_DB
    return Paths.DEV_DB


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            self._config = load_settings_file(settings_path)

    @property
    def environment(self) -> Environment:
        """현재 실행 환경"""
        assert self._config is not None
        return self._config.environment

    @property
    def window_days(self) -> int:
        """원장 상세 구간 (일)"""
        assert self._config is not None
        return self._config.window_days

    @property
    def web_host(self) -> str:
        assert self._config is not None
        return self._config.web_host

    @property
    def web_port(self) -> int:
        assert self._config is not None
        return self._config.web_port

    @property
    def log_level(self) -> int:
        """logging 모듈 레벨 값"""
        assert self._config is not None
        return logging.getLevelName(self._config.log_level)

    @property
    def db_path(self) -> Path:
        """현재 환경의 DB 경로"""
        assert self._config is not None
        return get_db_path(self._config)

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
