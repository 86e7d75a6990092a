"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → balancebook/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    # 원장 조회 구간 (오늘 기준 N일 전부터 상세 표시)
    WINDOW_DAYS: int = 30
    MAX_WINDOW_DAYS: int = 365

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    VERSION: str = "1.0.0"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    PROD_DB: Path = DATA_DIR / "balancebook_prod.db"
    DEV_DB: Path = DATA_DIR / "balancebook_dev.db"


class ConceptLabels:
    """거래 설명(concept) 고정 문구

    화면에 그대로 노출되는 스페인어 문구.
    """

    NO_REFERENCE: str = "Operación sin referencia"
    NO_INVOICE: str = "Sin factura"
    NO_CUSTOMER: str = "Cliente sin nombre"
    NO_SUPPLIER: str = "Proveedor sin nombre"
    PICKUP_PREFIX: str = "Retiro en"
    STORE_MOVEMENT: str = "Movimiento de Mercadería"
    PAYMENT: str = "Pago"
    PENDING_PRICE: str = "(Pendiente de precio)"
    CUSTOM_ORDER: str = "(Pedido personalizado)"
    NO_PRODUCT: str = "Producto sin nombre"

    # 제조 원장의 결제 수단 표시명
    PAYMENT_METHODS: dict[str, str] = {
        "cash": "Efectivo",
        "bank_transfer": "Transferencia",
    }
