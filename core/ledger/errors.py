"""
원장 엔진 예외

- InvalidAccount: 존재하지 않는 계정 (클라이언트 오류, 재시도 불필요)
- SourceUnavailable: 저장소 조회/집계 실패 (서버 오류, 호출자가 재시도 결정)
- MalformedEvent: 필수 필드 누락 행 (해당 행만 제외하고 계속 진행)
"""

from core.types import AccountKind


class LedgerError(Exception):
    """원장 엔진 기본 예외"""

    pass


class InvalidAccount(LedgerError):
    """계정 ID가 존재하지 않음"""

    def __init__(self, account_id: int, kind: AccountKind):
        self.account_id = account_id
        self.kind = kind
        super().__init__(f"{kind.value} 계정을 찾을 수 없습니다: {account_id}")


class SourceUnavailable(LedgerError):
    """저장소 조회 실패

    원인 예외는 __cause__로 연결됨 (raise ... from e).
    """

    def __init__(self, operation: str, detail: str | None = None):
        self.operation = operation
        self.detail = detail
        message = f"저장소 조회 실패: {operation}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MalformedEvent(LedgerError):
    """원장에 반영할 수 없는 이벤트 행"""

    def __init__(self, source_id: object, reason: str):
        self.source_id = source_id
        self.reason = reason
        super().__init__(f"잘못된 이벤트 {source_id}: {reason}")
