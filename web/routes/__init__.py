"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- balance: 운송업체 / 제작 공방 원장
"""
