"""
비동기 태스크 헬퍼

서로 의존성이 없는 저장소 조회를 동시에 실행하고,
하나라도 실패하면 나머지를 취소한다 (부분 결과 없음).
"""

import asyncio
from collections.abc import Awaitable
from typing import Any


async def _cancel_all(tasks: list[asyncio.Task]) -> None:
    """태스크 취소 후 종료 대기"""
    for task in tasks:
        task.cancel()
    for task in tasks:
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception:
            # 이미 실패한 태스크의 예외는 첫 번째 실패로 대표됨
            pass


async def gather_or_cancel(*aws: Awaitable[Any]) -> list[Any]:
    """모든 awaitable 동시 실행 (실패 시 전체 취소)

    asyncio.gather 와 달리 첫 예외 발생 시 남은 태스크를 취소하고
    그 예외를 그대로 전파한다. 호출자가 취소되면 모든 태스크가 함께 취소된다.

    Args:
        *aws: 코루틴 또는 awaitable

    Returns:
        입력 순서대로의 결과 목록
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        await _cancel_all(tasks)
        raise

    failed = [t for t in tasks if t in done and not t.cancelled() and t.exception() is not None]
    if failed:
        await _cancel_all(list(pending))
        # 다른 완료 태스크의 예외도 회수 (미회수 경고 방지)
        for task in failed[1:]:
            task.exception()
        raise failed[0].exception()

    return [t.result() for t in tasks]
