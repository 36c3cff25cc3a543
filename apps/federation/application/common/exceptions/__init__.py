"""Application Exceptions.

공통 예외만 포함합니다. 페더레이션 예외는 직접 import하세요:
  - apps.federation.application.federation.exceptions.*
"""

from apps.federation.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
