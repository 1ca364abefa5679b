from close_dup.core.time.abc import Time
from close_dup.core.time.fake import FakeTime
from close_dup.core.time.real import RealTime

__all__ = ["FakeTime", "RealTime", "Time"]
