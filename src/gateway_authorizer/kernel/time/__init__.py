"""Kernel time – clocks."""
from gateway_authorizer.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
