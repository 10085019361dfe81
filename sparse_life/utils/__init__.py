from .measure_time import timing_decorator

__all__ = ["timing_decorator"]
