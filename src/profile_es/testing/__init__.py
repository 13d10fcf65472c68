"""Testing helpers – fakes and Hypothesis strategies."""
from profile_es.testing.fakes import FakeClock

__all__ = ["FakeClock"]
