"""Public declaration API."""

from mrocollect.presentation.api.dsl import Collector, collect, collecting

__all__ = ["Collector", "collect", "collecting"]
