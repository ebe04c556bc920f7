"""Reporters: render collect plans for humans."""

from mrocollect.application.reporters.console import CollectPlanReporter, ReporterConfig

__all__ = ["CollectPlanReporter", "ReporterConfig"]
