"""Everyframe: a daily/weekly recurring task tracker."""

__version__ = "0.1.0"
