"""Job Hub: personal job-application and finance tracker."""

__version__ = "0.1.0"
