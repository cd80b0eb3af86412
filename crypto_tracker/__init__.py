"""Terminal crypto price tracker."""

__version__ = "0.1.0"
