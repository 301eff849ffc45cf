"""boundary-cancel: cancel a HashiCorp Boundary session from a job action."""

__version__ = "0.1.0"
