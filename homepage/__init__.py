"""Personal homepage server with synthetic workload demos and a contact relay."""

__version__ = "0.1.0"
