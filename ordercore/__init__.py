"""ordercore - draft order creation and line-item attachment backend."""

__version__ = "0.1.0"
