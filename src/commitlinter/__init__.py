"""commitlinter — lint commit and pull-request titles against ``<type>(<scope>): <subject>``."""

__version__ = "0.1.0"
