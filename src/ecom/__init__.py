"""E-commerce service modules.

This package contains the user, product, cart and order services together with
their repositories, persistence tables, configuration and logging setup.
"""

__version__ = "0.1.0"
