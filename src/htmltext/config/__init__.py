"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. YAML file named by the ``HTMLTEXT_CONFIG`` environment variable
    3. YAML file passed to :func:`load_config`
"""

from .schema import ConfigModel, load_config

__all__ = ["ConfigModel", "load_config"]
