"""pubky-app-specs: naming, addressing and validation of Pubky App objects."""

from __future__ import annotations

__version__ = "0.4.0"
