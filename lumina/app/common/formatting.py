from __future__ import annotations

from flask import current_app


def money(amount: float) -> str:
    """Two-decimal display string, e.g. ``$40.00``."""
    return f"{current_app.config.get('CURRENCY_SYMBOL', '$')}{amount:.2f}"
