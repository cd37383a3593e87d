from __future__ import annotations

from collections import Counter

import click
from flask import Blueprint

from lumina.app.common.storefront import current_catalog
from lumina.core.models import ALL_CATEGORIES

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("catalog-summary")
def catalog_summary() -> None:
    """Print each category with its product count."""
    catalog = current_catalog()
    counts = Counter(p.category for p in catalog.products)

    click.echo(f"{ALL_CATEGORIES}: {len(catalog)}")
    for category in catalog.categories:
        if category != ALL_CATEGORIES:
            click.echo(f"{category}: {counts.get(category, 0)}")
