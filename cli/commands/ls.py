"""List users with saved customizations."""

import logging

from cli.context import get_context
from cli.display import TableRenderer

logger = logging.getLogger(__name__)


def ls() -> None:
    """List users with saved customizations."""
    ctx = get_context()
    repository = ctx.repository

    saved = []
    for user_id in repository.list_users():
        record = repository.load(user_id)
        if record is None:
            logger.warning(f"Skipping '{user_id}': unreadable customizations")
            continue
        saved.append(record)

    TableRenderer().render_user_list(saved, repository.storage_dir)
