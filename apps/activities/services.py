"""Helpers for appending to the activity feed."""

from __future__ import annotations

import logging

from .models import Activity

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 50


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Cut ``text`` to ``length`` characters, adding an ellipsis when cut."""
    return text[:length] + ("..." if len(text) > length else "")


def record_activity(user, activity_type: str, title: str, description: str, property=None) -> Activity:
    activity = Activity.objects.create(
        type=activity_type,
        title=title,
        description=description,
        user=user,
        property=property,
    )
    logger.info(f"Activity recorded for user {user.pk}: {activity_type} '{title}'")
    return activity
