# -*- coding: utf-8 -*-
"""GlanceUpdate: a small data update for watch and widget screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

GLANCE_TITLE_MAX_LENGTH = 100
GLANCE_TEXT_MAX_LENGTH = 100
GLANCE_SUBTEXT_MAX_LENGTH = 100

# Device name meaning "every device of the user".
GLANCE_ALL_DEVICES = ""


@dataclass(frozen=True, slots=True)
class GlanceUpdate:
    """Glance data. At least one of title/text/subtext/count/percent must be set."""

    title: str = ""
    """A description of the data being shown, such as "Widgets Sold"."""

    text: str = ""
    """The main line of data, used on most screens."""

    subtext: str = ""
    """A second line of data."""

    count: Optional[int] = None
    """Shown on smaller screens; may be negative."""

    percent: Optional[int] = None
    """0-100, shown on some screens as a progress bar or circle."""

    device_name: str = GLANCE_ALL_DEVICES

    @property
    def is_empty(self) -> bool:
        return (
            not self.title
            and not self.text
            and not self.subtext
            and self.count is None
            and self.percent is None
        )
