#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Note Model
A free-text entry stamped with its creation time.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from ..utils.enums import DISPLAY_TIME_FORMAT
from ..utils.timestamps import now, to_rfc3339
from .fields import timestamp_value, typed_value


@dataclass
class Note:
    """Journal entry shown in the notes list"""
    content: str = ""
    created_at: datetime = field(default_factory=now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk JSON object"""
        return {
            'content': self.content,
            'created_at': to_rfc3339(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Note':
        """Create from the on-disk JSON object.

        Missing or mistyped fields fall back to their zero values.
        """
        return cls(
            content=typed_value(data, 'content', str, ""),
            created_at=timestamp_value(data, 'created_at'),
        )

    def display_text(self) -> str:
        """Line shown in the notes list"""
        return f"[{self.created_at.strftime(DISPLAY_TIME_FORMAT)}] {self.content}"
