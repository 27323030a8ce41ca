#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Todo Model
A checklist task with a completion flag.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from ..utils.enums import DISPLAY_TIME_FORMAT
from ..utils.timestamps import now, to_rfc3339
from .fields import timestamp_value, typed_value


@dataclass
class Todo:
    """Task shown in the todos list"""
    task: str = ""
    done: bool = False
    created_at: datetime = field(default_factory=now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk JSON object"""
        return {
            'task': self.task,
            'done': self.done,
            'created_at': to_rfc3339(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Todo':
        """Create from the on-disk JSON object"""
        return cls(
            task=typed_value(data, 'task', str, ""),
            done=typed_value(data, 'done', bool, False),
            created_at=timestamp_value(data, 'created_at'),
        )

    def toggle(self) -> bool:
        """Flip the completion flag and return the new value"""
        self.done = not self.done
        return self.done

    def status_marker(self) -> str:
        return "[x]" if self.done else "[ ]"

    def display_text(self) -> str:
        """Line shown in the todos list"""
        return (f"{self.status_marker()} "
                f"[{self.created_at.strftime(DISPLAY_TIME_FORMAT)}] {self.task}")
