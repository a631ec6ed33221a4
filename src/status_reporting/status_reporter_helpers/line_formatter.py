"""Status line templates."""

from __future__ import annotations

from typing import Dict, Tuple

from ..status_data_models import StatusMessage

# Keyed by (app name present, caller present, kind has a label)
_TEMPLATES: Dict[Tuple[bool, bool, bool], str] = {
    (False, False, False): "{timestamp}> {text}\n",
    (False, False, True): "{timestamp}> {label}: {text}\n",
    (True, False, False): "{timestamp}> {app_name}: {text}\n",
    (True, False, True): "{timestamp}> {app_name}: {label}: {text}\n",
    (False, True, False): "{timestamp}> in '{caller}': {text}\n",
    (False, True, True): "{timestamp}> {label} in '{caller}': {text}\n",
    (True, True, False): "{timestamp}> {app_name}: in '{caller}': {text}\n",
    (True, True, True): "{timestamp}> {app_name}: {label} in '{caller}': {text}\n",
}


class LineFormatter:
    """Renders a StatusMessage into its single output line."""

    @staticmethod
    def template_for(message: StatusMessage) -> str:
        key = (message.has_app_name, message.has_caller, bool(message.kind.label))
        return _TEMPLATES[key]

    @staticmethod
    def format(message: StatusMessage, timestamp: str) -> str:
        """
        Render the full status line, including the trailing newline.

        Args:
            message: Status message to render
            timestamp: Pre-rendered ``YYYY-MM-DD HH:MM:SS`` timestamp

        Returns:
            The line to write
        """
        template = LineFormatter.template_for(message)
        return template.format(
            timestamp=timestamp,
            app_name=message.app_name,
            label=message.kind.label,
            caller=message.caller,
            text=message.text,
        )
