"""Release checklist services."""

from shipit.services.checklist import ChecklistRunner, ReleaseOutcome
from shipit.services.errors import ShipitError
from shipit.services.publish import CommandPublisher, Publisher

__all__ = [
    "ChecklistRunner",
    "CommandPublisher",
    "Publisher",
    "ReleaseOutcome",
    "ShipitError",
]
