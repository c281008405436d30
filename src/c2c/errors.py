"""
Exceptions raised while querying the container runtime.
"""

class C2CError(Exception):
    """Base class for all c2c errors."""


class RuntimeConnectionError(C2CError):
    """The container runtime could not be reached."""


class InspectError(C2CError):
    """
    An inspection request failed.

    Args:
        reference: The container, image or volume that was inspected.
        reason: What went wrong.
    """

    kind = "object"

    def __init__(self, reference: str, reason: str = ""):
        self.reference = reference
        self.reason = reason
        message = f"Error inspecting {self.kind} {reference}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ContainerInspectError(InspectError):
    kind = "container"


class ImageInspectError(InspectError):
    kind = "image"


class VolumeInspectError(InspectError):
    kind = "volume"


class OutputError(C2CError):
    """The compose file could not be written."""
