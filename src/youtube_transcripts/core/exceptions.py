"""
Hard-fault exceptions for the transcript acquisition engine.

"No transcript available" is never an exception; those outcomes come back as
a TranscriptResult. Only invalid input and broken configuration raise.
"""


class TranscriptError(Exception):
    """Base class for transcript acquisition faults."""
    pass


class InvalidVideoIdError(TranscriptError):
    """The video identifier is empty or blank."""

    def __init__(self, video_id=None):
        self.video_id = video_id
        super().__init__("Video identifier must be a non-empty string")


class ConfigurationError(TranscriptError):
    """A configuration value is malformed."""
    pass
