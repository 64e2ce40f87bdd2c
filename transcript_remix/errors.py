class TranscriptRemixError(Exception):
    """Base error. Carries the message shown to the user and an HTTP status."""

    status_code = 500
    default_message = "Failed to process request. Please check the URL and try again."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidReference(TranscriptRemixError):
    status_code = 400
    default_message = "Invalid YouTube URL or video ID"


class NoCaptionsAvailable(TranscriptRemixError):
    status_code = 404
    default_message = (
        "No transcript available for this video. "
        "Make sure the video has closed captions enabled."
    )


class MissingInput(TranscriptRemixError):
    status_code = 400
    default_message = "Transcript is required"


class GenerationFailed(TranscriptRemixError):
    status_code = 500
    default_message = "Failed to generate content"
