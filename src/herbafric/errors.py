class ExtractionFailure(Exception):
    """Raised when a whole extraction run cannot proceed."""


class InputTypeError(ExtractionFailure, TypeError):
    """The document handed to the extractor is not text."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Expected document text (str), got {type(value).__name__}"
        )
