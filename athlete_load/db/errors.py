"""Errors raised by the training load store."""


class TrainingLoadNotFoundError(LookupError):
    """Raised when a training load record does not exist."""

    def __init__(self, load_id: str):
        self.load_id = load_id
        super().__init__(f"Training load not found: {load_id}")
