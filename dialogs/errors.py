"""
Dialog Error Classes

Exceptions raised by the dialog engine and its collaborators.
"""


class DialogError(Exception):
    """Base class for dialog engine errors."""
    pass


class UnknownDialog(DialogError):
    """Raised when a dialog or prompt id is not registered."""

    def __init__(self, dialog_id: str):
        super().__init__(f"Dialog '{dialog_id}' is not registered")
        self.dialog_id = dialog_id


class MalformedPromptAnswer(DialogError):
    """Raised when a prompt answer cannot be parsed. Recovered by re-prompting."""
    pass


class MissingRequiredConfig(DialogError):
    """Raised from a constructor when a required collaborator or setting is absent."""
    pass
