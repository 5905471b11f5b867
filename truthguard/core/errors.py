class EmptyTextError(ValueError):
    """Raised when the text to analyze is empty or whitespace only"""

    def __init__(self, message: str = "Please enter some news text to analyze"):
        super().__init__(message)


class AnalysisInProgressError(RuntimeError):
    """Raised when a session is asked to start a second analysis while busy"""

    def __init__(self, session_id: str):
        super().__init__(f"An analysis is already running for session {session_id}")
        self.session_id = session_id


class SessionNotFoundError(KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self):
        return f"Session {self.session_id} not found"
