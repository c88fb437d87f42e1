"""
Custom Exceptions - InsightX Scoring Engine
insightx/core/exceptions.py

Exception classes for configuration, submission and repository failures.
The scoring functions themselves never raise for missing or malformed
answers; these cover startup defects and the persistence hand-off.
"""


class InsightXException(Exception):
    """Base exception for the InsightX package."""

    pass


class QuestionBankConfigurationError(InsightXException):
    """A fixed question-bank table is empty, incomplete or inconsistent."""

    def __init__(self, problems: list):
        self.problems = list(problems)
        super().__init__("Invalid question bank: " + "; ".join(self.problems))


class InvalidSubmissionException(InsightXException):
    """Assessment submission rejected before scoring."""

    def __init__(self, message: str = "Invalid assessment submission"):
        self.message = message
        super().__init__(message)


class RepositoryException(InsightXException):
    """Base exception for document store operations."""

    pass


class EntityNotFoundException(RepositoryException):
    """Document not found in the store."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class DocumentStoreConnectionException(RepositoryException):
    """Document store connection or command failure."""

    def __init__(self, message: str = "Document store connection failed"):
        self.message = message
        super().__init__(message)


class CorruptDocumentException(RepositoryException):
    """Stored document could not be decoded."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Document at {key} is not valid JSON: {reason}")
