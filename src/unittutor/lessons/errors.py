"""Lesson-layer error definitions.

Errors that the lessons assert on derive from the builtin a beginner would expect
(``ValueError``) as well as from :class:`LessonError`, so both
``pytest.raises(ValueError)`` and ``pytest.raises(LessonError)`` work.
"""

# ============================================================================
#                           General lesson errors
# ============================================================================


class LessonError(Exception):
    """Base class for errors raised by the lesson subjects."""


# ============================================================================
#                           Calculator errors
# ============================================================================


class DivisionByZeroError(LessonError, ValueError):
    """Raised when dividing by zero."""

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")


class InvalidDiscountError(LessonError, ValueError):
    """Raised when a discount percentage is outside 0..100."""

    def __init__(self, discount_percent: float) -> None:
        super().__init__(
            f"Discount must be between 0 and 100, got {discount_percent!r}"
        )
        self.discount_percent = discount_percent


class UnknownOperationError(LessonError, ValueError):
    """Raised when the calculator is asked for an operation it does not know."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Unknown operation: {operation!r}")
        self.operation = operation


# ============================================================================
#                           Todo list / library errors
# ============================================================================


class EmptyTaskError(LessonError, ValueError):
    """Raised when adding a blank task to a todo list."""

    def __init__(self) -> None:
        super().__init__("Task must not be empty")


class TaskNotFoundError(LessonError, ValueError):
    """Raised when updating a task that is not in the list."""

    def __init__(self, task: str) -> None:
        super().__init__(f"Task not found: {task!r}")
        self.task = task


class EmptyTitleError(LessonError, ValueError):
    """Raised when adding a blank title to the library."""

    def __init__(self) -> None:
        super().__init__("Book title must not be empty")


# ============================================================================
#                           Settings / notification errors
# ============================================================================


class InvalidTaxRateError(LessonError, ValueError):
    """Raised when a tax rate is outside 0..1."""

    def __init__(self, tax_rate: float) -> None:
        super().__init__(f"Tax rate must be between 0 and 1, got {tax_rate!r}")
        self.tax_rate = tax_rate


class InvalidRecipientError(LessonError, ValueError):
    """Raised when a notification has no recipient address."""

    def __init__(self) -> None:
        super().__init__("Recipient email must not be empty")


class NotificationError(LessonError):
    """Raised when the underlying mailer fails to deliver a notification."""

    def __init__(self, recipient: str) -> None:
        super().__init__(f"Could not send notification to {recipient}")
        self.recipient = recipient
