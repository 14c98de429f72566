"""
Custom exception classes for the video rental billing core.

Each one marks a contract violation raised at the call that introduced the
bad value. The core never catches these; callers decide whether to present,
log, or abort.
"""


class InvalidRentalPeriodError(Exception):
    """Raised when a rental duration is negative, zero for a rental, or not an integer."""

    def __init__(self, message: str = "Error: invalid number of days rented") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidTitleError(Exception):
    """Raised when a movie title is empty or not a string."""

    def __init__(self, message: str = "Error: movie title must be a non-empty string") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidCustomerNameError(Exception):
    """Raised when a customer name is empty or not a string."""

    def __init__(self, message: str = "Error: customer name must be a non-empty string") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class MissingPricingError(Exception):
    """Raised when a movie is given no pricing strategy, or something that is not one."""

    def __init__(self, message: str = "Error: movie requires a pricing strategy") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidRentalError(Exception):
    """Raised when a rental is built without a movie, or a customer is handed a non-rental."""

    def __init__(self, message: str = "Error: invalid rental") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownPriceCodeError(Exception):
    """Raised when a price code does not name a known pricing strategy."""

    def __init__(self, message: str = "Error: unknown price code") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownStatementFormatError(Exception):
    """Raised when a statement format name is not registered, or no format is given."""

    def __init__(self, message: str = "Error: unknown statement format") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class MovieNotFoundError(Exception):
    """Raised when a movie title cannot be found in the catalog."""

    def __init__(self, message: str = "Error: movie not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class CustomerNotFoundError(Exception):
    """Raised when a customer name cannot be found in the catalog."""

    def __init__(self, message: str = "Error: customer not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class DuplicateMovieError(Exception):
    """Raised when a movie title is already registered in the catalog."""

    def __init__(self, message: str = "Error: movie already exists") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
