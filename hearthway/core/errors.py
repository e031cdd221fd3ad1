class ValidationError(ValueError):
    """Input that cannot be computed safely. Fatal to one computation."""

    def __init__(self, message: str, expense_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.expense_id = expense_id


class BalanceWarning(UserWarning):
    """Non-fatal problem, collected and returned next to the result."""

    def __init__(self, message: str, expense_id: str | None = None, member_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.expense_id = expense_id
        self.member_id = member_id

    @property
    def kind(self) -> str:
        return type(self).__name__


class SplitPolicyWarning(BalanceWarning):
    pass


class CurrencyMismatchWarning(BalanceWarning):
    pass
