# receipt_points/errors.py

class ReceiptPointsError(Exception):
    """Base class for errors raised by the scoring core."""


class InvalidMonetaryValue(ReceiptPointsError):
    def __init__(self, value: str, field: str = "value"):
        self.value = value
        self.field = field
        super().__init__(f"{field.capitalize()}:'{value}' is not a valid value")


class ReceiptNotFound(ReceiptPointsError):
    def __init__(self, receipt_id: str):
        self.receipt_id = receipt_id
        super().__init__(f"ID:'{receipt_id}' not found")
