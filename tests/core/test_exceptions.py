"""Unit tests for domain exceptions."""

from src.core.exceptions import (
    ConfigurationError,
    DatabaseError,
    GroupNotFoundError,
    InvalidStockError,
    ItemNotFoundError,
    NotFoundError,
    QuoteItemNotFoundError,
    QuoteNotFoundError,
    RentQuoteError,
    StorageError,
    TrackingModeError,
    UnitNotFoundError,
    ValidationError,
)


class TestRentQuoteError:
    """Tests for the base exception."""

    def test_code_defaults_to_class_name(self):
        err = RentQuoteError("something broke")
        assert err.code == "RentQuoteError"
        assert err.message == "something broke"
        assert err.details == {}

    def test_to_dict(self):
        err = RentQuoteError("bad", code="BAD", details={"x": 1})
        assert err.to_dict() == {"error": "BAD", "message": "bad", "details": {"x": 1}}

    def test_str_is_message(self):
        assert str(RentQuoteError("bad")) == "bad"


class TestNotFoundErrors:
    """Tests for not-found exceptions."""

    def test_hierarchy(self):
        for exc in (
            GroupNotFoundError("g"),
            ItemNotFoundError("i"),
            UnitNotFoundError("u"),
            QuoteNotFoundError("q"),
            QuoteItemNotFoundError("l"),
        ):
            assert isinstance(exc, NotFoundError)
            assert isinstance(exc, StorageError)
            assert isinstance(exc, RentQuoteError)

    def test_item_not_found(self):
        err = ItemNotFoundError("item-9")
        assert err.code == "ITEM_NOT_FOUND"
        assert err.details["item_id"] == "item-9"
        assert "item-9" in err.message

    def test_quote_not_found(self):
        err = QuoteNotFoundError("q-1")
        assert err.code == "QUOTE_NOT_FOUND"
        assert err.details == {"quote_id": "q-1"}

    def test_quote_item_not_found(self):
        assert QuoteItemNotFoundError("l-1").code == "QUOTE_ITEM_NOT_FOUND"


class TestDatabaseError:
    """Tests for DatabaseError."""

    def test_message_and_details(self):
        err = DatabaseError("insert", "disk full")
        assert err.code == "DATABASE_ERROR"
        assert "insert" in err.message
        assert err.details == {"operation": "insert", "error": "disk full"}
        assert not isinstance(err, NotFoundError)


class TestValidationErrors:
    """Tests for validation exceptions."""

    def test_validation_error(self):
        err = ValidationError("name", "must not be empty", "")
        assert err.code == "VALIDATION_ERROR"
        assert err.details["field"] == "name"

    def test_value_truncated(self):
        err = ValidationError("name", "too long", "x" * 500)
        assert len(err.details["value"]) == 100

    def test_invalid_stock(self):
        err = InvalidStockError(total_quantity=5, out_of_service_quantity=6)
        assert isinstance(err, ValidationError)
        assert err.code == "INVALID_STOCK"
        assert err.details["total_quantity"] == 5
        assert err.details["out_of_service_quantity"] == 6
        assert err.details["field"] == "out_of_service_quantity"

    def test_tracking_mode(self):
        err = TrackingModeError("item-1", expected="serialized")
        assert isinstance(err, ValidationError)
        assert err.code == "WRONG_TRACKING_MODE"
        assert err.details["expected"] == "serialized"
        assert "serialized" in err.message


class TestConfigurationError:
    def test_is_base_error(self):
        assert isinstance(ConfigurationError("missing"), RentQuoteError)
