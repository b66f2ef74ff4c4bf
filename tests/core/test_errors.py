"""Error hierarchy: status codes, categories and the flat error envelope."""

from catalog.core.errors import (
    CatalogError, DatabaseError, ErrorCategory, ErrorSeverity,
    InvalidRequestError, ResourceNotFoundError,
)


def test_not_found_message_names_the_entity():
    err = ResourceNotFoundError("Product", "11")
    assert err.http_status == 404
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.to_response() == {"error": "Product not found"}
    assert err.resource_id == "11"


def test_invalid_request_is_400_validation():
    err = InvalidRequestError("Invalid article ID", field="id")
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert err.severity is ErrorSeverity.WARNING
    assert err.field == "id"


def test_database_error_hides_details_from_response():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 500
    assert err.message == "Database execute failed: Connection or operational error"
    assert err.to_response() == {"error": "Database error"}
    assert err.operation == "execute"


def test_all_errors_share_base_class():
    for err in (
        ResourceNotFoundError("Article", "1"),
        InvalidRequestError("bad"),
        DatabaseError("x", "query"),
    ):
        assert isinstance(err, CatalogError)
        assert set(err.to_response()) == {"error"}
