"""Simple test to verify pytest setup."""



def test_simple():
    """Simple test that should always pass."""
    assert 1 + 1 == 2


def test_import_app():
    """Test that we can import the app module."""
    from hotel_booking.main import create_app
    app = create_app()
    assert app is not None


def test_booking_routes_registered():
    """Test the booking routes are mounted on the app."""
    from hotel_booking.main import create_app
    paths = create_app().openapi()["paths"]

    assert {"get", "post"} <= set(paths["/booking"])
    assert "put" in paths["/booking/{booking_id}"]


def test_openapi_documents_problem_responses():
    """Test error responses are documented with the Problem schema."""
    from hotel_booking.main import create_app
    schema = create_app().openapi()

    assert "Problem" in schema["components"]["schemas"]
    post = schema["paths"]["/booking"]["post"]
    assert {"400", "401", "403", "404"} <= set(post["responses"])
