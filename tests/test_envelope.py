"""
Tests for the standard response envelope.

Covers success derivation, factory intent and JSON rendering.
No HTTP server involved.
"""

import json
from http import HTTPStatus

import pytest

from app.interfaces.users.schemas import UserListEnvelope, UserSchema
from app.shared.envelope import Envelope


class TestEnvelopeConstruction:
    """Tests for the plain constructor."""

    def test_ok_status_derives_success(self) -> None:
        """A 200 envelope is successful by default."""
        envelope = Envelope(status_code=200, message="fine")
        assert envelope.success is True
        assert envelope.data is None

    @pytest.mark.parametrize("status_code", [201, 400, 404, 500])
    def test_other_status_derives_failure(self, status_code: int) -> None:
        """Any status other than 200 is unsuccessful by default."""
        envelope = Envelope(status_code=status_code, message="x")
        assert envelope.success is False

    def test_positional_status_and_message(self) -> None:
        """Envelope(status_code, message) derives success from the status."""
        assert Envelope(404, "x").success is False
        ok = Envelope(200, "ok")
        assert ok.success is True
        assert ok.status_code == 200
        assert ok.message == "ok"

    def test_accepts_camel_case_alias(self) -> None:
        """The wire name statusCode is accepted on input."""
        envelope = Envelope.model_validate({"statusCode": 200, "message": "m"})
        assert envelope.status_code == 200
        assert envelope.success is True

    def test_any_integer_status_is_accepted(self) -> None:
        """No validation is applied to the status code."""
        envelope = Envelope(status_code=999, message="odd")
        assert envelope.status_code == 999


class TestSuccessfulResponse:
    """Tests for Envelope.successful_response."""

    def test_defaults_to_ok(self) -> None:
        envelope = Envelope.successful_response("Successful", [1, 2])
        assert envelope.success is True
        assert envelope.status_code == HTTPStatus.OK
        assert envelope.data == [1, 2]

    def test_success_wins_over_status_code(self) -> None:
        """Factory intent overrides the status-derived default."""
        envelope = Envelope.successful_response("Created", status_code=201)
        assert envelope.success is True
        assert envelope.status_code == 201
        assert envelope.data is None


class TestFailedResponse:
    """Tests for Envelope.failed_response."""

    def test_defaults_to_bad_request(self) -> None:
        envelope = Envelope.failed_response("Bad input")
        assert envelope.success is False
        assert envelope.status_code == HTTPStatus.BAD_REQUEST

    def test_failure_wins_over_ok_status(self) -> None:
        """A failed envelope stays failed even at 200."""
        envelope = Envelope.failed_response("Nope", HTTPStatus.OK)
        assert envelope.success is False
        assert envelope.status_code == 200

    def test_carries_diagnostic_data(self) -> None:
        envelope = Envelope.failed_response("Boom", 500, data="division by zero")
        assert envelope.data == "division by zero"


class TestEnvelopeRendering:
    """Tests for JSON rendering."""

    def test_body_uses_wire_field_names(self) -> None:
        """The body always carries the four envelope keys."""
        response = Envelope.failed_response("Nope", HTTPStatus.NOT_FOUND).to_response()
        body = json.loads(response.body)
        assert body == {
            "statusCode": 404,
            "message": "Nope",
            "success": False,
            "data": None,
        }

    def test_transport_status_mirrors_envelope(self) -> None:
        response = Envelope.successful_response("Created", status_code=201).to_response()
        assert response.status_code == 201

    def test_transport_status_can_be_overridden(self) -> None:
        envelope = Envelope.failed_response("Not found", HTTPStatus.NOT_FOUND)
        assert envelope.to_response(HTTPStatus.BAD_REQUEST).status_code == 400

    def test_parameterized_envelope_validates_payload(self) -> None:
        """A typed envelope coerces its payload into the declared model."""
        envelope = UserListEnvelope.successful_response(
            "Successful", [{"name": "Hello World"}]
        )
        assert envelope.data == [UserSchema(name="Hello World")]
        body = json.loads(envelope.to_response().body)
        assert body["data"] == [{"name": "Hello World"}]
