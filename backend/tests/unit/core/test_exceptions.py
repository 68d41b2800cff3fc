"""
Unit Tests for the LeadTrack exception hierarchy
"""
from app.core.exceptions import (
    LeadTrackError,
    ConflictError,
    DuplicateUsernameError,
    FileTooLargeError,
    InvalidFileTypeError,
    LeadEntryNotFoundError,
    NoProfileAssignedError,
    ProfileNotAssignedError,
    ProfileNotFoundError,
    ReportGenerationError,
    error_response,
)


class TestStatusCodes:

    def test_not_found_errors(self):
        assert ProfileNotFoundError(3).status_code == 404
        assert NoProfileAssignedError(1).status_code == 404

    def test_validation_errors(self):
        assert DuplicateUsernameError("bob").status_code == 400
        assert ProfileNotAssignedError().status_code == 400
        assert InvalidFileTypeError(".txt", [".pdf"]).status_code == 400

    def test_other_errors(self):
        assert FileTooLargeError(10, 5).status_code == 413
        assert ConflictError("in use").status_code == 409
        assert ReportGenerationError("boom").status_code == 500
        assert LeadTrackError("boom").status_code == 500


class TestMessages:

    def test_not_found_message(self):
        assert ProfileNotFoundError(3).message == "Profile not found"
        assert LeadEntryNotFoundError(3).message == "Lead entry not found"
        assert LeadEntryNotFoundError(3).code == "LEAD_ENTRY_NOT_FOUND"

    def test_no_profile_assigned_message(self):
        assert NoProfileAssignedError(1).message == "No profile assigned"

    def test_duplicate_username(self):
        error = DuplicateUsernameError("bob")
        assert error.message == "Username already exists"
        assert error.code == "USERNAME_TAKEN"
        assert error.details == {"field": "username"}

    def test_report_error_code(self):
        error = ReportGenerationError("boom", report_type="daily")
        assert error.code == "REPORT_GENERATION_FAILED"
        assert error.details["report_type"] == "daily"


def test_error_response_shape():
    body = error_response(ProfileNotFoundError(9))

    assert body["detail"] == "Profile not found"
    assert body["error"]["code"] == "PROFILE_NOT_FOUND"
    assert body["error"]["details"] == {"resource_type": "Profile", "resource_id": 9}
