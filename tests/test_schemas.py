"""Tests for request parsing and response shape rules."""

import pytest
from pydantic import ValidationError

from sherpa.schemas.insights import InsightResponse, LinkedinMetadata, TranscriptInsightRequest, TranscriptMetadata

RECORD = {
    "id": "3f0b7c1e-9d0a-4b8e-8f1a-2c3d4e5f6a7b",
    "content": "text",
    "created_at": "2024-01-01T00:00:00+00:00",
}
TRANSCRIPT_METADATA = {"company_name": "Acme", "attendees": ["Jo", "Sam"], "date": "2024-01-01"}
LINKEDIN_METADATA = {"company_name": "Acme", "role": "CTO"}


class TestInsightResponse:
    def test_metadata_follows_type(self):
        transcript = InsightResponse.model_validate({**RECORD, "type": "transcript", "metadata": TRANSCRIPT_METADATA})
        linkedin = InsightResponse.model_validate({**RECORD, "type": "linkedin", "metadata": LINKEDIN_METADATA})

        assert isinstance(transcript.metadata, TranscriptMetadata)
        assert isinstance(linkedin.metadata, LinkedinMetadata)

    @pytest.mark.parametrize(
        ("insight_type", "metadata"),
        [("linkedin", TRANSCRIPT_METADATA), ("transcript", LINKEDIN_METADATA)],
    )
    def test_mismatched_metadata_is_rejected(self, insight_type, metadata):
        with pytest.raises(ValidationError, match="metadata does not match insight type"):
            InsightResponse.model_validate({**RECORD, "type": insight_type, "metadata": metadata})


class TestTranscriptInsightRequest:
    def test_attendee_string_is_split(self):
        request = TranscriptInsightRequest(transcript="t", company_name="Acme", attendees="Jo, Sam ,", date="d")

        assert request.attendees == ["Jo", "Sam"]
