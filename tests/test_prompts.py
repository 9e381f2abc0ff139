"""Tests for prompt construction."""

from sherpa.services.prompts import build_linkedin_prompt, build_transcript_prompt


class TestTranscriptPrompt:
    def test_fields_are_embedded(self):
        prompt = build_transcript_prompt("Jo: hi\nSam: hello", "Acme", ["Jo", "Sam"], "2024-01-01")

        assert "what I did well and why" in prompt
        assert "Company: Acme" in prompt
        assert "Attendees: Jo, Sam" in prompt
        assert "Date: 2024-01-01" in prompt
        assert prompt.rstrip().endswith("Jo: hi\nSam: hello")

    def test_transcript_is_verbatim(self):
        transcript = "Braces {like this} and  double  spaces " * 500

        prompt = build_transcript_prompt(transcript, "Acme", ["Jo"], "2024-01-01")

        assert transcript in prompt


class TestLinkedinPrompt:
    def test_fields_and_instructions_are_embedded(self):
        prompt = build_linkedin_prompt("Bio text", "Deck text", "Acme", "CTO")

        assert "LinkedIn Bio:\nBio text" in prompt
        assert "Pitch Deck:\nDeck text" in prompt
        assert "Company: Acme" in prompt
        assert "Role: CTO" in prompt
        for number in range(1, 10):
            assert f"\n{number}. " in prompt
        assert "9. Short summary and 3 reflection questions" in prompt
