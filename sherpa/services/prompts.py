"""Prompt templates for the two insight kinds."""

from __future__ import annotations

from collections.abc import Sequence

TRANSCRIPT_PROMPT = """\
You are a business coach analyzing meeting transcripts to provide actionable insights.

Review this transcript and share what I did well and why, what I could do even better and \
recommendations of things I can test differently next time.

Company: {company_name}
Attendees: {attendees}
Date: {date}

Transcript:
{transcript}
"""

LINKEDIN_PROMPT = """\
You are a sales strategist creating personalized outreach strategies.

Based on this LinkedIn bio and pitch deck, generate a cold outreach icebreaker for this person.

LinkedIn Bio:
{linkedin_bio}

Pitch Deck:
{pitch_deck}

Company: {company_name}
Role: {role}

Please provide:
1. Buying signals from the deck
2. Why they matter and source of information
3. Discovery triggers
4. Smart questions to ask in the next call
5. Preferred style of buying and how you inferred that
6. Top 5 things they would like from our deck
7. What parts may not be clear, relevant or valuable and why
8. What to do instead
9. Short summary and 3 reflection questions
"""


def build_transcript_prompt(transcript: str, company_name: str, attendees: Sequence[str], date: str) -> str:
    return TRANSCRIPT_PROMPT.format(
        transcript=transcript,
        company_name=company_name,
        attendees=", ".join(attendees),
        date=date,
    )


def build_linkedin_prompt(linkedin_bio: str, pitch_deck: str, company_name: str, role: str) -> str:
    return LINKEDIN_PROMPT.format(
        linkedin_bio=linkedin_bio,
        pitch_deck=pitch_deck,
        company_name=company_name,
        role=role,
    )
