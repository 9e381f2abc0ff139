"""Application-wide constants."""

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
INSIGHTS_TABLE = "insights"

# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
GEMINI_TEMPERATURE = 0.7

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
API_NAME = "MyBizSherpa API"
MAX_REQUEST_BYTES = 1_000_000  # transcripts can be long
