"""Meeting transcript summarization over an OpenAI-compatible chat API."""

import logging
import time

from openai import AsyncOpenAI, OpenAIError

from meetingnotes.config import get_settings
from meetingnotes.errors import ConfigurationError, GenerationError
from meetingnotes.infrastructure.csv_logger import get_metrics_logger

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert meeting summarizer. You produce accurate, well-organized "
    "summaries of meeting transcripts using clear headings and bullet points, "
    "and you never invent details that are not in the transcript."
)

DEFAULT_PROMPT = """Please provide a clear and concise summary of the following meeting transcript.

Include:
- The main topics discussed
- Key decisions that were made
- Action items, with owners and deadlines where mentioned

Transcript:
{transcript}"""

CUSTOM_PROMPT = """Please summarize the following meeting transcript according to these instructions:

{instructions}

Transcript:
{transcript}"""


def record_generation(
    duration_ms: float, input_chars: int, tokens: int = 0, status: str = "ok"
) -> None:
    """Append a metrics row. A metrics failure never fails the generation."""
    try:
        metrics = get_metrics_logger()
        if metrics:
            metrics.log("generate_summary", duration_ms, input_chars, tokens, status)
    except OSError as e:
        logger.warning(f"Failed to write generation metrics: {e}")


def build_prompt(transcript: str, custom_instructions: str | None = None) -> str:
    """Build the user prompt; blank instructions fall back to the default prompt."""
    if custom_instructions and custom_instructions.strip():
        return CUSTOM_PROMPT.format(instructions=custom_instructions, transcript=transcript)
    return DEFAULT_PROMPT.format(transcript=transcript)


class SummarizerService:
    """Service for generating meeting summaries with a hosted LLM."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
    ) -> None:
        """Initialize the summarizer.

        Unset arguments are resolved from settings when generate() runs, so a
        missing API key surfaces per request rather than at startup.
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.client: AsyncOpenAI | None = None

    def _get_client(self, api_key: str, base_url: str) -> AsyncOpenAI:
        if self.client is None:
            self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        return self.client

    async def generate(self, transcript: str, custom_instructions: str | None = None) -> str:
        """Generate a summary for a transcript.

        Raises:
            ConfigurationError: No API key is configured.
            GenerationError: The API call failed or returned no text.
        """
        settings = get_settings()
        api_key = self.api_key or settings.groq_api_key
        if not api_key:
            logger.warning("Groq API key not configured")
            raise ConfigurationError("GROQ_API_KEY is not configured")

        model = self.model or settings.summarization_model
        client = self._get_client(api_key, self.base_url or settings.groq_base_url)
        start_time = time.perf_counter()

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(transcript, custom_instructions)},
                ],
                max_tokens=settings.summarization_max_tokens,
                temperature=settings.summarization_temperature,
            )
        except OpenAIError as e:
            logger.error(f"Summary generation request failed: {e}")
            duration_ms = (time.perf_counter() - start_time) * 1000
            record_generation(duration_ms, len(transcript), status="error")
            raise GenerationError(f"Failed to generate summary: {e}") from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        tokens = response.usage.completion_tokens if response.usage else 0

        content = response.choices[0].message.content if response.choices else None
        text = (content or "").strip()
        if not text:
            logger.error(f"Model {model} returned an empty summary")
            record_generation(duration_ms, len(transcript), tokens, "error")
            raise GenerationError("Failed to generate summary: empty response from model")

        record_generation(duration_ms, len(transcript), tokens)
        logger.info(f"Generated {len(text)}-char summary with {model} in {duration_ms:.0f}ms")
        return text


_summarizer: SummarizerService | None = None


def get_summarizer() -> SummarizerService:
    """Get or create the shared summarizer."""
    global _summarizer
    if _summarizer is None:
        _summarizer = SummarizerService()
    return _summarizer
