"""Locust load testing script for MeetingNotes.

Each simulated user generates one summary on start (one LLM call), then
exercises the read and edit endpoints against it.
"""

import random

from locust import HttpUser, between, task

SAMPLE_TRANSCRIPT = """Alice: Morning everyone. Main topic today is the v2 release.
Bob: QA signed off yesterday, so I think we can ship on Thursday.
Carol: Docs still need the new API section. I can finish it by Wednesday.
Alice: Great. Let's ship Thursday then. Bob, please tag the release.
Bob: Will do.
"""

SAMPLE_EDITS = [
    "## Summary\n- Ship v2 on Thursday",
    "## Decisions\n- Release Thursday\n\n## Action items\n1. Carol: docs\n2. Bob: tag",
    "Short version: v2 ships Thursday.",
]


class MeetingNotesUser(HttpUser):
    """Simulated user for load testing MeetingNotes."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    def on_start(self) -> None:
        """Create a summary to read and edit."""
        self.summary_id = None
        response = self.client.post(
            "/api/summaries/generate",
            files={"transcript": ("standup.txt", SAMPLE_TRANSCRIPT, "text/plain")},
            data={"title": "Load test standup"},
        )
        if response.ok:
            self.summary_id = response.json()["id"]

    @task(3)
    def list_summaries(self) -> None:
        """Fetch the summary list - most common operation."""
        self.client.get("/api/summaries")

    @task(2)
    def get_summary(self) -> None:
        """Open a single summary."""
        if self.summary_id:
            self.client.get(f"/api/summaries/{self.summary_id}", name="/api/summaries/[id]")

    @task(2)
    def save_edit(self) -> None:
        """Simulate a debounced editor save."""
        if self.summary_id:
            self.client.patch(
                f"/api/summaries/{self.summary_id}",
                json={"editedSummary": random.choice(SAMPLE_EDITS)},
                name="/api/summaries/[id]",
            )

    @task(1)
    def load_client_route(self) -> None:
        """Hit a client-side route served by the SPA fallback."""
        self.client.get("/history")
