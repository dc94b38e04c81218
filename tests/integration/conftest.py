"""Every API scenario starts from the seeded notes."""

import pytest

from helpers import seed_notes


@pytest.fixture(autouse=True)
async def initial_notes(note_repository):
    """Clear the collection and re-seed before each scenario."""
    await seed_notes(note_repository)
