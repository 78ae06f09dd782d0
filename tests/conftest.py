"""Pytest configuration for the msgvariants test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from msgvariants import Message, MessageGroup, Pattern, Placeholder, PlaceholderType, SelectorSet

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


def _count_message(message_id: str, category: str, text: str) -> Message:
    return Message(
        id=message_id,
        locale="en",
        pattern=Pattern.of(Placeholder("COUNT", PlaceholderType.PLURAL), text),
        selector_values=SelectorSet.of(COUNT=category),
    )


@pytest.fixture
def items_one() -> Message:
    """{COUNT:ONE} -> "{COUNT} item selected." """
    return _count_message("items-one", "ONE", " item selected.")


@pytest.fixture
def items_other() -> Message:
    """{COUNT:OTHER} -> "{COUNT} items selected." """
    return _count_message("items-other", "OTHER", " items selected.")


@pytest.fixture
def items_group(items_one: Message, items_other: Message) -> MessageGroup:
    """Exact-only "items" group with ONE and OTHER variants."""
    return MessageGroup.from_messages("items", [items_one, items_other])
