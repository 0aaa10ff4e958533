import logging
import os
from unittest.mock import patch

import pytest
from celery import Task

# Set test environment variables
os.environ.update(
    {
        "ADAPTER_URL": "http://adapter.test",
        "ADAPTER_KEY": "test_key",
        "DEFAULT_PROJECT": "default",
        "REDIS_URL": "redis://localhost:6379/2",  # Use a separate Redis DB for testing
    }
)

# Import app modules after setting environment variables
from formnotify.core.config import get_settings
from formnotify.schemas.event import (
    ChoiceElement,
    ChoiceInfo,
    ChoiceNode,
    ContactInfo,
    ContactNode,
    FormFinishedEvent,
    RatingElement,
    RatingInfo,
    RatingNode,
    SelectInfo,
    SelectNode,
    UnknownNode,
)

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def celery_task_always_eager():
    with patch.object(Task, "apply_async") as mock:

        class MockAsyncResult:
            def __init__(self):
                self.id = "mock-task-id"

        mock.return_value = MockAsyncResult()
        yield mock


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def rating_event() -> FormFinishedEvent:
    return FormFinishedEvent(
        title="Survey",
        link_text="view",
        link_url="http://x",
        form_translation="Customer Survey",
        nodes=[
            RatingNode(
                translation="Satisfaction",
                rating=RatingInfo(
                    label="Satisfaction",
                    elements=[
                        RatingElement(label="Speed", value=8),
                        RatingElement(label="Support", value=6),
                    ],
                ),
            )
        ],
    )


@pytest.fixture
def full_event() -> FormFinishedEvent:
    return FormFinishedEvent(
        title="New submission",
        link_text="open",
        link_url="https://forms.example.com/r/42",
        form_translation="Feedback",
        contact=ContactInfo(
            first_name="Ada", last_name="Lovelace", email="ada@example.com"
        ),
        nodes=[
            ChoiceNode(
                translation="What did you like?",
                choice=ChoiceInfo(
                    elements=[
                        ChoiceElement(label="Pricing"),
                        ChoiceElement(label="Other", short_answer="Docs"),
                        ChoiceElement(
                            label="Comment", long_answer="Setup took five minutes."
                        ),
                    ]
                ),
            ),
            SelectNode(
                translation="Plan",
                select=SelectInfo(label="Chosen plans", options=["Team", "Annual"]),
            ),
            UnknownNode(kind="signature", translation="Sign here"),
            ContactNode(
                translation="Company contact",
                contact=ContactInfo(company="Analytical Engines", phone="+44 1"),
            ),
            RatingNode(
                translation="Scores",
                rating=RatingInfo(
                    label="Scores", elements=[RatingElement(label="Speed", value=9)]
                ),
            ),
        ],
    )
