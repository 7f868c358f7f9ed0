"""Console configuration and seed data."""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from support_console.models.conversation import (
    Message,
    MessageAuthor,
    Sentiment,
)
from support_console.models.knowledge import KnowledgeArticle


class ConsoleConfig(BaseModel):
    """Tunables for matching, composition and reply scheduling."""

    reply_delay_seconds: float = Field(ge=0, default=0.9)
    max_related_articles: int = Field(ge=0, default=2)
    follow_up_suffix: str = (
        "Let me know once you try that so I can keep an eye on the "
        "real-time diagnostics."
    )
    fallback_reply: str = (
        "Thanks, Jamie! I'm syncing diagnostics now. Give me a moment and "
        "I'll follow up with the best next step."
    )
    fallback_topic: str = "Follow-up"
    custom_reply_topic: str = "Custom reply"


class SeedData(BaseModel):
    """
    Static data the console starts from.

    Passed into the engine explicitly so tests can substitute fixtures.
    """

    model_config = ConfigDict(frozen=True)

    knowledge_base: List[KnowledgeArticle] = []
    canned_replies: List[str] = []
    escalation_reply: str = ""
    transcript: List[Message] = []


def default_seed_data() -> SeedData:
    """The PulseCare live-support session the console ships with."""
    return SeedData(
        knowledge_base=[
            KnowledgeArticle(
                id="kb-101",
                title="Restore Offline Sensors",
                summary=(
                    "Quick checklist to bring sensors back online via the "
                    "PulseCare mobile app."
                ),
                response=(
                    "Hi Jamie! When a sensor goes offline, open the PulseCare app, "
                    "tap the device, and choose 'Run Diagnostics'. This will guide "
                    "you through reconnecting to Wi-Fi. If the LED stays red for "
                    "more than 15 seconds, hold the side button for 8 seconds to "
                    "reboot the sensor."
                ),
                keywords=["offline", "sensor", "Wi-Fi", "diagnostic"],
                last_updated=date(2024, 3, 28),
                confidence=0.92,
            ),
            KnowledgeArticle(
                id="kb-204",
                title="Subscription Renewal Grace Period",
                summary="Explains billing grace periods and how to retry payments.",
                response=(
                    "We've got you covered! Your PulseCare Plus subscription has a "
                    "14-day grace period. You can retry the payment under Billing > "
                    "Subscriptions. If you need extra time, I'm happy to apply a "
                    "one-time 7-day extension."
                ),
                keywords=["subscription", "billing", "payment", "grace"],
                last_updated=date(2024, 2, 15),
                confidence=0.87,
            ),
            KnowledgeArticle(
                id="kb-312",
                title="Same-Day Replacement Policy",
                summary="Eligibility and process for fast-track replacement shipping.",
                response=(
                    "I can arrange a same-day replacement since you're a Premium "
                    "Plus member in a covered metro area. Once confirmed, you'll "
                    "receive a pre-paid return label, and the replacement ships "
                    "out within 2 hours."
                ),
                keywords=["replacement", "shipping", "premium", "metro"],
                last_updated=date(2024, 4, 2),
                confidence=0.95,
            ),
        ],
        canned_replies=[
            "Thanks for sharing those details. Can you confirm if the sensor LED "
            "is solid or blinking red?",
            "I'm seeing a firmware patch that addresses this. I can push it "
            "manually if you're online for the next 5 minutes.",
            "Since you're on Premium Plus, I can fast-track a replacement if we "
            "can't restore it remotely.",
        ],
        escalation_reply=(
            "Looping in Tier 2 support to monitor the firmware. I'll stay with "
            "you until we confirm it's stable."
        ),
        transcript=[
            Message(
                id="msg-1",
                author=MessageAuthor.CUSTOMER,
                body=(
                    "Hey, sensor on my living room camera keeps going offline "
                    "with a red LED. App can't reconnect."
                ),
                timestamp="9:22 AM",
                sentiment=Sentiment.NEGATIVE,
                topic="Device offline",
            ),
            Message(
                id="msg-2",
                author=MessageAuthor.AGENT,
                body=(
                    "Thanks for flagging, Jamie! Let me pull the diagnostics for "
                    "that sensor. One moment while I check the signal strength "
                    "history."
                ),
                timestamp="9:23 AM",
                sentiment=Sentiment.NEUTRAL,
                topic="Diagnostics",
            ),
            Message(
                id="msg-3",
                author=MessageAuthor.CUSTOMER,
                body=(
                    "App shows 2.4GHz signal strong. Started right after latest "
                    "firmware update yesterday."
                ),
                timestamp="9:24 AM",
                sentiment=Sentiment.NEUTRAL,
                topic="Firmware",
            ),
        ],
    )
