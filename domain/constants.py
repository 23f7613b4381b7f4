"""Domain constants and type aliases"""
from typing import Literal

# Type aliases for senders, events and categories
Sender = Literal["user", "bot"]
EventType = Literal["user_message", "bot_response", "typing"]
Category = Literal["greeting", "anxiety", "depression", "stress", "positive", "support", "default"]

# Sender constants
SENDER_USER: Sender = "user"
SENDER_BOT: Sender = "bot"

# Event type constants
EVENT_TYPE_USER_MESSAGE: EventType = "user_message"
EVENT_TYPE_BOT_RESPONSE: EventType = "bot_response"
EVENT_TYPE_TYPING: EventType = "typing"

# Category constants, in matching priority order
CATEGORY_GREETING: Category = "greeting"
CATEGORY_ANXIETY: Category = "anxiety"
CATEGORY_DEPRESSION: Category = "depression"
CATEGORY_STRESS: Category = "stress"
CATEGORY_POSITIVE: Category = "positive"
CATEGORY_SUPPORT: Category = "support"
CATEGORY_DEFAULT: Category = "default"

# Simulated typing delay, milliseconds, upper bound exclusive
TYPING_DELAY_MIN_MS = 1000
TYPING_DELAY_MAX_MS = 3000

BOT_NAME = "MindfulBot"

SEED_GREETING = (
    "Hello! I'm your mental health support companion. I'm here to listen, "
    "provide encouragement, and offer coping strategies. How are you feeling today?"
)

# Rendered verbatim below the input area
DISCLAIMER = (
    "This bot provides emotional support but isn't a replacement for professional mental health care. "
    "If you're in crisis, please contact a mental health professional or emergency services."
)
