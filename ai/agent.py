"""Support agent: picks a reply for a user message using category matching"""
import random

from ai.responses import RESPONSE_CATEGORIES, DEFAULT_CATEGORY, CATEGORIES_BY_NAME, ResponseCategory


class SupportAgent:
    """Keyword-matching support agent.

    Categories are checked in a fixed priority order and the first one with
    any trigger substring in the message wins. The reply is a uniform random
    pick from that category's pool.
    """

    categories: tuple[ResponseCategory, ...] = RESPONSE_CATEGORIES
    default_category: ResponseCategory = DEFAULT_CATEGORY

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def detect_category(self, message: str) -> str:
        """Detect the category of a user message based on trigger substrings"""
        message_lower = message.lower()

        for category in self.categories:
            for trigger in category.triggers:
                if trigger in message_lower:
                    return category.name

        return self.default_category.name

    def get_response(self, category: str) -> str:
        """Pick a reply from the category's pool"""
        pool = CATEGORIES_BY_NAME.get(category, self.default_category).replies
        return pool[self.rng.randrange(len(pool))]

    def select_response(self, message: str) -> str:
        """Map a user message to one reply string"""
        return self.get_response(self.detect_category(message))


# Process-wide agent backing the module-level helper
default_agent = SupportAgent()


def select_response(message: str) -> str:
    """Select a reply for a message using the process-wide agent"""
    return default_agent.select_response(message)
