"""Static response table: trigger substrings and reply pools per category"""
from dataclasses import dataclass

from domain.constants import (
    Category,
    CATEGORY_GREETING,
    CATEGORY_ANXIETY,
    CATEGORY_DEPRESSION,
    CATEGORY_STRESS,
    CATEGORY_POSITIVE,
    CATEGORY_SUPPORT,
    CATEGORY_DEFAULT,
)


@dataclass(frozen=True)
class ResponseCategory:
    """A category's triggers and the replies it can produce"""
    name: Category
    triggers: tuple[str, ...]
    replies: tuple[str, ...]


# Checked in this order; the first category with a trigger present wins
RESPONSE_CATEGORIES: tuple[ResponseCategory, ...] = (
    ResponseCategory(
        name=CATEGORY_GREETING,
        triggers=("hello", "hi", "hey"),
        replies=(
            "Hello! I'm here to listen and support you. How are you feeling today?",
            "Hi there! It's great that you're taking time to check in with yourself. What's on your mind?",
            "Welcome! I'm here to provide a safe space for you to share. How can I support you today?",
        ),
    ),
    ResponseCategory(
        name=CATEGORY_ANXIETY,
        triggers=("anxiety", "anxious", "worried", "nervous"),
        replies=(
            "I understand that anxiety can feel overwhelming. Remember, these feelings are temporary. Try taking three deep breaths with me. What specifically is making you feel anxious?",
            "Anxiety is your mind trying to protect you, even when there's no real danger. You're safe right now. Can you tell me more about what's worrying you?",
            "It's completely normal to feel anxious sometimes. You're being so brave by reaching out. What usually helps you feel calmer?",
        ),
    ),
    ResponseCategory(
        name=CATEGORY_DEPRESSION,
        triggers=("depression", "depressed", "sad", "down", "hopeless"),
        replies=(
            "I hear that you're going through a difficult time. Your feelings are valid, and it's okay to not be okay. You're not alone in this. What's been the hardest part lately?",
            "Depression can make everything feel heavy, but reaching out shows incredible strength. Small steps count too. Have you been able to do anything today that made you feel even a little better?",
            "Thank you for trusting me with your feelings. Even when it doesn't feel like it, you matter and your life has value. What's one small thing that used to bring you joy?",
        ),
    ),
    ResponseCategory(
        name=CATEGORY_STRESS,
        triggers=("stress", "stressed", "overwhelmed", "pressure"),
        replies=(
            "Stress can really pile up and feel overwhelming. You're doing great by acknowledging it. What's been causing you the most stress lately?",
            "It sounds like you have a lot on your plate right now. Let's break it down together. What feels most urgent to you?",
            "Stress is your body's way of responding to challenges. It's okay to feel this way. Have you been able to take any breaks for yourself recently?",
        ),
    ),
    ResponseCategory(
        name=CATEGORY_POSITIVE,
        triggers=("good", "happy", "great", "better", "fine"),
        replies=(
            "That's wonderful to hear! It's so important to acknowledge the good moments. What's been going well for you?",
            "I'm so glad you're feeling positive! These moments are precious. What's bringing you joy today?",
            "It's beautiful that you're in a good place right now. Celebrating these feelings is just as important as working through difficult ones.",
        ),
    ),
    ResponseCategory(
        name=CATEGORY_SUPPORT,
        triggers=("help", "support", "alone", "scared"),
        replies=(
            "Remember, seeking help is a sign of strength, not weakness. You deserve support and care.",
            "You're being incredibly brave by opening up. Your feelings matter, and so do you.",
            "It's okay to not have all the answers right now. Taking things one step at a time is perfectly fine.",
            "You're not alone in this journey. There are people who care about you and want to help.",
            "Be gentle with yourself. Healing isn't linear, and that's completely okay.",
        ),
    ),
)

# Fallback when no trigger matches
DEFAULT_CATEGORY = ResponseCategory(
    name=CATEGORY_DEFAULT,
    triggers=(),
    replies=(
        "I'm here to listen. Can you tell me more about what you're experiencing?",
        "Thank you for sharing with me. Your feelings are important. What would be most helpful for you right now?",
        "I want to understand better. Can you help me by describing what you're going through?",
        "Your wellbeing matters to me. What's been on your mind lately?",
    ),
)

CATEGORIES_BY_NAME: dict[str, ResponseCategory] = {
    category.name: category for category in (*RESPONSE_CATEGORIES, DEFAULT_CATEGORY)
}
