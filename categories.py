# categories.py
# Static category configuration: keywords, priority, colour tag and the
# canned response for each category. Built once, never mutated.

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from config import CATEGORY_FILTER_ALL
from exceptions import ConfigurationError
from shared_types import Category, Priority

ResponseTemplate = Callable[[str], str]


# ── Response templates ────────────────────────────────────────────────────────
# Each template receives the original ticket text; none of them use it yet.

def authentication_template(text: str) -> str:
    return (
        "Hello! I can help you with your password issue.\n"
        "\n"
        "Here's how to reset your password:\n"
        "1. Go to the login page\n"
        "2. Click \"Forgot Password\"\n"
        "3. Enter your email address\n"
        "4. Check your email for reset instructions\n"
        "5. Follow the link to create a new password\n"
        "\n"
        "If you continue to have issues, I'll escalate this to our IT team."
    )


def hr_template(text: str) -> str:
    return (
        "Hi there! I can help you with your HR inquiry.\n"
        "\n"
        "To check your leave balance:\n"
        "1. Log into the employee portal\n"
        "2. Navigate to \"HR Services\" → \"Leave Management\"\n"
        "3. Your current balance will be displayed\n"
        "\n"
        "If you need assistance accessing the portal or have other HR "
        "questions, I'll connect you with our HR team."
    )


def it_template(text: str) -> str:
    return (
        "Hello! I'm here to help with your IT support request.\n"
        "\n"
        "For common IT issues, try these steps:\n"
        "1. Restart your computer/application\n"
        "2. Check your network connection\n"
        "3. Clear your browser cache if it's a web issue\n"
        "\n"
        "If the problem persists, I'll create a ticket for our IT support "
        "team to assist you further."
    )


def system_template(text: str) -> str:
    return (
        "Hi! I understand you're experiencing a system issue.\n"
        "\n"
        "I've logged this as a high-priority ticket. Our technical team will:\n"
        "1. Investigate the issue immediately\n"
        "2. Provide updates within 2 hours\n"
        "3. Work on a resolution\n"
        "\n"
        "Thank you for reporting this - it helps us maintain system quality."
    )


def general_template(text: str) -> str:
    return (
        "Hello! Thank you for contacting support.\n"
        "\n"
        "I've received your inquiry and it will be reviewed by our support "
        "team. You can expect a response within 24 hours.\n"
        "\n"
        "If this is urgent, please call our support hotline at 1-800-SUPPORT."
    )


# ── Registry ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CategoryConfig:
    name: Category
    keywords: tuple[str, ...]
    priority: Priority
    color: str
    response_template: ResponseTemplate

    @property
    def is_fallback(self) -> bool:
        return not self.keywords

    @property
    def label(self) -> str:
        return self.name.replace("_", " ", 1)


class CategoryRegistry:
    """
    Read-only, ordered collection of categories.

    Declaration order matters: the classifier breaks score ties in favour of
    the category declared first. Exactly one category must have no keywords;
    it is returned whenever nothing else matches.
    """

    def __init__(self, configs: Iterable[CategoryConfig]):
        ordered = {}
        for config in configs:
            if config.name in ordered:
                raise ConfigurationError(
                    f"Duplicate category '{config.name}'", {"category": config.name}
                )
            if any(k != k.lower() for k in config.keywords):
                raise ConfigurationError(
                    f"Keywords for '{config.name}' must be lowercase",
                    {"category": config.name},
                )
            ordered[config.name] = config

        fallbacks = [c for c in ordered.values() if c.is_fallback]
        if len(fallbacks) != 1:
            raise ConfigurationError(
                "Exactly one category must have an empty keyword set",
                {"fallbacks": [c.name for c in fallbacks]},
            )

        self._categories: Mapping[str, CategoryConfig] = MappingProxyType(ordered)
        self._fallback = fallbacks[0]

    @property
    def fallback(self) -> CategoryConfig:
        return self._fallback

    def __getitem__(self, name: str) -> CategoryConfig:
        return self._categories[name]

    def __contains__(self, name: object) -> bool:
        return name in self._categories

    def __iter__(self):
        return iter(self._categories.values())

    def __len__(self) -> int:
        return len(self._categories)

    def names(self) -> list[str]:
        return list(self._categories)

    def scored(self) -> list[CategoryConfig]:
        """Categories that take part in keyword scoring, in declaration order."""
        return [c for c in self._categories.values() if not c.is_fallback]

    def filter_options(self) -> list[str]:
        """Values accepted by the category filter, wildcard first."""
        return [CATEGORY_FILTER_ALL, *self._categories]


DEFAULT_REGISTRY = CategoryRegistry([
    CategoryConfig(
        name="Authentication",
        keywords=("password", "login", "access", "reset", "forgot",
                  "incorrect", "locked", "signin"),
        priority="High",
        color="red",
        response_template=authentication_template,
    ),
    CategoryConfig(
        name="HR_Services",
        keywords=("leave", "balance", "vacation", "sick", "pay",
                  "benefits", "policy", "time off"),
        priority="Medium",
        color="blue",
        response_template=hr_template,
    ),
    CategoryConfig(
        name="IT_Support",
        keywords=("computer", "software", "network", "printer",
                  "installation", "hardware", "slow"),
        priority="Medium",
        color="green",
        response_template=it_template,
    ),
    CategoryConfig(
        name="System_Issues",
        keywords=("error", "bug", "crash", "system", "application",
                  "feature", "not working"),
        priority="High",
        color="orange",
        response_template=system_template,
    ),
    CategoryConfig(
        name="General_Inquiry",
        keywords=(),
        priority="Low",
        color="gray",
        response_template=general_template,
    ),
])


def category_names(registry: CategoryRegistry = DEFAULT_REGISTRY) -> list[str]:
    return registry.names()
