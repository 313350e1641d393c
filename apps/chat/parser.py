"""
Drink intent parser.

Maps free-form Romanian/English text to a canonical drink name and an
options record by plain substring matching. Pure: no state, no I/O.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from apps.orders.models import DrinkSize, DrinkStrength


class UnrecognizedDrinkError(Exception):
    """Raised when no known drink keyword occurs in the text."""
    pass


# Order matters: the first keyword found in the text wins.
DRINK_KEYWORDS = (
    ('cuba libre', 'Cuba Libre'),
    ('mojito', 'Mojito'),
    ('gin tonic', 'Gin Tonic'),
    ('gin & tonic', 'Gin Tonic'),
    ('whisky', 'Whisky'),
    ('vodka', 'Vodka'),
    ('bere', 'Bere'),
    ('beer', 'Bere'),
    ('vin', 'Vin'),
    ('wine', 'Vin'),
    ('martini', 'Martini'),
    ('cosmopolitan', 'Cosmopolitan'),
    ('margarita', 'Margarita'),
)

LARGE_KEYWORDS = ('mare', 'large')
SMALL_KEYWORDS = ('mic', 'small')
NO_ICE_KEYWORDS = ('fără gheață', 'no ice')
STRONG_KEYWORDS = ('tare', 'strong')
LIGHT_KEYWORDS = ('slab', 'light')

# Legacy cedilla letters folded into the comma-below forms
_CEDILLA_FOLD = str.maketrans({'ş': 'ș', 'ţ': 'ț'})


@dataclass(frozen=True)
class DrinkIntent:
    drink: str
    size: str = DrinkSize.MEDIUM.value
    ice: bool = True
    strength: Optional[str] = None
    extras: List[str] = field(default_factory=list)

    @property
    def options(self) -> dict:
        options = {'size': self.size, 'ice': self.ice}
        if self.strength:
            options['strength'] = self.strength
        if self.extras:
            options['extras'] = list(self.extras)
        return options


def normalize_text(text: str) -> str:
    return (text or '').lower().translate(_CEDILLA_FOLD)


def _contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def match_drink(text: str) -> Optional[str]:
    """Canonical drink for the first keyword (in table order) found in text."""
    text = normalize_text(text)
    for keyword, drink in DRINK_KEYWORDS:
        if keyword in text:
            return drink
    return None


def parse_drink_intent(text: str) -> DrinkIntent:
    """
    Extract a drink and its options from a chat message.

    >>> parse_drink_intent("Aș dori un mojito mare fără gheață").options
    {'size': 'large', 'ice': False}

    Raises:
        UnrecognizedDrinkError: If no drink keyword is present
    """
    drink = match_drink(text)
    if drink is None:
        raise UnrecognizedDrinkError(
            "Could not identify the drink. Please say what you would like to order."
        )

    text = normalize_text(text)

    size = DrinkSize.MEDIUM.value
    if _contains_any(text, LARGE_KEYWORDS):
        size = DrinkSize.LARGE.value
    elif _contains_any(text, SMALL_KEYWORDS):
        size = DrinkSize.SMALL.value

    strength = None
    if _contains_any(text, STRONG_KEYWORDS):
        strength = DrinkStrength.STRONG.value
    elif _contains_any(text, LIGHT_KEYWORDS):
        strength = DrinkStrength.LIGHT.value

    return DrinkIntent(
        drink=drink,
        size=size,
        ice=not _contains_any(text, NO_ICE_KEYWORDS),
        strength=strength,
    )
