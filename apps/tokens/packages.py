"""
Fixed token package price list.

Prices are whole lei; bonus tokens are credited on top of the package amount.
"""

from typing import NamedTuple


class TokenPackage(NamedTuple):
    id: str
    tokens: int
    price: int
    bonus_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.tokens + self.bonus_tokens


TOKEN_PACKAGES = {
    package.id: package
    for package in (
        TokenPackage('50', tokens=50, price=50),
        TokenPackage('100', tokens=100, price=100),
        TokenPackage('300', tokens=300, price=300),
        TokenPackage('500', tokens=500, price=500, bonus_tokens=25),
    )
}
