"""Constants for the tour pricing engine."""

from decimal import Decimal

# Money is carried with two fraction digits (cents / kuruş)
MONEY_QUANTUM = Decimal("0.01")

# Smallest chargeable amount in any supported currency
MINIMUM_AMOUNT = Decimal("0.01")

# Percentages are expressed on a 0-100 scale
PERCENT_SCALE = Decimal("100")
