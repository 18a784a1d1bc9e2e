"""Unit multipliers for capacity and rate values.

Storage capacity (memory, disk) uses binary multiples, network rates use
decimal ones. Displayed figures depend on the difference.
"""

# Binary byte multiples
UNIT_B = 1
UNIT_KB = UNIT_B * 1024
UNIT_MB = UNIT_KB * 1024
UNIT_GB = UNIT_MB * 1024

# Decimal rate multiples (bytes per second)
UNIT_BPS = 1
UNIT_KBPS = UNIT_BPS * 1000
UNIT_MBPS = UNIT_KBPS * 1000
UNIT_GBPS = UNIT_MBPS * 1000
