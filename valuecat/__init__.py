"""valuecat: item value catalog with abbreviated magnitudes.

Keeps a catalog of items and their value history in a JSON snapshot and shows
values abbreviated (1500000 → 1.5M, 1e18 → 1.0Qn). The formatter/parser pair
lives in valuecat.formatting and has no dependencies.

Usage:
    python -m valuecat format 1500000        # 1.5M
    python -m valuecat list --sort name      # Listing
    python -m valuecat show "Golden Egg"     # Details + history
    python -m valuecat calc "Golden Egg=2"   # Calculator
"""

from valuecat.formatting import format_value, parse_value

__all__ = ["format_value", "parse_value"]
