"""List every built-in printer with a sample rendering.

Run with an optional zone identifier:
    python examples/show_formatters.py Europe/Riga
"""

import sys

from chronofmt import Instant, show_formatters

if __name__ == "__main__":
    sample = Instant.of(2010, 3, 11, 14, 5, 9, 42)
    zone = sys.argv[1] if len(sys.argv) > 1 else None
    show_formatters(sample, zone=zone)
