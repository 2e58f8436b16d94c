"""Entry point for running aligned-date-axis as a module.

Usage:
    python -m aligned_date_axis axis.png --start 2024-01-01 --end 2024-01-08
"""

from aligned_date_axis.cli import main

if __name__ == "__main__":
    main()
