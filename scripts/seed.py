"""Script that seeds the sample brands and products.

Usage: python scripts/seed.py [--reset]
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Add the project root to the Python path
BASE_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BASE_DIR))

import django
from django.core.management import call_command

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "storefront.settings")
django.setup()


def main() -> None:
    call_command("seed", *sys.argv[1:])


if __name__ == "__main__":
    main()
