from __future__ import annotations

from pathlib import Path
from typing import Optional

from models import AdoptersContent, STATUS_ORDER


def print_summary(content: AdoptersContent, output_path: Optional[Path] = None) -> None:
    """Print summary of the build."""
    print("\n" + "="*60)
    print("ADOPTION TRACKER - SUMMARY")
    print("="*60)
    print(f"Adopters: {len(content.adopters)}")
    print(f"Last Updated: {content.last_updated}")
    print()
    print("Adoption Status:")
    for status in STATUS_ORDER:
        print(f"  {status.label}: {content.summary.get(status, 0)}")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)
