#!/usr/bin/env python3
"""Generate a sample command script.

Writes a script that can be fed straight to ``bank-sim``::

    python scripts/generate_sample_script.py --accounts 10 --operations 200 -o local/sample.txt
    bank-sim local/sample.txt
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_sim.config import BankSimConfig
from bank_sim.generators import CommandScriptGenerator
from bank_sim.logging import setup_logging


def main() -> None:
    """Generate a command script file."""
    config = BankSimConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a bank-sim command script.")
    parser.add_argument("--accounts", type=int, default=5, help="Accounts to create")
    parser.add_argument("--operations", type=int, default=20, help="Operations after creation")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument("--unknown-rate", type=float, default=0.05,
                        help="Share of operations naming an owner with no account")
    parser.add_argument("-o", "--output", type=Path, default=project_root / "local" / "sample.txt",
                        help="Output file")
    args = parser.parse_args()

    setup_logging(level=config.log_level, format_type=config.log_format)

    generator = CommandScriptGenerator(seed=args.seed, unknown_owner_rate=args.unknown_rate)
    lines = generator.generate(num_accounts=args.accounts, num_operations=args.operations)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Saved {len(lines) - 1} commands to {args.output}")


if __name__ == "__main__":
    main()
