"""Run the deposit-ledger menu with ``python -m deposit_ledger``."""

import sys

from deposit_ledger.cli import main

if __name__ == "__main__":
    sys.exit(main())
