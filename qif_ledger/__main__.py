import sys

from qif_ledger.cli import main

sys.exit(main())
