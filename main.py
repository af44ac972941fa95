#!/usr/bin/env python3
"""
Monero Wallet - launcher
========================

Desktop shell for the Monero wallet. Command-line arguments are passed to Qt.
"""

import sys

from monero_wallet.application import main

if __name__ == "__main__":
    sys.exit(main())
