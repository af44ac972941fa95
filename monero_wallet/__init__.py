"""
Monero Wallet Shell
===================

Desktop shell for the Monero wallet: Qt layouts loaded from ``.ui`` files,
named widgets bound to typed handles, popovers wired to their buttons.
"""

__version__ = "0.1.0"
