#!/usr/bin/env python3
"""Example: wallet from a password, then restored from its mnemonic."""

from picowallet import Wallet, format_amount, parse_amount

wallet = Wallet().init(password="toto")
print("Mnemonic:", " ".join(wallet.mnemonic.split()[:3]) + " ...")
print("Address:", wallet.address)

restored = Wallet().init(mnemonic=wallet.mnemonic)
print("Same address:", restored.address == wallet.address)

units = parse_amount("1.23", 6)
print("1.23 at 6 decimals:", units, "->", format_amount(units, 6))
