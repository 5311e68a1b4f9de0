"""
Monero Denominations
Named monetary units, expressed in atomic units (piconero).

See https://getmonero.org/resources/moneropedia/denominations.html
"""

PICONERO = 1
NANONERO = 1_000 * PICONERO
MICRONERO = 1_000 * NANONERO
MILLINERO = 1_000 * MICRONERO
CENTINERO = 10 * MILLINERO
DECINERO = 10 * CENTINERO
MONERO = 10 * DECINERO
DECANERO = 10 * MONERO
HECTONERO = 10 * DECANERO
KILONERO = 10 * HECTONERO
MEGANERO = 1_000 * KILONERO
