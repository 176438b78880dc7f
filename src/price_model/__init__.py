"""
price_model — движок модели цены ETH после перехода на proof-of-stake.

profits = revenue (burn) - expenses (issuance)
price = profits per ETH * P/E ratio * monetary premium
"""

__version__ = "0.1.0"
