"""Twenty-one (blackjack) in the terminal: one player against the dealer."""

__version__ = "0.1.0"
