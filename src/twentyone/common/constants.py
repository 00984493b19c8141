# src/twentyone/common/constants.py

# Card set
SUITS = ("spades", "hearts", "clubs", "diamonds")
RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
FACE_RANKS = {"J", "Q", "K"}
ACE = "A"

SUIT_SYMBOLS = {"spades": "♠", "clubs": "♣", "hearts": "♥", "diamonds": "♦"}
RED_SUITS = {"hearts", "diamonds"}

# Values
ACE_SOFT_VALUE = 11
ACE_HARD_VALUE = 1
FACE_VALUE = 10

# Rules
TARGET = 21
DEALER_STANDS_ON = 17
STARTING_MONEY = 20

# Pacing (seconds)
DEAL_DELAY = 0.5
CARD_LINE_DELAY = 0.03
WARNING_DELAY = 0.08
MESSAGE_DELAY = 1.0

# Line input validation
NAME_PATTERN = r"^\w{1,10}$"
BET_PATTERN = r"^\d+$"

# Raw keystrokes
CTRL_C = "\x03"
INTERRUPT_EXIT_CODE = 1

TITLE = "TWENTY-ONE"
DEALER_NAME = "Dealer"
