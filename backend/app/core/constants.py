"""Reward rule constants.

The rules are fixed for the whole ledger; amounts are in minor currency
units (cents).
"""

# Piano: minutes practiced within one Monday-Sunday week to earn the reward
PIANO_WEEKLY_GOAL_MINUTES = 150
PIANO_WEEKLY_REWARD = 50

# Tests: score percentage at or above which the reward is paid
TEST_AWARD_THRESHOLD_PCT = 95
TEST_REWARD = 100

# Incidents always cost this much (stored as a negative amount)
INCIDENT_PENALTY = 50

# Transaction types
TX_PIANO = "piano"
TX_TEST = "test"
TX_INCIDENT = "incident"
