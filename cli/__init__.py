"""Terminal presentation for the blackjack engine."""
