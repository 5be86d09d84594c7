"""Bank account simulator driven from the terminal."""
