"""Core math for scrollfix."""
