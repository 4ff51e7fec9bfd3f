"""Locale routing and localized content helpers for the MoodShaker site."""
