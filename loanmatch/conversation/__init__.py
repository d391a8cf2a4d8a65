"""Conversational advisor: intent classification, sessions, templated replies."""
